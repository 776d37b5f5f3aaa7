# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Icon rendering.

``render`` is a pure projection of (value, settings) to icon descriptors.
``draw`` writes those descriptors into a host element, replacing whatever
was drawn before.

Example:
    icons = render(3, Settings("full", "empty", 5))
    [icon.state for icon in icons]
    # [FILLED, FILLED, FILLED, OUTLINE, OUTLINE]
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .protocols import HostElement
from .settings import Settings

INDEX_ATTRIBUTE = "data-sr-index"
ICON_TAG = "i"


class IconState(Enum):
    FILLED = "filled"
    OUTLINE = "outline"


@dataclass(frozen=True)
class IconDescriptor:
    """One rendered icon.

    Args:
        index: 1-based position in the row.
        state: Whether the icon is filled or outlined.
        icon_class: Class token taken from the effective settings.
    """

    index: int
    state: IconState
    icon_class: str


def render(value: float, settings: Settings) -> tuple[IconDescriptor, ...]:
    """Project a value onto ``settings.top_limit`` icon descriptors.

    Icon ``i`` is filled when ``i <= value``. A NaN value compares false
    against every index, so it renders all outlines.
    """
    icons = []
    for index in range(1, settings.top_limit + 1):
        if index <= value:
            icons.append(IconDescriptor(index, IconState.FILLED, settings.filled_icon))
        else:
            icons.append(IconDescriptor(index, IconState.OUTLINE, settings.outline_icon))
    return tuple(icons)


def draw(host: HostElement, icons: tuple[IconDescriptor, ...]) -> None:
    """Replace the host's content with one icon element per descriptor."""
    host.clear()
    for icon in icons:
        child = host.create_child(ICON_TAG)
        child.set_attribute(INDEX_ATTRIBUTE, str(icon.index))
        child.class_name = icon.icon_class

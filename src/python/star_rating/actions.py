# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Widget actions and the plugin-style entry point.

The three things a host can ask of a widget are a closed set of action
types. ``star_rating`` applies one to every element it is given, binding a
widget to each element on first use.

Example:
    star_rating(host)                   # Init()
    star_rating([a, b], Update(4))
    star_rating(host, Destroy())
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Union

from .protocols import HostElement
from .registry import WidgetRegistry
from .widget import StarRating


@dataclass(frozen=True)
class Init:
    """Activate the widget. ``content`` overrides the host text as the seed."""

    content: str | None = None


@dataclass(frozen=True)
class Destroy:
    pass


@dataclass(frozen=True)
class Update:
    value: int


Action = Union[Init, Destroy, Update]


def apply(widget: StarRating, action: Action) -> None:
    """Run ``action`` on ``widget``.

    Raises:
        TypeError: If ``action`` is not an Init, Destroy or Update.
    """
    if isinstance(action, Init):
        widget.init(action.content)
    elif isinstance(action, Destroy):
        widget.destroy()
    elif isinstance(action, Update):
        widget.update(action.value)
    else:
        raise TypeError(f"Unknown star rating action: {action!r}")


def star_rating(
    hosts: HostElement | Iterable[HostElement],
    action: Action | None = None,
    registry: WidgetRegistry | None = None,
    **options: Any,
) -> list[StarRating]:
    """Apply ``action`` (default Init) to each host element in order.

    Args:
        hosts: One element or an iterable of elements.
        action: The action to apply.
        registry: Registry binding elements to widgets. Defaults to the global one.
        **options: StarRating options used for newly bound widgets.

    Destroy also unbinds each widget from the registry, so a later call
    binds a fresh widget.

    Returns:
        The widgets bound to ``hosts``, in order.
    """
    if action is None:
        action = Init()
    if registry is None:
        registry = WidgetRegistry.instance()
    elements = [hosts] if isinstance(hosts, HostElement) else list(hosts)

    widgets = []
    for host in elements:
        widget = registry.get_or_create(host, **options)
        apply(widget, action)
        if isinstance(action, Destroy):
            registry.remove(host)
        widgets.append(widget)
    return widgets

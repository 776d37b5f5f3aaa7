# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Translate icon activations into value changes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .errors import UnmappedInteraction
from .host import CLICK
from .renderer import INDEX_ATTRIBUTE
from .listeners import ListenerRegistry

if TYPE_CHECKING:
    from .widget import StarRating

logger = logging.getLogger(__name__)


def read_index(target: Any) -> int:
    """Return the 1-based icon index carried by an event target.

    Raises:
        UnmappedInteraction: If the target has no readable index.
    """
    get_attribute = getattr(target, "get_attribute", None)
    raw = get_attribute(INDEX_ATTRIBUTE) if get_attribute is not None else None
    if not raw:
        raise UnmappedInteraction(f"{target!r} has no {INDEX_ATTRIBUTE}")
    try:
        return int(raw)
    except ValueError as e:
        raise UnmappedInteraction(f"Unreadable {INDEX_ATTRIBUTE} {raw!r}") from e


def next_value(index: int, current: float) -> int:
    """Toggle rule: activating the current value clears to zero."""
    return 0 if index == current else index


class InputHandler:
    """Listens for clicks bubbling to a widget's host element.

    Listeners are tracked per host in the ListenerRegistry. ``detach``
    releases every listener on the host, so a listener left by an earlier
    widget on the same element goes too.
    """

    def __init__(self, widget: StarRating, listeners: ListenerRegistry | None = None) -> None:
        self._widget = widget
        self._listeners = listeners if listeners is not None else ListenerRegistry.instance()
        self._attached = False

    @property
    def attached(self) -> bool:
        return self._attached

    def attach(self) -> None:
        if self._attached:
            return
        remove = self._widget.host.add_event_listener(CLICK, self.on_activate)
        self._listeners.track(self._widget.host, remove)
        self._attached = True

    def detach(self) -> None:
        self._listeners.release(self._widget.host)
        self._attached = False

    def on_activate(self, event: Any) -> None:
        try:
            index = read_index(event.target)
        except UnmappedInteraction as e:
            logger.debug("Ignoring activation: %s", e)
            return

        self._widget.update(next_value(index, self._widget.value))

# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Protocol definitions for the widget's collaborators.

The widget never depends on a concrete element or event transport. Any
object with the right methods works, no inheritance required.

Example:
    class MyPublisher:
        def __call__(self, name, element, args): ...

    widget = StarRating(element, emitter=EventEmitter(publish=MyPublisher()))
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class HostElement(Protocol):
    """Protocol for the display element a widget is bound to.

    ``star_rating.host.Element`` is the in-memory implementation.
    """

    text: str
    class_name: str

    def get_attribute(self, name: str) -> str | None:
        """Return the attribute value, or None if it is not set."""
        ...

    def set_attribute(self, name: str, value: str) -> None:
        ...

    def remove_attribute(self, name: str) -> None:
        ...

    def clear(self) -> None:
        """Remove all children and text."""
        ...

    def create_child(self, tag: str) -> HostElement:
        """Append a new child element and return it."""
        ...

    def add_event_listener(self, event_type: str, listener: Callable[[Any], None]) -> Callable[[], None]:
        """Listen for events bubbling to this element.

        Returns:
            Function that removes the listener.
        """
        ...


@runtime_checkable
class Publisher(Protocol):
    """Protocol for the transport that delivers widget events."""

    def __call__(self, name: str, element: Any, args: tuple[Any, ...]) -> None:
        """Deliver event ``name`` scoped to ``element`` with ordered ``args``."""
        ...

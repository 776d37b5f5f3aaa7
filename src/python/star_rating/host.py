# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""In-memory host element.

Element models the small slice of a display element the widget relies on:
text content, string attributes, an ordered list of child elements and
activation events that bubble from a child up to its ancestors.

Example:
    host = Element(text="3")
    widget = StarRating(host)
    widget.init()
    host.children[4].click()  # value becomes 5
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from threading import Lock
from typing import Callable

logger = logging.getLogger(__name__)

CLICK = "click"


@dataclass
class ActivationEvent:
    """An event dispatched to an element and bubbled to its ancestors.

    Attributes:
        type: Event type, e.g. ``"click"``.
        target: Element the event was dispatched on.
        current_target: Element whose listeners are currently running.
    """

    type: str
    target: Element
    current_target: Element | None = None
    propagation_stopped: bool = field(default=False, init=False)

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


class Element:
    """A display element with attributes, children and bubbling events."""

    def __init__(self, text: str = "", tag: str = "span", attributes: dict[str, str] | None = None) -> None:
        self.tag = tag
        self.class_name = ""
        self.parent: Element | None = None
        self._text = text
        self._attributes: dict[str, str] = dict(attributes or {})
        self._children: list[Element] = []
        self._listeners: dict[str, dict[int, Callable[[ActivationEvent], None]]] = {}
        self._lock = Lock()
        self._next_id = 0

    @property
    def text(self) -> str:
        """Own text followed by the text of all descendants."""
        return self._text + "".join(child.text for child in self._children)

    @text.setter
    def text(self, value: str) -> None:
        self.clear()
        self._text = value

    @property
    def children(self) -> tuple[Element, ...]:
        return tuple(self._children)

    @property
    def attributes(self) -> dict[str, str]:
        return dict(self._attributes)

    def get_attribute(self, name: str) -> str | None:
        return self._attributes.get(name)

    def set_attribute(self, name: str, value: str) -> None:
        self._attributes[name] = str(value)

    def remove_attribute(self, name: str) -> None:
        self._attributes.pop(name, None)

    def has_attribute(self, name: str) -> bool:
        return name in self._attributes

    def clear(self) -> None:
        for child in self._children:
            child.parent = None
        self._children = []
        self._text = ""

    def create_child(self, tag: str) -> Element:
        child = Element(tag=tag)
        child.parent = self
        self._children.append(child)
        return child

    def add_event_listener(
        self, event_type: str, listener: Callable[[ActivationEvent], None]
    ) -> Callable[[], None]:
        """Listen for ``event_type`` events on this element or its descendants.

        Returns:
            Function that removes the listener.
        """
        with self._lock:
            listener_id = self._next_id
            self._next_id += 1
            self._listeners.setdefault(event_type, {})[listener_id] = listener

        def remove() -> None:
            with self._lock:
                self._listeners.get(event_type, {}).pop(listener_id, None)

        return remove

    def listener_count(self, event_type: str) -> int:
        with self._lock:
            return len(self._listeners.get(event_type, {}))

    def dispatch(self, event: ActivationEvent) -> None:
        """Run listeners on this element, then on each ancestor in turn.

        A failing listener is logged and does not stop the others.
        """
        node: Element | None = self
        while node is not None and not event.propagation_stopped:
            event.current_target = node
            node._run_listeners(event)
            node = node.parent
        event.current_target = None

    def _run_listeners(self, event: ActivationEvent) -> None:
        with self._lock:
            listeners = list(self._listeners.get(event.type, {}).values())

        for listener in listeners:
            try:
                listener(event)
            except Exception as e:
                logger.error("Listener for '%s' on <%s> failed: %s", event.type, self.tag, e)

    def click(self) -> ActivationEvent:
        event = ActivationEvent(CLICK, target=self)
        self.dispatch(event)
        return event

    def __repr__(self) -> str:
        return f"<Element {self.tag} text={self.text!r} attributes={self._attributes!r}>"

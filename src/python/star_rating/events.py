# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Widget event publishing.

Widgets announce themselves through an EventEmitter, which appends a fixed
namespace suffix to every event name and hands the event to a publish
callable. By default that callable is the process-wide EventBus.

Events:
    ready.ferrl.star_rating(element): a widget finished ``init``.
    changed.ferrl.star_rating(element, value): a widget's value changed.

Example:
    bus = EventBus.instance()
    bus.subscribe("changed.ferrl.star_rating", lambda el, value: print(value))
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Any, Callable

from .protocols import Publisher

logger = logging.getLogger(__name__)

READY = "ready"
CHANGED = "changed"

DEFAULT_NAMESPACE = "ferrl"
MODULE_SUFFIX = "star_rating"


class EventBus:
    """Synchronous publish/subscribe keyed by full event name.

    Subscribers are called in subscription order with the element followed
    by the event arguments. A failing subscriber is logged and does not stop
    delivery to the rest.
    """

    _instance: EventBus | None = None

    def __init__(self) -> None:
        self._subscribers: dict[str, dict[int, Callable[..., None]]] = {}
        self._lock = Lock()
        self._next_id = 0

    @classmethod
    def instance(cls) -> EventBus:
        """Get the global bus instance."""
        if cls._instance is None:
            cls._instance = EventBus()
        return cls._instance

    def subscribe(self, name: str, callback: Callable[..., None]) -> Callable[[], None]:
        """Subscribe to an event name.

        Args:
            name: Full event name, e.g. ``"ready.ferrl.star_rating"``.
            callback: Called as ``callback(element, *args)``.

        Returns:
            Unsubscribe function.
        """
        with self._lock:
            sub_id = self._next_id
            self._next_id += 1
            self._subscribers.setdefault(name, {})[sub_id] = callback

        def unsubscribe() -> None:
            with self._lock:
                self._subscribers.get(name, {}).pop(sub_id, None)

        return unsubscribe

    def publish(self, name: str, element: Any, args: tuple[Any, ...] = ()) -> None:
        with self._lock:
            callbacks = list(self._subscribers.get(name, {}).values())

        for callback in callbacks:
            try:
                callback(element, *args)
            except Exception as e:
                logger.error("Subscriber to '%s' failed: %s", name, e)

    __call__ = publish

    def clear(self) -> None:
        """Drop every subscription. Used during shutdown or testing."""
        with self._lock:
            self._subscribers.clear()


def event_name(name: str, namespace: str = DEFAULT_NAMESPACE) -> str:
    return f"{name}.{namespace}.{MODULE_SUFFIX}"


class EventEmitter:
    """Namespaced event emission on behalf of a widget.

    Args:
        namespace: Middle part of the event suffix.
        publish: Transport for events. Defaults to the global EventBus,
            looked up at emit time.
    """

    def __init__(self, namespace: str = DEFAULT_NAMESPACE, publish: Publisher | None = None) -> None:
        self.namespace = namespace
        self._publish = publish

    def name_for(self, name: str) -> str:
        return event_name(name, self.namespace)

    def emit(self, name: str, element: Any, *payload: Any) -> None:
        """Publish ``name`` with the namespace suffix. Never raises."""
        full_name = self.name_for(name)
        publish = self._publish or EventBus.instance()
        try:
            publish(full_name, element, payload)
        except Exception as e:
            logger.error("Publishing '%s' failed: %s", full_name, e)

# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Widget registry.

The WidgetRegistry keeps exactly one StarRating per host element and hands
out opaque handles so host code can find a widget again without holding on
to it.

Example:
    registry = WidgetRegistry()
    widget = registry.get_or_create(host)
    registry.get_by_handle(widget.handle) is widget  # True
"""

from __future__ import annotations

from threading import Lock
from typing import Any, Dict

from .protocols import HostElement
from .widget import StarRating


class WidgetRegistry:
    """Binds host elements to widgets, one widget per element."""

    _instance: WidgetRegistry | None = None

    def __init__(self) -> None:
        self._by_host: Dict[int, StarRating] = {}
        self._by_handle: Dict[int, StarRating] = {}
        self._lock = Lock()

    @classmethod
    def instance(cls) -> WidgetRegistry:
        """Get the global registry instance."""
        if cls._instance is None:
            cls._instance = WidgetRegistry()
        return cls._instance

    def get_or_create(self, host: HostElement, **options: Any) -> StarRating:
        """Get the widget bound to ``host``, creating it on first access.

        Args:
            host: The host element.
            **options: Passed to StarRating when the widget is created.
                Ignored if the widget already exists.
        """
        with self._lock:
            widget = self._by_host.get(id(host))
            if widget is None:
                widget = StarRating(host, **options)
                self._by_host[id(host)] = widget
                self._by_handle[widget.handle] = widget
            return widget

    def get(self, host: HostElement) -> StarRating | None:
        with self._lock:
            return self._by_host.get(id(host))

    def get_by_handle(self, handle: int) -> StarRating | None:
        with self._lock:
            return self._by_handle.get(handle)

    def remove(self, host: HostElement) -> StarRating | None:
        """Forget the widget bound to ``host``. The widget is not destroyed."""
        with self._lock:
            widget = self._by_host.pop(id(host), None)
            if widget is not None:
                self._by_handle.pop(widget.handle, None)
            return widget

    def clear(self) -> None:
        """Forget all widgets. Used during shutdown or testing."""
        with self._lock:
            self._by_host.clear()
            self._by_handle.clear()

    def __len__(self) -> int:
        return len(self._by_host)

    def __contains__(self, host: object) -> bool:
        return id(host) in self._by_host

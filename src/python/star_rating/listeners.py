# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Click listeners attached to host elements, tracked per host.

Any widget bound to a host can release every listener on it, including one
left behind by an earlier widget that was never destroyed.
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)


class ListenerRegistry:
    """Maps host elements to the functions that remove their listeners."""

    _instance: ListenerRegistry | None = None

    def __init__(self) -> None:
        self._removers: Dict[int, List[Callable[[], None]]] = {}
        self._lock = Lock()

    @classmethod
    def instance(cls) -> ListenerRegistry:
        """Get the global registry instance."""
        if cls._instance is None:
            cls._instance = ListenerRegistry()
        return cls._instance

    def track(self, host: Any, remove: Callable[[], None]) -> None:
        """Remember ``remove`` as a way to drop a listener on ``host``."""
        with self._lock:
            self._removers.setdefault(id(host), []).append(remove)

    def count(self, host: Any) -> int:
        with self._lock:
            return len(self._removers.get(id(host), ()))

    def release(self, host: Any) -> int:
        """Remove every tracked listener on ``host``. Returns how many were removed."""
        with self._lock:
            removers = self._removers.pop(id(host), [])

        released = 0
        for remove in removers:
            try:
                remove()
                released += 1
            except Exception as e:
                logger.error("Removing a listener from %r failed: %s", host, e)
        return released

# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Layered settings for star rating widgets.

Settings come from three layers, highest priority first:

    1. The instance override, a JSON object string stored on the host
       element under ``data-sr-settings``.
    2. The process-wide override held by ``GlobalSettings``.
    3. ``DEFAULT_SETTINGS``.

Layers are deep-merged on every call and never cached, so changing the
global override is picked up by the next render of every widget.

Example:
    GlobalSettings.set({"topLimit": 10})
    resolve('{"filledIcon": "fa fa-star"}')
    # {'filledIcon': 'fa fa-star', 'outlineIcon': '...', 'topLimit': 10}
"""

from __future__ import annotations

import copy
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from threading import Lock
from typing import Any

from .errors import ConfigParseError

logger = logging.getLogger(__name__)

FILLED_ICON = "filledIcon"
OUTLINE_ICON = "outlineIcon"
TOP_LIMIT = "topLimit"

DEFAULT_SETTINGS: Mapping[str, Any] = {
    FILLED_ICON: "glyphicon glyphicon-star",
    OUTLINE_ICON: "glyphicon glyphicon-star-empty",
    TOP_LIMIT: 5,
}


@dataclass(frozen=True)
class Settings:
    """Effective settings of a widget.

    Attributes:
        filled_icon: Class token for icons at or below the value.
        outline_icon: Class token for icons above the value.
        top_limit: Number of icons, also the highest selectable value.
    """

    filled_icon: str
    outline_icon: str
    top_limit: int

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> Settings:
        """Build typed settings from a merged mapping.

        Raises:
            ConfigParseError: If a field is missing or has the wrong type.
        """
        try:
            filled = mapping[FILLED_ICON]
            outline = mapping[OUTLINE_ICON]
            top_limit = mapping[TOP_LIMIT]
        except KeyError as e:
            raise ConfigParseError(f"Missing setting {e.args[0]!r}", mapping) from e

        if not isinstance(filled, str) or not isinstance(outline, str):
            raise ConfigParseError("Icon classes must be strings", mapping)
        if isinstance(top_limit, bool) or not isinstance(top_limit, int) or top_limit < 1:
            raise ConfigParseError(
                f"{TOP_LIMIT} must be a positive integer, got {top_limit!r}", mapping
            )

        return cls(filled_icon=filled, outline_icon=outline, top_limit=top_limit)

    def to_mapping(self) -> dict[str, Any]:
        return {
            FILLED_ICON: self.filled_icon,
            OUTLINE_ICON: self.outline_icon,
            TOP_LIMIT: self.top_limit,
        }


class GlobalSettings:
    """Process-wide settings override shared by all widgets.

    The host application sets this once (or whenever it likes). Widgets read
    it through their settings provider, which defaults to ``GlobalSettings.get``.
    """

    _override: Mapping[str, Any] | None = None
    _lock = Lock()

    @classmethod
    def set(cls, override: Mapping[str, Any] | None) -> None:
        with cls._lock:
            cls._override = copy.deepcopy(dict(override)) if override is not None else None
        logger.debug("Global star rating settings set to %r", cls._override)

    @classmethod
    def get(cls) -> Mapping[str, Any] | None:
        return cls._override

    @classmethod
    def reset(cls) -> None:
        """Drop the global override. Used during shutdown or testing."""
        with cls._lock:
            cls._override = None


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``override`` onto ``base`` without mutating either.

    Nested mappings are merged recursively; any other value in ``override``
    replaces the one in ``base``.
    """
    merged = copy.deepcopy(dict(base))
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def parse_override(serialized: str | Mapping[str, Any]) -> Mapping[str, Any]:
    """Decode an instance override.

    Accepts a JSON object string or an already decoded mapping.

    Raises:
        ConfigParseError: If the string is not JSON or not a JSON object.
    """
    if isinstance(serialized, Mapping):
        return serialized

    try:
        decoded = json.loads(serialized)
    except (TypeError, ValueError) as e:
        raise ConfigParseError(f"Invalid settings override: {e}", serialized) from e

    if not isinstance(decoded, dict):
        raise ConfigParseError(
            f"Settings override must be a JSON object, got {type(decoded).__name__}",
            serialized,
        )
    return decoded


def resolve(
    instance_override: str | Mapping[str, Any] | None = None,
    global_override: Mapping[str, Any] | None = None,
    key: str | None = None,
    defaults: Mapping[str, Any] = DEFAULT_SETTINGS,
) -> Any:
    """Resolve effective settings from the three layers.

    Args:
        instance_override: Serialized (or decoded) per-widget override.
        global_override: Process-wide override.
        key: If given and present in the result, only that value is returned.
        defaults: Lowest layer.

    Returns:
        The merged settings mapping, or the value of ``key``. An unknown key
        returns the whole mapping rather than failing.

    Raises:
        ConfigParseError: If ``instance_override`` is not a valid override.
    """
    merged = copy.deepcopy(dict(defaults))
    if global_override is not None:
        merged = deep_merge(merged, global_override)
    if instance_override is not None:
        merged = deep_merge(merged, parse_override(instance_override))

    if key is not None and key in merged:
        return merged[key]
    return merged

# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Star rating widget lifecycle.

A StarRating binds to one host element. ``init`` reads the element's numeric
text, replaces it with a row of icons and starts listening for clicks;
``destroy`` turns the element back into the plain numeral.

The widget's state lives in a WidgetRecord it owns. The host element's
attributes mirror that record so host code can inspect the widget:

    data-sr-init      "true" while the widget is active
    data-sr-value     current value ("NaN" for a non-numeric seed)
    data-sr-settings  optional JSON settings override, written by host code

Every state change resolves settings first, then renders, then emits its
event, so observers always see the new icons.

Example:
    host = Element(text="3")
    widget = StarRating(host)
    widget.init()
    widget.value           # 3
    host.children[2].click()
    widget.value           # 0
"""

from __future__ import annotations

import itertools
import logging
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping, Optional

from .errors import InvalidNumericContent
from .events import CHANGED, READY, EventEmitter
from .input_handler import InputHandler
from .protocols import HostElement
from .renderer import IconDescriptor, draw, render
from .settings import GlobalSettings, Settings, resolve
from .listeners import ListenerRegistry

logger = logging.getLogger(__name__)

INIT_ATTRIBUTE = "data-sr-init"
VALUE_ATTRIBUTE = "data-sr-value"
SETTINGS_ATTRIBUTE = "data-sr-settings"

_INTEGER_PREFIX = re.compile(r"\s*([+-]?\d+)")
_handles = itertools.count(1)

SettingsProvider = Callable[[], Optional[Mapping[str, Any]]]


class LifecycleState(Enum):
    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"


@dataclass
class WidgetRecord:
    """Authoritative widget state. ``value`` is None until the first init."""

    initialized: bool = False
    value: float | None = None


def parse_value(content: str) -> int:
    """Read leading base-10 digits the way ``parseInt`` does.

    Leading whitespace and a sign are accepted and trailing text is ignored,
    so ``" 4 stars"`` reads as 4.

    Raises:
        InvalidNumericContent: If no digits lead the content.
    """
    match = _INTEGER_PREFIX.match(content)
    if match is None:
        raise InvalidNumericContent(content)
    return int(match.group(1))


def format_value(value: float) -> str:
    if isinstance(value, float) and math.isnan(value):
        return "NaN"
    return str(value)


class StarRating:
    """An interactive rating picker bound to a host element.

    Args:
        host: Element to render into. Borrowed, not owned.
        emitter: Event emitter. Defaults to one publishing on the global bus.
        settings_provider: Returns the process-wide settings override.
            Called on every render, so changes apply on the next render.
        listeners: Registry tracking click listeners per host.
    """

    def __init__(
        self,
        host: HostElement,
        emitter: EventEmitter | None = None,
        settings_provider: SettingsProvider | None = None,
        listeners: ListenerRegistry | None = None,
    ) -> None:
        self.host = host
        self.handle = next(_handles)
        self._emitter = emitter or EventEmitter()
        self._settings_provider = settings_provider or GlobalSettings.get
        self._record = WidgetRecord()
        self._icons: tuple[IconDescriptor, ...] = ()
        self._input = InputHandler(self, listeners)

    @property
    def state(self) -> LifecycleState:
        return LifecycleState.ACTIVE if self._record.initialized else LifecycleState.UNINITIALIZED

    @property
    def initialized(self) -> bool:
        return self._record.initialized

    @property
    def value(self) -> float | None:
        return self._record.value

    @property
    def icons(self) -> tuple[IconDescriptor, ...]:
        """Descriptors from the most recent render."""
        return self._icons

    @property
    def listening(self) -> bool:
        return self._input.attached

    def settings(self, key: str | None = None) -> Any:
        """Resolve settings now from the host override, global override and defaults."""
        return resolve(self.host.get_attribute(SETTINGS_ATTRIBUTE), self._settings_provider(), key)

    def effective_settings(self) -> Settings:
        return Settings.from_mapping(self.settings())

    def init(self, raw_content: str | None = None) -> None:
        """Activate the widget, seeding the value from ``raw_content`` or the host text.

        Re-initializing destroys first, whether this widget or an earlier one
        left the host active.

        Raises:
            ConfigParseError: The settings override is invalid. Nothing changes.
        """
        settings = self.effective_settings()

        if self._record.initialized or self.host.get_attribute(INIT_ATTRIBUTE):
            self.destroy()

        content = self.host.text if raw_content is None else raw_content
        try:
            value: float = parse_value(content)
        except InvalidNumericContent as e:
            logger.warning("Star rating %d: %s, rendering as unset", self.handle, e)
            value = math.nan

        self._record = WidgetRecord(initialized=True, value=value)
        self._mirror()
        self._draw(settings)
        self._input.attach()

        logger.debug("Star rating %d ready with value %s", self.handle, format_value(value))
        self._emitter.emit(READY, self.host)

    def destroy(self) -> None:
        """Return the host to a plain numeral of the last known value.

        Safe on an uninitialized widget: whatever numeral the host shows (or
        a value attribute left on it) is written back as its text.
        """
        if self._record.initialized:
            value = format_value(self._record.value)
        else:
            value = self.host.get_attribute(VALUE_ATTRIBUTE) or self.host.text

        self._input.detach()
        self._record = WidgetRecord()
        self._icons = ()
        self.host.remove_attribute(INIT_ATTRIBUTE)
        self.host.remove_attribute(VALUE_ATTRIBUTE)
        self.host.text = value

    def update(self, value: int) -> None:
        """Set a new value, re-render and emit ``changed``.

        The value is stored as given; range is only enforced by the icons a
        user can click.

        Raises:
            ConfigParseError: The settings override is invalid. Nothing changes.
        """
        if not self._record.initialized:
            logger.warning("Star rating %d: update(%r) ignored, widget is not initialized", self.handle, value)
            return

        settings = self.effective_settings()
        if isinstance(value, (int, float)) and not 0 <= value <= settings.top_limit:
            logger.warning("Star rating %d: value %r is outside 0..%d", self.handle, value, settings.top_limit)

        self._record.value = value
        self._mirror()
        self._draw(settings)

        self._emitter.emit(CHANGED, self.host, value)

    def render(self) -> tuple[IconDescriptor, ...]:
        """Redraw with freshly resolved settings. No event is emitted."""
        settings = self.effective_settings()
        if not self._record.initialized:
            return ()
        self._draw(settings)
        return self._icons

    def _mirror(self) -> None:
        self.host.set_attribute(INIT_ATTRIBUTE, "true")
        self.host.set_attribute(VALUE_ATTRIBUTE, format_value(self._record.value))

    def _draw(self, settings: Settings) -> None:
        icons = render(self._record.value, settings)
        draw(self.host, icons)
        self._icons = icons

    def __repr__(self) -> str:
        value = format_value(self._record.value) if self._record.value is not None else "-"
        return f"<StarRating #{self.handle} {self.state.value} value={value}>"

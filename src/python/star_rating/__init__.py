# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Interactive star rating widget.

This package provides:

- A lifecycle-managed rating widget bound to a host element
- Layered settings (instance, global, defaults)
- Pure icon rendering
- Namespaced ready/changed events

Usage:
    from star_rating import Element, EventBus, star_rating, Update

    host = Element(text="3")
    EventBus.instance().subscribe(
        "changed.ferrl.star_rating", lambda el, value: print(value)
    )
    star_rating(host)            # three of five stars filled
    host.children[3].click()     # prints 4
"""

from .errors import ConfigParseError, InvalidNumericContent, StarRatingError, UnmappedInteraction
from .settings import DEFAULT_SETTINGS, GlobalSettings, Settings, resolve
from .renderer import IconDescriptor, IconState, draw, render
from .host import ActivationEvent, Element
from .events import CHANGED, READY, EventBus, EventEmitter, event_name
from .listeners import ListenerRegistry
from .input_handler import InputHandler
from .widget import LifecycleState, StarRating
from .registry import WidgetRegistry
from .actions import Action, Destroy, Init, Update, apply, star_rating
from .protocols import HostElement, Publisher

__all__ = [
    # Errors
    "StarRatingError",
    "ConfigParseError",
    "InvalidNumericContent",
    "UnmappedInteraction",
    # Settings
    "DEFAULT_SETTINGS",
    "GlobalSettings",
    "Settings",
    "resolve",
    # Rendering
    "IconDescriptor",
    "IconState",
    "render",
    "draw",
    # Host
    "ActivationEvent",
    "Element",
    # Events
    "READY",
    "CHANGED",
    "EventBus",
    "EventEmitter",
    "event_name",
    "ListenerRegistry",
    # Widget
    "InputHandler",
    "LifecycleState",
    "StarRating",
    "WidgetRegistry",
    # Actions
    "Action",
    "Init",
    "Destroy",
    "Update",
    "apply",
    "star_rating",
    # Protocols
    "HostElement",
    "Publisher",
]

# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Shared fixtures for star rating tests."""

import pytest

from star_rating import EventBus, EventEmitter, GlobalSettings, ListenerRegistry, WidgetRegistry


@pytest.fixture(autouse=True)
def reset_process_state():
    """Process-wide settings, buses and registries start empty for every test."""
    GlobalSettings.reset()
    EventBus._instance = None
    WidgetRegistry._instance = None
    ListenerRegistry._instance = None
    yield
    GlobalSettings.reset()


class EventRecorder:
    """Publisher that records every event it is asked to deliver."""

    def __init__(self):
        self.events = []

    def __call__(self, name, element, args):
        self.events.append((name, element, args))

    def named(self, name):
        return [event for event in self.events if event[0] == name]


@pytest.fixture
def recorder():
    return EventRecorder()


@pytest.fixture
def emitter(recorder):
    return EventEmitter(publish=recorder)

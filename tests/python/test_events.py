# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Tests for event emission and the event bus."""

import pytest

from star_rating.events import CHANGED, READY, EventBus, EventEmitter, event_name


class TestEventName:
    """Tests for namespaced names."""

    def test_default_namespace(self):
        """Names get the ferrl namespace and module suffix."""
        assert event_name(READY) == "ready.ferrl.star_rating"
        assert event_name(CHANGED) == "changed.ferrl.star_rating"

    def test_custom_namespace(self):
        """The namespace is configurable."""
        assert EventEmitter(namespace="shop").name_for("ready") == "ready.shop.star_rating"


class TestEventEmitter:
    """Tests for EventEmitter."""

    def test_emit_payload_order(self, recorder):
        """Payload is passed as an ordered tuple."""
        EventEmitter(publish=recorder).emit("changed", "el", 4, "extra")
        assert recorder.events == [("changed.ferrl.star_rating", "el", (4, "extra"))]

    def test_emit_without_payload(self, recorder):
        """ready carries only the element."""
        EventEmitter(publish=recorder).emit("ready", "el")
        assert recorder.events == [("ready.ferrl.star_rating", "el", ())]

    def test_emit_never_raises(self):
        """A failing publisher is logged, not raised."""

        def broken(name, element, args):
            raise RuntimeError("transport down")

        EventEmitter(publish=broken).emit("ready", "el")

    def test_default_publisher_is_bus(self):
        """Without a publisher events go to the global bus."""
        received = []
        EventBus.instance().subscribe("changed.ferrl.star_rating", lambda el, value: received.append((el, value)))
        EventEmitter().emit("changed", "el", 2)
        assert received == [("el", 2)]


class TestEventBus:
    """Tests for EventBus."""

    def test_delivers_in_order(self):
        """Subscribers run in subscription order."""
        bus = EventBus()
        calls = []
        bus.subscribe("x", lambda el: calls.append("a"))
        bus.subscribe("x", lambda el: calls.append("b"))
        bus.publish("x", None)
        assert calls == ["a", "b"]

    def test_only_matching_name(self):
        """Subscribers only see their event name."""
        bus = EventBus()
        calls = []
        bus.subscribe("ready.ferrl.star_rating", lambda el: calls.append(el))
        bus.publish("ready.other.star_rating", "el")
        assert calls == []

    def test_unsubscribe(self):
        """Unsubscribe stops delivery."""
        bus = EventBus()
        calls = []
        unsub = bus.subscribe("x", lambda el: calls.append(el))
        unsub()
        bus.publish("x", "el")
        assert calls == []

    def test_subscriber_error_isolated(self):
        """A failing subscriber does not stop the others."""
        bus = EventBus()
        calls = []

        def bad(el):
            raise ValueError("Oops")

        bus.subscribe("x", bad)
        bus.subscribe("x", lambda el: calls.append(el))
        bus.publish("x", "el")
        assert calls == ["el"]

    def test_callable_as_publisher(self):
        """The bus itself can be injected as a publisher."""
        bus = EventBus()
        calls = []
        bus.subscribe("ready.ferrl.star_rating", lambda el: calls.append(el))
        EventEmitter(publish=bus).emit("ready", "el")
        assert calls == ["el"]

    def test_clear(self):
        """clear drops every subscription."""
        bus = EventBus()
        calls = []
        bus.subscribe("x", lambda el: calls.append(el))
        bus.clear()
        bus.publish("x", "el")
        assert calls == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

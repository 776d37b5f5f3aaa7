# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Tests for the in-memory host element."""

import pytest

from star_rating.host import CLICK, ActivationEvent, Element
from star_rating.protocols import HostElement


class TestElement:
    """Tests for Element content and attributes."""

    def test_satisfies_protocol(self):
        """Element is a HostElement."""
        assert isinstance(Element(), HostElement)

    def test_text_includes_children(self):
        """text concatenates own and descendant text."""
        host = Element(text="a")
        child = host.create_child("b")
        child.text = "b"
        assert host.text == "ab"

    def test_setting_text_drops_children(self):
        """Assigning text replaces children."""
        host = Element()
        child = host.create_child("i")
        host.text = "5"
        assert host.children == ()
        assert child.parent is None
        assert host.text == "5"

    def test_attributes(self):
        """Attributes are strings and removable."""
        host = Element()
        host.set_attribute("data-x", 3)
        assert host.get_attribute("data-x") == "3"
        assert host.has_attribute("data-x")
        host.remove_attribute("data-x")
        host.remove_attribute("data-x")
        assert host.get_attribute("data-x") is None

    def test_attributes_copy(self):
        """attributes returns a copy."""
        host = Element(attributes={"a": "1"})
        host.attributes["a"] = "2"
        assert host.get_attribute("a") == "1"


class TestEvents:
    """Tests for event dispatch."""

    def test_bubbles_to_parent(self):
        """A child's click reaches the parent's listeners."""
        host = Element()
        child = host.create_child("i")
        seen = []
        host.add_event_listener(CLICK, lambda event: seen.append((event.target, event.current_target)))
        child.click()
        assert seen == [(child, host)]

    def test_stop_propagation(self):
        """Stopping propagation keeps the event from the parent."""
        host = Element()
        child = host.create_child("i")
        seen = []
        child.add_event_listener(CLICK, lambda event: event.stop_propagation())
        host.add_event_listener(CLICK, lambda event: seen.append(event))
        child.click()
        assert seen == []

    def test_other_types_ignored(self):
        """Listeners only see their event type."""
        host = Element()
        seen = []
        host.add_event_listener(CLICK, seen.append)
        host.dispatch(ActivationEvent("hover", target=host))
        assert seen == []

    def test_remove_listener(self):
        """The returned function removes the listener."""
        host = Element()
        seen = []
        remove = host.add_event_listener(CLICK, seen.append)
        assert host.listener_count(CLICK) == 1
        remove()
        host.click()
        assert seen == []
        assert host.listener_count(CLICK) == 0

    def test_listener_error_isolated(self):
        """A failing listener does not stop the next one."""
        host = Element()
        seen = []

        def bad(event):
            raise RuntimeError("Oops")

        host.add_event_listener(CLICK, bad)
        host.add_event_listener(CLICK, seen.append)
        host.click()
        assert len(seen) == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

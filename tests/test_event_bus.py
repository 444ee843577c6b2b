"""
Tests for the event bus system.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from unittest.mock import Mock

import pytest

from library_catalog.events import EventBus, DomainEvent, ItemAdded, ItemRemoved


@dataclass(kw_only=True)
class CustomEvent(DomainEvent):
    """Test event."""
    data: str = "default"

    def _get_event_data(self):
        return {"data": self.data}


@dataclass(kw_only=True)
class ChildEvent(CustomEvent):
    """Subclass of the test event."""
    pass


@pytest.fixture
def event_bus():
    """Create fresh event bus for each test."""
    bus = EventBus()
    yield bus
    bus.clear()


class TestDomainEvent:
    """Test the DomainEvent base class."""

    def test_defaults(self):
        event = CustomEvent()

        assert event.event_id.startswith("evt_")
        assert isinstance(event.timestamp, datetime)
        assert event.aggregate_type is None
        assert event.version == 1
        assert event.metadata == {}

    def test_unique_ids(self):
        assert CustomEvent().event_id != CustomEvent().event_id

    def test_to_dict(self):
        event = ItemAdded(
            aggregate_type="CatalogItem",
            title="Dune",
            author="Frank Herbert",
            kind="Book",
        )

        result = event.to_dict()

        assert result["event_type"] == "ItemAdded"
        assert result["aggregate_type"] == "CatalogItem"
        assert result["data"] == {"title": "Dune", "author": "Frank Herbert", "kind": "Book"}
        assert result["timestamp"] == event.timestamp.isoformat()


class TestEventBus:
    """Test publishing and subscribing."""

    def test_subscribe_and_publish(self, event_bus):
        handler = Mock()
        event_bus.subscribe(CustomEvent, handler)

        event = CustomEvent(data="hello")
        event_bus.publish(event)

        handler.assert_called_once_with(event)

    def test_handlers_only_receive_their_type(self, event_bus):
        added = Mock()
        removed = Mock()
        event_bus.subscribe(ItemAdded, added)
        event_bus.subscribe(ItemRemoved, removed)

        event_bus.publish(ItemAdded(title="Dune", author="Frank Herbert", kind="Book"))

        added.assert_called_once()
        removed.assert_not_called()

    def test_parent_handlers_receive_subclasses(self, event_bus):
        parent = Mock()
        event_bus.subscribe(CustomEvent, parent)

        event_bus.publish(ChildEvent(data="child"))

        parent.assert_called_once()

    def test_base_handler_receives_everything(self, event_bus):
        seen = []
        event_bus.subscribe(DomainEvent, seen.append)

        event_bus.publish(ItemAdded(title="A", author="B", kind="CD"))
        event_bus.publish(CustomEvent())

        assert [type(e) for e in seen] == [ItemAdded, CustomEvent]

    def test_handlers_run_in_subscription_order(self, event_bus):
        calls = []
        event_bus.subscribe(CustomEvent, lambda e: calls.append("first"))
        event_bus.subscribe(CustomEvent, lambda e: calls.append("second"))

        event_bus.publish(CustomEvent())

        assert calls == ["first", "second"]

    def test_unsubscribe(self, event_bus):
        handler = Mock()
        event_bus.subscribe(CustomEvent, handler)
        event_bus.unsubscribe(CustomEvent, handler)

        event_bus.publish(CustomEvent())

        handler.assert_not_called()

    def test_unsubscribe_unknown_type(self, event_bus):
        event_bus.unsubscribe(CustomEvent, Mock())

    def test_failing_handler_is_logged_and_skipped(self, event_bus, caplog):
        """Test that one failing handler does not stop the others."""
        after = Mock()
        event_bus.subscribe(CustomEvent, Mock(side_effect=ValueError("boom")))
        event_bus.subscribe(CustomEvent, after)

        with caplog.at_level(logging.ERROR, logger="library_catalog"):
            event_bus.publish(CustomEvent())

        after.assert_called_once()
        assert "Error in event handler" in caplog.text


class TestEventStore:
    """Test the in-memory event history."""

    def test_get_events_by_type(self, event_bus):
        event_bus.publish(ItemAdded(title="A", author="B", kind="CD"))
        event_bus.publish(ItemRemoved(title="A", author="B", kind="CD"))

        assert len(event_bus.get_events()) == 2
        assert [type(e) for e in event_bus.get_events(ItemRemoved)] == [ItemRemoved]

    def test_get_events_since(self, event_bus):
        old = CustomEvent(timestamp=datetime.now() - timedelta(hours=1))
        new = CustomEvent()
        event_bus.publish(old)
        event_bus.publish(new)

        assert event_bus.get_events(since=datetime.now() - timedelta(minutes=1)) == [new]

    def test_history_is_bounded(self):
        bus = EventBus(max_events_in_memory=2)
        events = [CustomEvent(data=str(i)) for i in range(3)]
        for event in events:
            bus.publish(event)

        assert bus.get_events() == events[1:]

    def test_clear(self, event_bus):
        handler = Mock()
        event_bus.subscribe(CustomEvent, handler)
        event_bus.publish(CustomEvent())

        event_bus.clear()
        event_bus.publish(CustomEvent())

        handler.assert_called_once()
        assert len(event_bus.get_events()) == 1

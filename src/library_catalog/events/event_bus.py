"""
Event Bus - Event-driven communication system.

This module provides a lightweight, synchronous event bus for domain
events, enabling loose coupling between the catalog and its observers.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar
from uuid import uuid4

logger = logging.getLogger(__name__)


T = TypeVar('T', bound='DomainEvent')


@dataclass
class DomainEvent:
    """Base class for all domain events."""
    event_id: str = field(default_factory=lambda: f"evt_{uuid4().hex}")
    timestamp: datetime = field(default_factory=datetime.now)
    aggregate_type: Optional[str] = None
    version: int = 1
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary for serialization."""
        return {
            "event_type": self.__class__.__name__,
            "event_id": self.event_id,
            "timestamp": self.timestamp.isoformat(),
            "aggregate_type": self.aggregate_type,
            "version": self.version,
            "metadata": self.metadata,
            "data": self._get_event_data(),
        }

    def _get_event_data(self) -> Dict[str, Any]:
        """Get event-specific data for serialization."""
        return {}


class EventBus:
    """
    Central event bus for publishing and subscribing to domain events.

    Handlers run synchronously, in subscription order, on the thread that
    publishes. Handlers subscribed to a parent event class also receive
    its subclasses.
    """

    def __init__(self, max_events_in_memory: int = 1000):
        self._handlers: Dict[Type[DomainEvent], List[Callable]] = {}
        self._event_store: List[DomainEvent] = []
        self._max_events_in_memory = max_events_in_memory

    def subscribe(
        self,
        event_type: Type[T],
        handler: Callable[[T], Any]
    ) -> None:
        """
        Subscribe to events of a specific type.

        Args:
            event_type: The event class to subscribe to
            handler: Callable invoked with each published event
        """
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(
        self,
        event_type: Type[DomainEvent],
        handler: Callable
    ) -> None:
        """
        Unsubscribe from events.
        """
        if event_type in self._handlers:
            self._handlers[event_type] = [
                h for h in self._handlers[event_type] if h != handler
            ]

    def publish(self, event: DomainEvent) -> None:
        """
        Publish an event to all subscribers.

        A handler that raises is logged and skipped; the remaining
        handlers still run.
        """
        self._event_store.append(event)
        if len(self._event_store) > self._max_events_in_memory:
            self._event_store.pop(0)

        handlers = []
        for event_type in type(event).__mro__:
            if event_type in self._handlers:
                handlers.extend(self._handlers[event_type])

        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception(
                    "Error in event handler %r for %s",
                    handler, type(event).__name__
                )

    def get_events(
        self,
        event_type: Optional[Type[DomainEvent]] = None,
        since: Optional[datetime] = None
    ) -> List[DomainEvent]:
        """
        Get events from the store with optional filtering.
        """
        filtered_events = list(self._event_store)

        if event_type:
            filtered_events = [e for e in filtered_events if isinstance(e, event_type)]

        if since:
            filtered_events = [e for e in filtered_events if e.timestamp >= since]

        return filtered_events

    def clear(self) -> None:
        """Clear all handlers and events."""
        self._handlers.clear()
        self._event_store.clear()

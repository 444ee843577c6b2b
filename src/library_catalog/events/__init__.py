"""
Event System - Domain Events

This package implements in-process domain events so that other parts of
an application can react to catalog changes without the catalog knowing
about them.
"""

from .event_bus import EventBus, DomainEvent
from .domain_events import ItemAdded, ItemRemoved

__all__ = [
    # Core event system
    "EventBus",
    "DomainEvent",
    # Domain events
    "ItemAdded",
    "ItemRemoved",
]

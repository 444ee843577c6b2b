"""
Domain Events - Specific event implementations.

This module defines the events the catalog facade publishes.
"""

from dataclasses import dataclass
from typing import Any, Dict

from .event_bus import DomainEvent


@dataclass(kw_only=True)
class ItemAdded(DomainEvent):
    """Event fired when an item is added to the catalog."""
    title: str
    author: str
    kind: str

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "author": self.author,
            "kind": self.kind,
        }


@dataclass(kw_only=True)
class ItemRemoved(DomainEvent):
    """Event fired when an item is removed from the catalog."""
    title: str
    author: str
    kind: str

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "author": self.author,
            "kind": self.kind,
        }

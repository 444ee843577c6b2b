"""Catalog Context Domain Services.

This module defines the facade a calling layer uses to manage the
catalog: it builds items from plain strings, removes by title and
publishes domain events for every change.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional

from .entities import Catalog, CatalogItem
from ...events import EventBus, ItemAdded, ItemRemoved
from ...exceptions import InvalidCatalogItemError

logger = logging.getLogger(__name__)


class CatalogService:
    """Service for managing the items of a catalog."""

    def __init__(self, catalog: Optional[Catalog] = None, event_bus: Optional[EventBus] = None):
        self.catalog = catalog if catalog is not None else Catalog()
        self.event_bus = event_bus

    def add_item(self, title: str, author: str, kind: str) -> CatalogItem:
        """Create an item and append it to the catalog."""
        item = CatalogItem(title, author, kind)
        self.catalog.add(item)

        if self.event_bus:
            self.event_bus.publish(ItemAdded(
                aggregate_type="CatalogItem",
                title=item.title,
                author=item.author,
                kind=item.kind,
            ))

        return item

    def remove_item(self, title: str) -> int:
        """Remove every item whose title matches ``title``, ignoring case.

        Returns the number of items removed; 0 means nothing matched and
        the catalog is unchanged.
        """
        removed = 0
        for item in self.catalog.search(title):
            if not self.catalog.remove(item):
                continue
            removed += 1

            if self.event_bus:
                self.event_bus.publish(ItemRemoved(
                    aggregate_type="CatalogItem",
                    title=item.title,
                    author=item.author,
                    kind=item.kind,
                ))

        if removed:
            logger.info("Removed %d item(s) titled %r", removed, title)
        return removed

    def search_item(self, title: str) -> List[CatalogItem]:
        """Find items by exact title, ignoring case."""
        return self.catalog.search(title)

    def load_items(self, entries: Iterable[Mapping[str, Any]]) -> List[CatalogItem]:
        """Add items from mappings with ``title``, ``author`` and ``kind`` keys."""
        added = []
        for index, entry in enumerate(entries):
            if not isinstance(entry, Mapping):
                raise InvalidCatalogItemError(
                    f"Entry {index} must be a mapping, got {type(entry).__name__}"
                )
            missing = [key for key in ("title", "author", "kind") if key not in entry]
            if missing:
                raise InvalidCatalogItemError(
                    f"Entry {index} is missing {', '.join(missing)}"
                )
            added.append(self.add_item(
                str(entry["title"]), str(entry["author"]), str(entry["kind"])
            ))

        logger.info("Loaded %d item(s) into the catalog", len(added))
        return added

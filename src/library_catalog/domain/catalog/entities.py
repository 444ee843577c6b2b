"""Catalog Context Entities.

This module defines the core entities for the Catalog bounded context.
A CatalogItem is a single title/author/kind record; the Catalog is the
ordered collection those records live in.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List

from .value_objects import ItemKind
from ...exceptions import InvalidCatalogItemError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CatalogItem:
    """
    Represents one entry in the library catalog.

    Items are immutable and have no identity beyond their fields: two
    items with the same title, author and kind are equal. The kind is an
    open label, so new kinds need no change to the catalog.
    """

    title: str
    author: str
    kind: str

    @classmethod
    def book(cls, title: str, author: str) -> "CatalogItem":
        """Create a book."""
        return cls(title, author, ItemKind.BOOK.value)

    @classmethod
    def magazine(cls, title: str, author: str) -> "CatalogItem":
        """Create a magazine."""
        return cls(title, author, ItemKind.MAGAZINE.value)

    @classmethod
    def cd(cls, title: str, author: str) -> "CatalogItem":
        """Create a CD."""
        return cls(title, author, ItemKind.CD.value)

    def matches_title(self, title: str) -> bool:
        """Check if the title equals ``title``, ignoring case."""
        return self.title.lower() == title.lower()

    def format_line(self) -> str:
        """Get the one-line display form of the item."""
        return f"Title: {self.title}, Author: {self.author}, Type: {self.kind}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert item to dictionary."""
        return {
            "title": self.title,
            "author": self.author,
            "kind": self.kind,
        }


@dataclass
class Catalog:
    """
    Represents the library catalog.

    Items keep their insertion order and duplicates are allowed. The
    catalog is only changed through ``add`` and ``remove``.
    """

    items: List[CatalogItem] = field(default_factory=list, init=False)

    @classmethod
    def from_items(cls, items: Iterable[CatalogItem]) -> "Catalog":
        """Create a catalog holding ``items`` in order.

        Every item goes through ``add``, so the catalog never shares the
        caller's list.
        """
        catalog = cls()
        for item in items:
            catalog.add(item)
        return catalog

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[CatalogItem]:
        return iter(list(self.items))

    def __contains__(self, item: object) -> bool:
        return item in self.items

    def add(self, item: CatalogItem) -> None:
        """Append an item to the end of the catalog."""
        if not isinstance(item, CatalogItem):
            raise InvalidCatalogItemError(
                f"Expected a CatalogItem, got {type(item).__name__}"
            )
        self.items.append(item)
        logger.debug(
            "Added %r by %r (%s), %d items", item.title, item.author, item.kind, len(self.items)
        )

    def remove(self, item: CatalogItem) -> bool:
        """Remove the first item equal to ``item``.

        Returns False, leaving the catalog untouched, when there is no
        such item.
        """
        try:
            self.items.remove(item)
        except ValueError:
            return False
        logger.debug(
            "Removed %r by %r (%s), %d items", item.title, item.author, item.kind, len(self.items)
        )
        return True

    def search(self, title: str) -> List[CatalogItem]:
        """Find every item whose title equals ``title``, ignoring case.

        The match is exact, not partial. Results keep catalog order and
        are returned in a new list.
        """
        return [item for item in self.items if item.matches_title(title)]

    def count_by_kind(self) -> Dict[str, int]:
        """Get the number of items per kind label."""
        return dict(Counter(item.kind for item in self.items))


"""Library Catalog

An in-memory catalog of books, magazines and CDs with title search.
"""

__version__ = "0.1.0"

from .domain.catalog import Catalog, CatalogItem, CatalogService, ItemKind
from .events import EventBus, ItemAdded, ItemRemoved
from .exceptions import LibraryCatalogError, InvalidCatalogItemError, ConfigurationError

__all__ = [
    # Domain
    "Catalog",
    "CatalogItem",
    "CatalogService",
    "ItemKind",

    # Events
    "EventBus",
    "ItemAdded",
    "ItemRemoved",

    # Errors
    "LibraryCatalogError",
    "InvalidCatalogItemError",
    "ConfigurationError",
]

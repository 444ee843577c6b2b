"""
Catalog Context - Managing the library catalog.

This bounded context is responsible for:
- Representing individual catalog items
- Keeping the ordered collection of items
- Providing the add/remove/search facade
"""

from .value_objects import ItemKind
from .entities import CatalogItem, Catalog
from .services import CatalogService

__all__ = [
    # Value Objects
    "ItemKind",
    # Entities
    "CatalogItem",
    "Catalog",
    # Services
    "CatalogService",
]

"""Catalog Context Value Objects."""

from enum import Enum
from typing import List


class ItemKind(Enum):
    """Well-known catalog item kinds.

    Kinds are open labels: an item may carry any string, these are just
    the ones the library ships with.
    """
    BOOK = "Book"
    MAGAZINE = "Magazine"
    CD = "CD"

    @classmethod
    def labels(cls) -> List[str]:
        """Get the labels of all well-known kinds."""
        return [kind.value for kind in cls]

    @classmethod
    def is_known(cls, label: str) -> bool:
        """Check if a label is one of the well-known kinds."""
        return label in cls.labels()

"""Custom exceptions for the library catalog."""


class LibraryCatalogError(Exception):
    """Base exception for library catalog errors."""
    pass


class InvalidCatalogItemError(LibraryCatalogError):
    """Raised when something that is not a catalog item is added or seeded."""
    pass


class ConfigurationError(LibraryCatalogError):
    """Raised when there's an error in configuration."""
    pass

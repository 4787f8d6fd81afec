"""Models for Gallery Catalog."""


class CatalogError(Exception):
    """Base exception for catalog operations."""


class InvalidMediaError(CatalogError):
    """Raised when a media record cannot be built from its input."""

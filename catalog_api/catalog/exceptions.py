"""
Catalog Exceptions

Errors raised by the product catalog. The HTTP layer translates them into
AppException responses; the catalog itself knows nothing about transport.

A product that does not exist is not an error: lookups return None.
"""

from typing import Optional


class CatalogError(Exception):
    """Base class for all catalog errors."""


class ProductValidationError(CatalogError):
    """A source record could not be turned into a Product."""

    def __init__(self, message: str, index: Optional[int] = None):
        self.index = index
        if index is not None:
            message = f"Record #{index}: {message}"
        super().__init__(message)


class DuplicateProductError(ProductValidationError):
    """A source record reuses an identifier that is already loaded."""

    def __init__(self, product_id: str, index: Optional[int] = None):
        self.product_id = product_id
        super().__init__(f"Duplicate product ID '{product_id}'", index)


class InvalidProductIdError(CatalogError):
    """A lookup key does not have the canonical identifier format."""

    def __init__(self, candidate: object, reason: str = "Invalid product ID format"):
        self.candidate = candidate
        self.reason = reason
        super().__init__(f"{reason}: {candidate!r}")


class CatalogLoadError(CatalogError):
    """The backing source is missing, unreadable or corrupt."""


class CatalogAlreadyLoadedError(CatalogError):
    """load() was called on a catalog that already holds products."""


class CatalogNotLoadedError(CatalogError):
    """A query was made before the catalog was loaded."""

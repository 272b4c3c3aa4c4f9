"""
==============================================================================
Catalog Package - Product Management
==============================================================================

Read-only product catalog loaded once from a backing source.

Classes:
--------
- Product: Pydantic model for products
- ProductCatalog: Catalog manager with identifier lookup
- JsonFileSource / InMemorySource: Backing sources

==============================================================================
"""

from .exceptions import (
    CatalogAlreadyLoadedError,
    CatalogError,
    CatalogLoadError,
    CatalogNotLoadedError,
    DuplicateProductError,
    InvalidProductIdError,
    ProductValidationError,
)
from .models import Product
from .sources import InMemorySource, JsonFileSource, ProductSource
from .catalog import ProductCatalog

__all__ = [
    "Product",
    "ProductCatalog",
    "ProductSource",
    "JsonFileSource",
    "InMemorySource",
    "CatalogError",
    "ProductValidationError",
    "DuplicateProductError",
    "InvalidProductIdError",
    "CatalogLoadError",
    "CatalogAlreadyLoadedError",
    "CatalogNotLoadedError",
]

"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection for request handlers.

The application owns exactly one ProductCatalog, stored on ``app.state``
during startup. Handlers receive it through ``get_product_catalog`` instead
of a module-level global, so tests can swap it with
``app.dependency_overrides``.

Usage Examples:
--------------
    @router.get("/products")
    async def list_products(catalog: ProductCatalog = Depends(get_product_catalog)):
        return catalog.list_all()

==============================================================================
"""

from __future__ import annotations

import logging

from fastapi import Request

from catalog_api.catalog.catalog import ProductCatalog
from catalog_api.config import Settings, get_settings
from catalog_api.core import exceptions


# Module logger
logger = logging.getLogger(__name__)


def get_product_catalog(request: Request) -> ProductCatalog:
    """
    Get the loaded product catalog for the current application.

    Raises:
        AppException: CATALOG_NOT_LOADED if startup did not load one
    """
    catalog = getattr(request.app.state, "catalog", None)

    if catalog is None or not catalog.is_loaded:
        logger.error("Request received before the product catalog was loaded")
        raise exceptions.catalog_not_loaded()

    return catalog


def get_app_settings(request: Request) -> Settings:
    """Get the settings the current application was built with."""
    settings = getattr(request.app.state, "settings", None)
    return settings if settings is not None else get_settings()

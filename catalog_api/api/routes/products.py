"""
==============================================================================
Product Catalog Endpoints
==============================================================================

Read-only endpoints over the in-memory product catalog.

Routes:
-------
- GET /products?limit=N    First N products in load order
- GET /products/{pid}      Single product by UUID

==============================================================================
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from catalog_api.catalog.catalog import ProductCatalog
from catalog_api.catalog.exceptions import InvalidProductIdError
from catalog_api.config import Settings
from catalog_api.core import exceptions
from catalog_api.core.dependencies import get_app_settings, get_product_catalog
from catalog_api.schemas.common import ErrorResponse
from catalog_api.utils.validators import LimitValidator


router = APIRouter(prefix="/products", tags=["Products"])


class ProductController:
    """Controller for product catalog operations."""

    def __init__(self, catalog: ProductCatalog, settings: Settings):
        self._catalog = catalog
        self._settings = settings

    def list_products(self, raw_limit: Optional[str]) -> List[Dict[str, Any]]:
        """List the first ``limit`` products as plain records."""
        validator = LimitValidator(default=self._settings.default_limit)
        is_valid, limit, error = validator.validate(raw_limit)

        if not is_valid:
            raise exceptions.invalid_limit(raw_limit, error)

        return self._catalog.list_all(limit)

    def get_by_id(self, product_id: str) -> Dict[str, Any]:
        """Get a single product as a plain record."""
        try:
            product = self._catalog.get_by_id(product_id)
        except InvalidProductIdError:
            raise exceptions.invalid_product_id(product_id)

        if product is None:
            raise exceptions.product_not_found(product_id)

        return product.to_plain_record()


@router.get(
    "",
    responses={400: {"model": ErrorResponse}},
)
async def list_products(
    limit: Optional[str] = Query(None, description="Maximum number of products"),
    catalog: ProductCatalog = Depends(get_product_catalog),
    settings: Settings = Depends(get_app_settings)
):
    """List products in catalog order, up to ``limit``."""
    controller = ProductController(catalog, settings)
    return controller.list_products(limit)


@router.get(
    "/{pid}",
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def get_product(
    pid: str,
    catalog: ProductCatalog = Depends(get_product_catalog),
    settings: Settings = Depends(get_app_settings)
):
    """Get product by identifier (UUID)."""
    controller = ProductController(catalog, settings)
    return controller.get_by_id(pid)

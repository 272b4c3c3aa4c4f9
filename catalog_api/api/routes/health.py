"""
==============================================================================
Health Check Endpoints
==============================================================================

System health status endpoints for monitoring and orchestration.

==============================================================================
"""

from typing import Optional

from fastapi import APIRouter, Request

from catalog_api.catalog.catalog import ProductCatalog
from catalog_api.schemas.common import CatalogHealth, HealthResponse


router = APIRouter(prefix="/health", tags=["Health"])


class HealthController:
    """Controller for health check operations."""

    def __init__(self, catalog: Optional[ProductCatalog]):
        self._catalog = catalog

    def check_catalog(self) -> CatalogHealth:
        """Check catalog status."""
        if self._catalog is not None and self._catalog.is_loaded:
            stats = self._catalog.get_stats()
            return CatalogHealth(
                status="healthy",
                products=stats["total_products"],
                skipped_records=stats["skipped_records"],
            )
        return CatalogHealth(status="not_loaded", products=0)

    def get_health(self) -> HealthResponse:
        """Get full health status."""
        catalog_info = self.check_catalog()
        overall = "healthy" if catalog_info.status == "healthy" else "degraded"
        return HealthResponse(status=overall, catalog=catalog_info)

    def is_ready(self) -> bool:
        return self._catalog is not None and self._catalog.is_loaded


def _catalog_of(request: Request) -> Optional[ProductCatalog]:
    return getattr(request.app.state, "catalog", None)


@router.get("", response_model=HealthResponse)
async def health_check(request: Request):
    """
    Health check endpoint.

    Returns API status and how many products the catalog holds.
    """
    controller = HealthController(_catalog_of(request))
    return controller.get_health()


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe for container orchestration."""
    controller = HealthController(_catalog_of(request))
    return {"ready": controller.is_ready()}


@router.get("/live")
async def liveness_check():
    """Liveness probe for container orchestration."""
    return {"alive": True}

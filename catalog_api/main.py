"""
==============================================================================
Product Catalog Service - Application Entry Point
==============================================================================

FastAPI application serving a read-only product catalog:
- Catalog loaded once from JSON at startup
- GET /products and GET /products/{pid}
- Health and readiness probes

If the catalog cannot be loaded the application refuses to start.

Usage:
------
    # Development
    uvicorn catalog_api.main:app --reload

    # Production
    uvicorn catalog_api.main:app --host 0.0.0.0 --port 8080

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog_api.config import Settings, get_settings
from catalog_api.core.exceptions import register_exception_handlers
from catalog_api.api.router import api_router
from catalog_api.catalog.catalog import ProductCatalog
from catalog_api.catalog.exceptions import CatalogError
from catalog_api.catalog.sources import JsonFileSource


# ============================================================================
# LOGGING SETUP
# ============================================================================

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

logger = logging.getLogger(__name__)


# ============================================================================
# APPLICATION FACTORY
# ============================================================================

class Application:
    """
    FastAPI application factory and manager.

    Handles application lifecycle including:
    - Loading the product catalog on startup
    - Middleware configuration
    - Router registration
    - Exception handler setup

    A pre-built catalog may be passed in; it is loaded on startup if it has
    not been loaded yet. Otherwise one is built from ``products_file``.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        catalog: Optional[ProductCatalog] = None
    ):
        """Initialize the application."""
        self._settings = settings or get_settings()
        self._catalog = catalog
        self._app = self._create_app()

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=self._settings.app_name,
            version="1.0.0",
            description="Read-only product catalog",
            lifespan=self._lifespan,
            docs_url="/docs",
            redoc_url="/redoc",
        )

        # Configure middleware
        self._configure_middleware(app)

        # Register exception handlers
        register_exception_handlers(app)

        # Register routers
        app.include_router(api_router)

        app.state.settings = self._settings
        app.state.catalog = None

        return app

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        """Application lifespan manager."""
        # Startup
        self._startup(app)
        yield
        # Shutdown
        self._shutdown(app)

    def _startup(self, app: FastAPI) -> None:
        """Application startup tasks."""
        logger.info("=" * 60)
        logger.info(f"🚀 Starting {self._settings.app_name}")
        logger.info("=" * 60)

        app.state.catalog = self._load_catalog()

        logger.info("=" * 60)
        logger.info(f"✅ {self._settings.app_name} ready")
        logger.info(f"📍 Running on http://{self._settings.host}:{self._settings.port}")
        logger.info(f"📖 API Docs: http://{self._settings.host}:{self._settings.port}/docs")
        logger.info("=" * 60)

    def _shutdown(self, app: FastAPI) -> None:
        """Application shutdown tasks."""
        logger.info("🛑 Shutting down...")
        app.state.catalog = None
        logger.info("✅ Shutdown complete")

    def _load_catalog(self) -> ProductCatalog:
        """
        Load the product catalog.

        Raises:
            CatalogError: Startup must not continue without a catalog
        """
        catalog = self._catalog
        if catalog is None:
            catalog = ProductCatalog(
                JsonFileSource(self._settings.products_path),
                strict=self._settings.strict_catalog,
            )

        if not catalog.is_loaded:
            try:
                catalog.load()
            except CatalogError as e:
                logger.error(f"❌ Failed to load catalog: {e}")
                raise

        if self._settings.debug:
            catalog.log_products()

        return catalog

    def _configure_middleware(self, app: FastAPI) -> None:
        """Configure application middleware."""
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.cors_origins_list,
            allow_credentials=True,
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self._app


def create_app(
    settings: Optional[Settings] = None,
    catalog: Optional[ProductCatalog] = None
) -> FastAPI:
    """Build a new FastAPI application."""
    return Application(settings=settings, catalog=catalog).app


# ============================================================================
# APPLICATION INSTANCE
# ============================================================================

# Create application instance
application = Application()
app = application.app


# ============================================================================
# ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "catalog_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )

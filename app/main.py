"""
==============================================================================
HAL Shop - Application Entry Point
==============================================================================

FastAPI application serving an in-memory product catalog as
application/hal+json:
- Home document at /api
- Product search and lookup at /api/products
- Link relation docs at /rels/{rel}

Usage:
------
    # Development
    uvicorn app.main:app --reload

    # Production
    uvicorn app.main:app --host 0.0.0.0 --port 8080

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from app.config import get_settings
from app.core.exceptions import register_exception_handlers
from app.api.router import api_router
from app.catalog.catalog import get_catalog, init_catalog
from app.schemas.product import API_PATH


# ============================================================================
# LOGGING SETUP
# ============================================================================

settings = get_settings()

logging.basicConfig(
    level=settings.effective_log_level,
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
    - Catalog construction on startup
    - Middleware configuration
    - Router registration
    - Exception handler setup
    """

    def __init__(self):
        """Initialize the application."""
        self._settings = get_settings()
        self._app = self._create_app()

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=self._settings.app_name,
            version="1.0.0",
            description="Hypermedia (HAL) API for a small in-memory product catalog",
            lifespan=self._lifespan,
            docs_url="/docs",
            redoc_url="/redoc",
        )

        self._configure_middleware(app)
        register_exception_handlers(app)
        self._register_routers(app)
        self._register_root(app)

        return app

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        """Application lifespan manager."""
        self._startup()
        yield
        logger.info("Shutdown complete")

    def _startup(self) -> None:
        """Application startup tasks."""
        logger.info(f"Starting {self._settings.app_name} ({self._settings.app_env})")

        self._load_catalog()

        logger.info(f"API home: http://{self._settings.host}:{self._settings.port}{API_PATH}")

    def _load_catalog(self) -> None:
        """Build the product catalog once, unless one is already installed."""
        catalog = get_catalog()
        if catalog is None:
            catalog = init_catalog()
        logger.info(f"Loaded {len(catalog)} products")

    def _configure_middleware(self, app: FastAPI) -> None:
        """Configure application middleware."""
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.cors_origins_list,
            allow_credentials=True,
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    def _register_routers(self, app: FastAPI) -> None:
        """Register API routers."""
        app.include_router(api_router)

    def _register_root(self, app: FastAPI) -> None:
        """Register root endpoint."""

        @app.get("/", include_in_schema=False)
        async def root():
            """Redirect to the API home document."""
            return RedirectResponse(url=API_PATH)

    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self._app


# ============================================================================
# APPLICATION INSTANCE
# ============================================================================

application = Application()
app = application.app


# ============================================================================
# ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.effective_log_level.lower()
    )

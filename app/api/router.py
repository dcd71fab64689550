"""
==============================================================================
Main API Router
==============================================================================

Combines the API routes under the /api prefix. Link relation pages live
outside the prefix at /rels.

==============================================================================
"""

from fastapi import APIRouter

from app.api.endpoints import health, home, products, rels
from app.schemas.product import API_PATH


class MainAPIRouter:
    """
    Main API router combining all routes.

    Provides a single entry point for all API endpoints.
    """

    def __init__(self):
        """Initialize the main router with all sub-routers."""
        self._router = APIRouter()
        self._include_routers()

    def _include_routers(self) -> None:
        """Include all API routers."""
        self._router.include_router(home.router, prefix=API_PATH)
        self._router.include_router(products.router, prefix=API_PATH)
        self._router.include_router(health.router, prefix=API_PATH)
        self._router.include_router(rels.router)

    @property
    def router(self):
        """Get the FastAPI router instance."""
        return self._router


# Create main API router instance
api_router = MainAPIRouter().router

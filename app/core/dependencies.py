"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection for the catalog and hypermedia helpers.

Dependency Hierarchy:
--------------------
    get_product_catalog()   -> installed ProductCatalog (500 if missing)
    get_link_relations()    -> curie registry built from settings

Tests replace either dependency through ``app.dependency_overrides``.

Usage Examples:
--------------
    @router.get("/products")
    async def list_products(catalog: ProductCatalog = Depends(get_product_catalog)):
        return catalog.search()

==============================================================================
"""

from __future__ import annotations

import logging
from functools import lru_cache

from app.catalog.catalog import ProductCatalog, get_catalog
from app.config import get_settings
from app.core import exceptions
from app.schemas.hal import LinkRelations
from app.schemas.product import CURIE_NAME


# Module logger
logger = logging.getLogger(__name__)


def get_product_catalog() -> ProductCatalog:
    """
    Dependency returning the installed product catalog.

    Raises:
        AppException: CATALOG_NOT_LOADED if startup has not run
    """
    catalog = get_catalog()
    if catalog is None:
        logger.error("Request received before the product catalog was loaded")
        raise exceptions.catalog_not_loaded()
    return catalog


@lru_cache(maxsize=1)
def get_link_relations() -> LinkRelations:
    """Dependency returning the curie registry for custom link relations."""
    return LinkRelations({CURIE_NAME: get_settings().rel_template})

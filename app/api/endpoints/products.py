"""
==============================================================================
Product Catalog Endpoints
==============================================================================

HAL endpoints for searching and browsing the product catalog.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, Request

from app.catalog.catalog import ProductCatalog
from app.core import exceptions
from app.core.dependencies import get_link_relations, get_product_catalog
from app.core.responses import HalJSONResponse
from app.schemas.hal import LinkRelations
from app.schemas.product import ProductHalDocument, products_document


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["Products"])


class ProductController:
    """Controller for product catalog operations."""

    def __init__(self, catalog: ProductCatalog, relations: LinkRelations):
        self._catalog = catalog
        self._relations = relations

    def search(self, query: Optional[str], embedded: bool, self_href: str) -> Dict[str, Any]:
        """Search products and render the collection document."""
        products = self._catalog.search(query)
        logger.debug(f"Product search q={query!r} embedded={embedded}: {len(products)} hits")

        return products_document(
            products,
            self_href=self_href,
            relations=self._relations,
            embedded=embedded
        ).to_json()

    def get_by_id(self, product_id: str) -> Dict[str, Any]:
        """Get a single product document."""
        product = self._catalog.find_by_id(product_id)

        if product is None:
            raise exceptions.product_not_found(product_id)

        return ProductHalDocument.from_product(product).to_json()


@router.get("", response_class=HalJSONResponse)
async def search_products(
    request: Request,
    q: Optional[str] = Query(None, description="Case-insensitive search term"),
    embedded: bool = Query(False, description="Embed product documents"),
    catalog: ProductCatalog = Depends(get_product_catalog),
    relations: LinkRelations = Depends(get_link_relations)
):
    """Search products by title or description; without q, list all products."""
    controller = ProductController(catalog, relations)
    return controller.search(q, embedded, str(request.url.replace(query="")))


@router.get("/{product_id}", response_class=HalJSONResponse)
async def get_product(
    product_id: str,
    catalog: ProductCatalog = Depends(get_product_catalog),
    relations: LinkRelations = Depends(get_link_relations)
):
    """Get product by identifier."""
    controller = ProductController(catalog, relations)
    return controller.get_by_id(product_id)

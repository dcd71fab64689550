"""
==============================================================================
Schemas Package - HAL Documents
==============================================================================

Pydantic models and builders for application/hal+json responses.

This package provides:
- hal: Link, LinkRelations, LinksBuilder, HalDocument
- product: Home, product and product collection documents

==============================================================================
"""

from .hal import (
    APPLICATION_HAL_JSON,
    HalDocument,
    Link,
    LinkRelations,
    LinksBuilder,
)
from .product import ProductHalDocument, home_document, products_document

__all__ = [
    # HAL
    "APPLICATION_HAL_JSON",
    "HalDocument",
    "Link",
    "LinkRelations",
    "LinksBuilder",
    # Product
    "ProductHalDocument",
    "home_document",
    "products_document",
]

"""
==============================================================================
Catalog Package - Product Search
==============================================================================

Immutable in-memory product catalog with case-insensitive search.

Classes:
--------
- Product: Frozen Pydantic model for products
- ProductCatalog: Catalog with search and lookup by identifier

==============================================================================
"""

from .models import Product
from .catalog import ProductCatalog, default_catalog, get_catalog, init_catalog

__all__ = [
    "Product",
    "ProductCatalog",
    "default_catalog",
    "get_catalog",
    "init_catalog",
]

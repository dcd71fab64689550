"""
==============================================================================
Product Catalog Module
==============================================================================

Immutable in-memory product catalog with search capabilities.

Features:
---------
- Ordered, read-only product sequence built once at startup
- Case-insensitive substring search over title and description
- Exact identifier lookup
- Injectable identifier generation

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from app.utils.identifiers import IdGenerator, uuid_generator

from .models import Product
from .sample_data import SAMPLE_PRODUCTS, ProductRecord


# Module logger
logger = logging.getLogger(__name__)


class ProductCatalog:
    """
    Read-only product catalog with search.

    The product sequence is frozen at construction; no operation mutates
    it afterwards, so a single instance can be shared between concurrent
    requests without locking.

    Attributes:
        products: List of all products in insertion order

    Example:
        >>> catalog = default_catalog()
        >>> [p.title for p in catalog.search("hypermedia")]
        ['REST in Practice: Hypermedia and Systems Architecture']
        >>> catalog.find_by_id("not-a-real-id") is None
        True
    """

    def __init__(self, products: Iterable[Product]) -> None:
        self._products: Tuple[Product, ...] = tuple(products)

    @classmethod
    def from_records(
        cls,
        records: Iterable[ProductRecord],
        id_generator: Optional[IdGenerator] = None
    ) -> "ProductCatalog":
        """
        Build a catalog from ``(title, description, retail_price)`` records.

        Args:
            records: Product records in catalog order
            id_generator: Identifier source (random UUID4 if None)

        Returns:
            ProductCatalog instance
        """
        generate_id = id_generator or uuid_generator
        return cls(
            Product(
                id=generate_id(),
                title=title,
                description=description,
                retail_price=retail_price
            )
            for title, description, retail_price in records
        )

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def products(self) -> List[Product]:
        """Get all products."""
        return list(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    # =========================================================================
    # SEARCH METHODS
    # =========================================================================

    def search(self, term: Optional[str] = None) -> List[Product]:
        """
        Search products by term.

        Matching is a case-insensitive substring test against title and
        description. Catalog order is preserved. An empty term matches
        every product.

        Args:
            term: Search term, or None for the full catalog

        Returns:
            List of matching products (possibly empty)
        """
        if term is None:
            return list(self._products)

        normalized = term.lower()
        results = [p for p in self._products if p.matches(normalized)]

        logger.debug(f"Search {term!r}: {len(results)} of {len(self._products)} products")
        return results

    def find_by_id(self, product_id: str) -> Optional[Product]:
        """
        Find product by identifier.

        Args:
            product_id: Exact, case-sensitive identifier

        Returns:
            Product or None
        """
        return next((p for p in self._products if p.id == product_id), None)


def default_catalog(id_generator: Optional[IdGenerator] = None) -> ProductCatalog:
    """Build the catalog of sample REST books."""
    return ProductCatalog.from_records(SAMPLE_PRODUCTS, id_generator)


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

_catalog_instance: Optional[ProductCatalog] = None


def get_catalog() -> Optional[ProductCatalog]:
    """Get the global catalog instance."""
    return _catalog_instance


def init_catalog(catalog: Optional[ProductCatalog] = None) -> ProductCatalog:
    """
    Initialize the global catalog instance.

    Args:
        catalog: Catalog to install (the sample catalog if None)

    Returns:
        ProductCatalog instance
    """
    global _catalog_instance
    _catalog_instance = catalog if catalog is not None else default_catalog()
    return _catalog_instance

"""
==============================================================================
Product HAL Schemas Module
==============================================================================

HAL representations of the shop API resources.

Documents:
----------
- Home document (entry point, links to product search)
- Single product document
- Product collection document (search results)

==============================================================================
"""

from __future__ import annotations

from typing import List

from pydantic import Field

from app.catalog.models import Product

from .hal import (
    APPLICATION_HAL_JSON,
    REL_SELF,
    HalDocument,
    Link,
    LinkRelations,
    LinksBuilder,
)


API_PATH = "/api"
PRODUCTS_PATH = f"{API_PATH}/products"
PRODUCTS_SEARCH_TEMPLATE = f"{PRODUCTS_PATH}{{?q,embedded}}"

REL_COLLECTION = "collection"
REL_SEARCH = "search"
REL_FIND = "find"
REL_PRODUCT = "product"

CURIE_NAME = "ex"


def product_href(product: Product) -> str:
    return f"{PRODUCTS_PATH}/{product.id}"


def product_link(product: Product) -> Link:
    return Link(href=product_href(product), title=product.title, type=APPLICATION_HAL_JSON)


class ProductHalDocument(HalDocument):
    """HAL representation of a single product."""

    title: str
    description: str
    retail_price: int = Field(..., alias="retailPrice")

    @classmethod
    def from_product(cls, product: Product) -> "ProductHalDocument":
        """Create document with ``self`` and ``collection`` links."""
        links = (
            LinksBuilder()
            .with_link(REL_SELF, product_link(product))
            .with_link(
                REL_COLLECTION,
                Link(href=PRODUCTS_PATH, title="All Products", type=APPLICATION_HAL_JSON)
            )
            .build()
        )
        return cls(
            links=links,
            title=product.title,
            description=product.description,
            retail_price=product.retail_price
        )


def products_document(
    products: List[Product],
    self_href: str,
    relations: LinkRelations,
    embedded: bool = False
) -> HalDocument:
    """
    Build the HAL document for a list of products.

    Every product is linked with the curied product relation in result
    order. With ``embedded`` the full product documents are included
    under the same relation. Neither section carries the product
    relation when there are no results.

    Args:
        products: Search results
        self_href: URI of the current request
        relations: Curie registry for custom relations
        embedded: Include product documents in ``_embedded``

    Returns:
        HalDocument for the collection
    """
    product_rel = relations.uri(CURIE_NAME, REL_PRODUCT)

    links = (
        LinksBuilder(relations)
        .with_link(REL_SELF, Link.self_link(self_href))
        .with_link(
            REL_FIND,
            Link.templated_link(PRODUCTS_SEARCH_TEMPLATE, title="Find Products")
        )
        .with_links(product_rel, [product_link(p) for p in products])
        .build()
    )

    embedded_docs = None
    if embedded and products:
        embedded_docs = {
            relations.resolve(product_rel): [
                ProductHalDocument.from_product(p).to_json() for p in products
            ]
        }

    return HalDocument(links=links, embedded=embedded_docs)


def home_document(self_href: str) -> HalDocument:
    """Build the API entry point document."""
    links = (
        LinksBuilder()
        .with_link(REL_SELF, Link.self_link(self_href))
        .with_link(
            REL_SEARCH,
            Link.templated_link(PRODUCTS_SEARCH_TEMPLATE, title="Search Products")
        )
        .build()
    )
    return HalDocument(links=links)

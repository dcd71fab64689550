"""
==============================================================================
Link Relation Documentation Endpoints
==============================================================================

Human-readable pages describing the shop's custom link relations.

==============================================================================
"""

from html import escape

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from app.core import exceptions
from app.schemas.product import REL_PRODUCT


router = APIRouter(prefix="/rels", tags=["Link Relations"])


REL_DOCS = {
    REL_PRODUCT: (
        "Links to a single product of the shop. The target is an "
        "application/hal+json document with the attributes title, "
        "description and retailPrice (in cents)."
    ),
}


def render_rel_page(rel: str) -> str:
    """Render the documentation page of a known link relation."""
    try:
        description = REL_DOCS[rel]
    except KeyError:
        raise exceptions.rel_not_found(rel) from None

    name = escape(rel)
    return (
        "<!DOCTYPE html>\n"
        f"<html><head><title>Link relation: {name}</title></head>\n"
        f"<body><h1>{name}</h1><p>{escape(description)}</p></body></html>\n"
    )


@router.get("/{rel}", response_class=HTMLResponse)
async def get_rel(rel: str):
    """Documentation of a link relation."""
    return render_rel_page(rel)

"""
==============================================================================
API Home Endpoint
==============================================================================

Entry point of the hypermedia API. Clients start here and follow the
templated ``search`` link to reach the product collection.

==============================================================================
"""

from fastapi import APIRouter, Request

from app.core.responses import HalJSONResponse
from app.schemas.product import home_document


router = APIRouter(tags=["Home"])


@router.get("", response_class=HalJSONResponse)
async def get_home_document(request: Request):
    """Home document containing links to the API."""
    return home_document(str(request.url.replace(query=""))).to_json()

"""
HAL Response Classes

JSON responses served with the application/hal+json media type.
"""

from fastapi.responses import JSONResponse

from app.schemas.hal import APPLICATION_HAL_JSON


class HalJSONResponse(JSONResponse):
    """JSONResponse rendered as application/hal+json."""

    media_type = APPLICATION_HAL_JSON

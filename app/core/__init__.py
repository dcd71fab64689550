"""
==============================================================================
Core Package
==============================================================================

Core utilities and infrastructure for the application.

This package provides:
- Custom exception handling with consistent error responses
- FastAPI dependencies for the catalog and link relations
- HAL response class

Modules:
--------
- exceptions: AppException class and error factory functions
- dependencies: FastAPI dependency injection functions
- responses: HalJSONResponse

Usage:
------
    from app.core import AppException, get_product_catalog

    # Or use exception factory functions via module
    from app.core import exceptions
    raise exceptions.product_not_found(product_id)

==============================================================================
"""

from .exceptions import (
    AppException,
    register_exception_handlers,
)
from .dependencies import get_link_relations, get_product_catalog
from .responses import HalJSONResponse

__all__ = [
    # Exceptions
    "AppException",
    "register_exception_handlers",
    # Dependencies
    "get_link_relations",
    "get_product_catalog",
    # Responses
    "HalJSONResponse",
]

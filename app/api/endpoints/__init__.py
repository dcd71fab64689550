"""
==============================================================================
API Endpoints
==============================================================================

Routers:
--------
- home: API entry point document
- products: Product search and lookup
- health: Health check endpoints
- rels: Link relation documentation

==============================================================================
"""

from . import health, home, products, rels

__all__ = ["health", "home", "products", "rels"]

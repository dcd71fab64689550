"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides deterministic catalog, link relation and client fixtures.

==============================================================================
"""

import pytest
from typing import Generator
from fastapi.testclient import TestClient

from app.main import app
from app.catalog import catalog as catalog_module
from app.catalog.catalog import ProductCatalog, default_catalog
from app.core.dependencies import get_link_relations, get_product_catalog
from app.schemas.hal import LinkRelations
from app.utils.identifiers import SequentialIdGenerator


REL_TEMPLATE = "http://example.com/link-relations/{rel}"


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

@pytest.fixture
def catalog() -> ProductCatalog:
    """Sample catalog with ids product-1 .. product-6."""
    return default_catalog(SequentialIdGenerator())


@pytest.fixture
def relations() -> LinkRelations:
    """Curie registry matching the default settings."""
    return LinkRelations({"ex": REL_TEMPLATE})


# ============================================================================
# CLIENT FIXTURES
# ============================================================================

@pytest.fixture(scope="function")
def client(
    catalog: ProductCatalog,
    relations: LinkRelations,
    monkeypatch: pytest.MonkeyPatch
) -> Generator[TestClient, None, None]:
    """Create test client serving the deterministic catalog."""
    monkeypatch.setattr(catalog_module, "_catalog_instance", catalog)

    app.dependency_overrides[get_product_catalog] = lambda: catalog
    app.dependency_overrides[get_link_relations] = lambda: relations

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()

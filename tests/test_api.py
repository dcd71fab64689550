"""
==============================================================================
API Integration Tests
==============================================================================

Tests for REST API endpoints.

==============================================================================
"""

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.catalog import catalog as catalog_module


PRODUCT_REL = "ex:product"


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self, client: TestClient):
        """Test health check returns status."""
        response = client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["details"]["products_loaded"] == 6

    def test_readiness_probe(self, client: TestClient):
        """Test readiness probe."""
        response = client.get("/api/health/ready")
        assert response.status_code == 200
        assert response.json()["ready"] is True

    def test_liveness_probe(self, client: TestClient):
        """Test liveness probe."""
        response = client.get("/api/health/live")
        assert response.status_code == 200
        assert response.json()["alive"] is True


class TestHomeEndpoint:
    """Tests for the API entry point."""

    def test_home_document(self, client: TestClient):
        """Test home document links to product search."""
        response = client.get("/api")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/hal+json")
        links = response.json()["_links"]
        assert links["self"]["href"] == "http://testserver/api"
        assert links["search"]["href"] == "/api/products{?q,embedded}"
        assert links["search"]["templated"] is True

    def test_home_self_link_drops_query(self, client: TestClient):
        """Test self link points at the home URL without query parameters."""
        response = client.get("/api", params={"x": "1"})
        assert response.status_code == 200
        assert response.json()["_links"]["self"] == {"href": "http://testserver/api"}

    def test_root_redirects_to_home(self, client: TestClient):
        """Test root path redirects to /api."""
        response = client.get("/", follow_redirects=False)
        assert response.status_code == 307
        assert response.headers["location"] == "/api"


class TestProductEndpoints:
    """Tests for product search and lookup endpoints."""

    def test_list_all_products(self, client: TestClient):
        """Test search without q lists every product."""
        response = client.get("/api/products")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/hal+json")
        data = response.json()
        assert len(data["_links"][PRODUCT_REL]) == 6
        assert data["_links"]["self"]["href"] == "http://testserver/api/products"
        assert "_embedded" not in data

    def test_search_products(self, client: TestClient):
        """Test q filters products."""
        response = client.get("/api/products", params={"q": "hypermedia"})
        assert response.status_code == 200
        links = response.json()["_links"][PRODUCT_REL]
        assert [link["title"] for link in links] == [
            "REST in Practice: Hypermedia and Systems Architecture"
        ]

    def test_search_without_matches(self, client: TestClient):
        """Test unmatched q returns an empty product list."""
        response = client.get("/api/products", params={"q": "nonexistent-term-xyz"})
        assert response.status_code == 200
        links = response.json()["_links"]
        assert PRODUCT_REL not in links
        assert sorted(links) == ["curies", "find", "self"]

    def test_search_without_matches_embedded(self, client: TestClient):
        """Test unmatched q with embedded=true carries no embedded products."""
        response = client.get(
            "/api/products",
            params={"q": "nonexistent-term-xyz", "embedded": "true"}
        )
        assert response.status_code == 200
        assert "_embedded" not in response.json()

    def test_search_with_empty_term(self, client: TestClient):
        """Test empty q matches every product."""
        response = client.get("/api/products?q=")
        assert response.status_code == 200
        assert len(response.json()["_links"][PRODUCT_REL]) == 6

    def test_search_embedded(self, client: TestClient):
        """Test embedded=true includes product documents."""
        response = client.get("/api/products", params={"q": "spring", "embedded": "true"})
        assert response.status_code == 200
        embedded = response.json()["_embedded"][PRODUCT_REL]
        assert [doc["title"] for doc in embedded] == [
            "Spring REST",
            "Building a RESTful Web Service with Spring",
        ]
        assert [doc["retailPrice"] for doc in embedded] == [2651, 2887]

    def test_get_product(self, client: TestClient):
        """Test lookup by id returns the product document."""
        response = client.get("/api/products/product-2")
        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "RESTful Web APIs"
        assert data["retailPrice"] == 2995
        assert data["_links"]["self"]["href"] == "/api/products/product-2"

    def test_follow_product_link(self, client: TestClient):
        """Test product links in the collection resolve to documents."""
        links = client.get("/api/products").json()["_links"][PRODUCT_REL]
        for link in links:
            response = client.get(link["href"])
            assert response.status_code == 200
            assert response.json()["title"] == link["title"]

    def test_get_unknown_product(self, client: TestClient):
        """Test unknown id returns 404."""
        response = client.get("/api/products/not-a-real-id")
        assert response.status_code == 404
        data = response.json()
        assert data["success"] is False
        assert data["error"]["code"] == "PRODUCT_NOT_FOUND"
        assert data["error"]["details"]["product_id"] == "not-a-real-id"


class TestRelEndpoints:
    """Tests for link relation documentation."""

    def test_product_rel(self, client: TestClient):
        """Test documented relation renders HTML."""
        response = client.get("/rels/product")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "<h1>product</h1>" in response.text

    def test_unknown_rel(self, client: TestClient):
        """Test undocumented relation returns 404."""
        response = client.get("/rels/unknown")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "REL_NOT_FOUND"


class TestCatalogNotLoaded:
    """Tests for requests served before startup."""

    def test_products_unavailable(self, monkeypatch: pytest.MonkeyPatch):
        """Test missing catalog yields 500 CATALOG_NOT_LOADED."""
        monkeypatch.setattr(catalog_module, "_catalog_instance", None)
        test_client = TestClient(app)

        response = test_client.get("/api/products")
        assert response.status_code == 500
        assert response.json()["error"]["code"] == "CATALOG_NOT_LOADED"

        health = test_client.get("/api/health").json()
        assert health["status"] == "degraded"

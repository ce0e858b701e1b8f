"""
Tests for the HTTP API: catalog, metadata, sitemap and preview endpoints.
"""

import io
import unittest
import xml.etree.ElementTree as ET
from unittest.mock import patch

import pytest
from PIL import Image

from toolcatalog.previews import RenderError


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["catalog"] == {"categories": 2, "tools": 5}
        assert data["services"]["sentry"]["status"] == "not_configured"

    def test_request_id_headers(self, client):
        response = client.get("/health", headers={"X-Request-ID": "req-123"})
        assert response.headers["X-Request-ID"] == "req-123"
        assert response.headers["X-Response-Time"].endswith("ms")

    def test_request_id_generated(self, client):
        response = client.get("/catalog/tools")
        assert len(response.headers["X-Request-ID"]) == 36


class TestCatalogRoutes:
    def test_list_categories(self, client):
        response = client.get("/catalog/categories")
        assert response.status_code == 200
        assert [c["slug"] for c in response.json()] == ["writing", "calculators"]

    def test_category_detail(self, client):
        data = client.get("/catalog/categories/calculators").json()
        assert data["category"]["name"] == "🧮 Calculators"
        assert data["seo"]["title"] == "Free Online Calculators"
        assert data["subcategories"][0]["tool_slugs"] == ["emi-calculator", "ghost-calculator"]

    def test_category_tools(self, client):
        data = client.get("/catalog/categories/writing/tools").json()
        assert [t["slug"] for t in data] == ["word-counter", "text-case-converter"]

    def test_unknown_category_is_404(self, client):
        response = client.get("/catalog/categories/nope")
        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["error_code"] == "CATEGORY_NOT_FOUND"
        assert body["details"] == {"resource_type": "category", "resource_id": "nope"}

    def test_unknown_category_tools_is_404(self, client):
        assert client.get("/catalog/categories/nope/tools").status_code == 404

    def test_list_tools(self, client):
        assert len(client.get("/catalog/tools").json()) == 5

    def test_featured(self, client):
        data = client.get("/catalog/tools/featured").json()
        assert [t["slug"] for t in data] == ["word-counter", "emi-calculator"]

    def test_featured_limit(self, client):
        assert len(client.get("/catalog/tools/featured?limit=1").json()) == 1

    def test_featured_limit_validated(self, client):
        response = client.get("/catalog/tools/featured?limit=0")
        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    def test_tool(self, client):
        data = client.get("/catalog/tools/emi-calculator").json()
        assert data["name"] == "EMI Calculator"
        assert data["faq"][0]["question"] == "What is EMI?"

    def test_unknown_tool_is_404(self, client):
        response = client.get("/catalog/tools/does-not-exist")
        assert response.status_code == 404
        assert response.json()["error_code"] == "TOOL_NOT_FOUND"

    def test_related_tools(self, client):
        data = client.get("/catalog/tools/word-counter/related").json()
        assert [t["slug"] for t in data] == ["text-case-converter"]

    def test_unknown_route_uses_error_format(self, client):
        response = client.get("/nothing-here")
        assert response.status_code == 404
        assert response.json()["error_code"] == "RESOURCE_NOT_FOUND"


class TestMetadataRoutes:
    def test_tool_metadata(self, client):
        data = client.get("/metadata/tools/emi-calculator").json()
        assert data["title"] == "EMI Calculator - Free Online | gofreetool.com"
        assert data["alternates"]["canonical"] == "https://gofreetool.com/tools/emi-calculator"
        assert data["open_graph"]["images"][0]["width"] == 1200

    def test_category_metadata(self, client):
        data = client.get("/metadata/categories/writing").json()
        assert data["title"] == "Free Writing & Text Tools Online | gofreetool.com"

    def test_page_metadata(self, client):
        data = client.get("/metadata/pages/about").json()
        assert data["title"] == "About Us | gofreetool.com"

    @pytest.mark.parametrize(
        "path",
        ["/metadata/tools/nope", "/metadata/categories/nope", "/metadata/pages/nope"],
    )
    def test_unknown_is_empty_object(self, client, path):
        response = client.get(path)
        assert response.status_code == 200
        assert response.json() == {}


class TestSitemapRoute:
    def test_sitemap(self, client):
        response = client.get("/sitemap.xml")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/xml")
        root = ET.fromstring(response.content)
        assert len(list(root)) == 12


class TestPreviewRoutes:
    @pytest.mark.parametrize(
        "path",
        [
            "/opengraph-image",
            "/tools/emi-calculator/opengraph-image",
            "/tools/does-not-exist/opengraph-image",
            "/category/writing/opengraph-image",
            "/category/does-not-exist/opengraph-image",
        ],
    )
    def test_png(self, client, path):
        response = client.get(path)
        assert response.status_code == 200
        assert response.headers["content-type"] == "image/png"
        assert "max-age=86400" in response.headers["cache-control"]
        assert Image.open(io.BytesIO(response.content)).size == (1200, 630)

    def test_render_failure_is_500(self, client):
        with patch(
            "toolcatalog.previews.rasterizer.PillowRasterizer.render",
            side_effect=RenderError("font exploded"),
        ):
            response = client.get("/tools/emi-calculator/opengraph-image")
        assert response.status_code == 500
        body = response.json()
        assert body["error_code"] == "RENDER_FAILED"
        assert body["details"] == {"kind": "tool", "slug": "emi-calculator"}
        assert "font exploded" not in body["error"]


class TestDefaultCatalogWiring(unittest.TestCase):
    """The app without overrides serves the packaged catalog."""

    def test_health_reports_packaged_catalog(self):
        from fastapi.testclient import TestClient

        from server import create_app

        with TestClient(create_app()) as client:
            data = client.get("/health").json()
        self.assertEqual(data["catalog"], {"categories": 13, "tools": 89})

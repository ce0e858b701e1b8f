"""
Pytest configuration and shared fixtures for tool catalog tests.

Provides a small hand-built catalog (two categories, five tools) so tests do
not depend on the packaged catalog contents, plus an API test client wired
to that catalog.
"""

import os
import sys
from datetime import datetime, timezone

import pytest

# Environment setup before any imports
os.environ["ENVIRONMENT"] = "development"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("SENTRY_DSN", None)
os.environ.pop("CATALOG_DATA_PATH", None)

# Ensure project root is in path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from toolcatalog.catalog import CatalogLookup, CatalogStore
from toolcatalog.types import (
    FAQ,
    Category,
    CategorySEO,
    SiteConfig,
    Subcategory,
    Tool,
    ToolSEO,
)


def make_category(slug: str, name: str, icon: str = "📁", **overrides) -> Category:
    fields = {
        "slug": slug,
        "name": name,
        "icon": icon,
        "description": f"Tools in {slug}",
    }
    fields.update(overrides)
    return Category(**fields)


def make_tool(slug: str, category: str, name: str = None, **overrides) -> Tool:
    """Build a tool with plausible defaults for every required field."""
    name = name or slug.replace("-", " ").title()
    fields = {
        "id": slug,
        "slug": slug,
        "name": name,
        "category": category,
        "description": f"{name} long description.",
        "short_description": f"{name} in one line",
        "icon": "🔧",
        "seo": ToolSEO(
            title=f"{name} - Free Online",
            description=f"Use the free {name}.",
            keywords=(slug.replace("-", " "),),
        ),
    }
    fields.update(overrides)
    return Tool(**fields)


@pytest.fixture
def sample_categories():
    return [
        make_category("writing", "✍️ Writing & Text", icon="📝"),
        make_category("calculators", "🧮 Calculators", icon="📊"),
    ]


@pytest.fixture
def sample_tools():
    return [
        make_tool(
            "word-counter",
            "writing",
            icon="📝",
            featured=True,
            related_tools=("text-case-converter", "missing-tool"),
        ),
        make_tool("text-case-converter", "writing", icon="🔠"),
        make_tool(
            "emi-calculator",
            "calculators",
            name="EMI Calculator",
            icon="🏦",
            featured=True,
            short_description="Calculate monthly loan EMI instantly",
            faq=(
                FAQ(question="What is EMI?", answer="Equated Monthly Installment."),
            ),
        ),
        make_tool("bmi-calculator", "calculators", related_tools=("emi-calculator",)),
        make_tool("percentage-calculator", "calculators"),
    ]


@pytest.fixture
def catalog_store(sample_categories, sample_tools):
    """Two categories and five tools, with every side table populated."""
    return CatalogStore(
        categories=sample_categories,
        tools=sample_tools,
        category_seo={
            "calculators": CategorySEO(
                title="Free Online Calculators",
                description="Every calculator you need.",
                keywords=("calculator", "free calculator"),
                intro="Calculators for money and health.",
            ),
        },
        popular_tools={"writing": ["word-counter"]},
        related_categories={"writing": ["calculators"]},
        subcategories={
            "calculators": [
                Subcategory(
                    name="Finance",
                    icon="💰",
                    tool_slugs=("emi-calculator", "ghost-calculator"),
                ),
            ],
        },
    )


@pytest.fixture
def lookup(catalog_store):
    return CatalogLookup(catalog_store)


@pytest.fixture
def site():
    return SiteConfig()


@pytest.fixture
def fixed_now():
    return datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


@pytest.fixture
def client(catalog_store):
    """API test client serving the sample catalog."""
    from fastapi.testclient import TestClient

    from app.dependencies import get_default_catalog
    from server import create_app

    app = create_app(load_catalog_on_startup=False)
    app.dependency_overrides[get_default_catalog] = lambda: catalog_store
    return TestClient(app)

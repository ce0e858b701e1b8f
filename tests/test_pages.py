"""
Tests for tool, category and static page metadata resolution.
"""

import pytest

from toolcatalog.seo import STATIC_PAGES, MetadataGenerator, PageMetadataResolver


@pytest.fixture
def resolver(lookup, site):
    return PageMetadataResolver(lookup, MetadataGenerator(site))


class TestToolMetadata:
    def test_uses_tool_seo(self, resolver):
        metadata = resolver.for_tool("emi-calculator")
        assert metadata.title == "EMI Calculator - Free Online | gofreetool.com"
        assert metadata.description == "Use the free EMI Calculator."
        assert metadata.keywords[0] == "emi calculator"
        assert metadata.canonical_url == "https://gofreetool.com/tools/emi-calculator"

    def test_unknown_tool_is_empty(self, resolver):
        metadata = resolver.for_tool("does-not-exist")
        assert metadata.is_empty
        assert metadata.title is None
        assert metadata.open_graph is None


class TestCategoryMetadata:
    def test_authored_seo_copy(self, resolver):
        metadata = resolver.for_category("calculators")
        assert metadata.title == "Free Online Calculators | gofreetool.com"
        assert metadata.keywords[:2] == ("calculator", "free calculator")
        assert metadata.canonical_url == "https://gofreetool.com/category/calculators"

    def test_synthesized_from_label(self, resolver):
        metadata = resolver.for_category("writing")
        assert metadata.title == "Free Writing & Text Tools Online | gofreetool.com"
        assert metadata.description == "Tools in writing"

    def test_unknown_category_is_empty(self, resolver):
        assert resolver.for_category("nope").is_empty


class TestStaticPages:
    @pytest.mark.parametrize("name", sorted(STATIC_PAGES))
    def test_known_pages(self, resolver, name):
        metadata = resolver.for_page(name)
        assert not metadata.is_empty
        assert metadata.canonical_url == f"https://gofreetool.com{STATIC_PAGES[name].path}"

    def test_home(self, resolver):
        metadata = resolver.for_page("home")
        assert metadata.title == "Free Daily-Use Tools & Calculators | gofreetool.com"
        assert metadata.canonical_url == "https://gofreetool.com/"

    def test_unknown_page_is_empty(self, resolver):
        assert resolver.for_page("pricing").is_empty

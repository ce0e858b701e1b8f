"""
Tests for catalog lookups.
"""

import pytest

from toolcatalog.catalog import CatalogLookup


class TestSlugLookups:
    def test_every_tool_found_by_its_slug(self, lookup, sample_tools):
        for tool in sample_tools:
            assert lookup.get_tool_by_slug(tool.slug) == tool

    def test_every_category_found_by_its_slug(self, lookup, sample_categories):
        for category in sample_categories:
            assert lookup.get_category_by_slug(category.slug) == category

    @pytest.mark.parametrize("slug", ["does-not-exist", "", "WORD-COUNTER"])
    def test_unknown_slug_returns_none(self, lookup, slug):
        assert lookup.get_tool_by_slug(slug) is None
        assert lookup.get_category_by_slug(slug) is None


class TestCategoryMembership:
    def test_tools_by_category_in_store_order(self, lookup):
        slugs = [t.slug for t in lookup.get_tools_by_category("calculators")]
        assert slugs == ["emi-calculator", "bmi-calculator", "percentage-calculator"]

    def test_membership_matches_category_field(self, lookup, sample_tools):
        for category in lookup.list_categories():
            expected = [t for t in sample_tools if t.category == category.slug]
            assert list(lookup.get_tools_by_category(category.slug)) == expected

    def test_unknown_category_has_no_tools(self, lookup):
        assert lookup.get_tools_by_category("nope") == ()

    def test_list_all(self, lookup):
        assert len(lookup.list_tools()) == 5
        assert [c.slug for c in lookup.list_categories()] == ["writing", "calculators"]


class TestCuratedViews:
    def test_featured_tools(self, lookup):
        slugs = [t.slug for t in lookup.get_featured_tools()]
        assert slugs == ["word-counter", "emi-calculator"]

    def test_featured_tools_limit(self, lookup):
        assert len(lookup.get_featured_tools(limit=1)) == 1

    def test_related_tools_skip_unknown_slugs(self, lookup):
        related = lookup.get_related_tools("word-counter")
        assert [t.slug for t in related] == ["text-case-converter"]

    def test_related_tools_of_unknown_tool(self, lookup):
        assert lookup.get_related_tools("nope") == ()

    def test_category_seo(self, lookup):
        assert lookup.get_category_seo("calculators").title == "Free Online Calculators"
        assert lookup.get_category_seo("writing") is None

    def test_popular_tools(self, lookup):
        popular = lookup.get_popular_tools_for_category("writing")
        assert [t.slug for t in popular] == ["word-counter"]
        assert lookup.get_popular_tools_for_category("calculators") == ()

    def test_related_categories(self, lookup):
        related = lookup.get_related_categories("writing")
        assert [c.slug for c in related] == ["calculators"]

    def test_subcategories(self, lookup):
        groups = lookup.get_subcategories_for_category("calculators")
        assert [g.name for g in groups] == ["Finance"]
        assert lookup.get_subcategories_for_category("writing") == ()

    def test_lookup_exposes_store(self, catalog_store):
        assert CatalogLookup(catalog_store).store is catalog_store

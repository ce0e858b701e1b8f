"""
Tests for sitemap generation and XML serialization.
"""

import xml.etree.ElementTree as ET
from datetime import datetime, timezone

import pytest

from toolcatalog.sitemap import SITEMAP_NAMESPACE, SitemapGenerator, render_sitemap_xml
from toolcatalog.types import ChangeFrequency


@pytest.fixture
def entries(lookup, site, fixed_now):
    return SitemapGenerator(lookup, site).generate(now=fixed_now)


class TestSitemapGenerator:
    def test_entry_count(self, entries):
        # home + 2 categories + 5 tools + 4 static pages
        assert len(entries) == 12

    def test_no_duplicate_urls(self, entries):
        urls = [e.url for e in entries]
        assert len(urls) == len(set(urls))

    def test_home_first(self, entries):
        home = entries[0]
        assert home.url == "https://gofreetool.com"
        assert home.priority == 1.0
        assert home.change_frequency == ChangeFrequency.DAILY

    def test_categories_then_tools(self, entries):
        assert [e.url for e in entries[1:3]] == [
            "https://gofreetool.com/category/writing",
            "https://gofreetool.com/category/calculators",
        ]
        assert all(e.priority == 0.9 for e in entries[1:3])
        assert all(e.change_frequency == ChangeFrequency.WEEKLY for e in entries[1:3])

        tools = entries[3:8]
        assert tools[0].url == "https://gofreetool.com/tools/word-counter"
        assert all(e.priority == 0.8 for e in tools)
        assert all(e.change_frequency == ChangeFrequency.MONTHLY for e in tools)

    def test_static_tail(self, entries):
        tail = [(e.url, e.priority, e.change_frequency) for e in entries[-4:]]
        assert tail == [
            ("https://gofreetool.com/about", 0.5, ChangeFrequency.MONTHLY),
            ("https://gofreetool.com/favorites", 0.6, ChangeFrequency.WEEKLY),
            ("https://gofreetool.com/privacy-policy", 0.3, ChangeFrequency.YEARLY),
            ("https://gofreetool.com/cookie-policy", 0.3, ChangeFrequency.YEARLY),
        ]

    def test_shared_timestamp(self, entries, fixed_now):
        assert {e.last_modified for e in entries} == {fixed_now}

    def test_defaults_to_utc_now(self, lookup, site):
        before = datetime.now(timezone.utc)
        entries = SitemapGenerator(lookup, site).generate()
        after = datetime.now(timezone.utc)
        assert before <= entries[0].last_modified <= after
        assert len({e.last_modified for e in entries}) == 1

    def test_packaged_catalog_size(self, site):
        from toolcatalog.catalog import CatalogLookup, load_catalog

        entries = SitemapGenerator(CatalogLookup(load_catalog()), site).generate()
        assert len(entries) == 1 + 13 + 89 + 4


class TestSitemapXml:
    def test_document_structure(self, entries):
        root = ET.fromstring(render_sitemap_xml(entries))
        ns = {"sm": SITEMAP_NAMESPACE}
        assert root.tag == f"{{{SITEMAP_NAMESPACE}}}urlset"

        urls = root.findall("sm:url", ns)
        assert len(urls) == len(entries)

        first = urls[0]
        assert first.find("sm:loc", ns).text == "https://gofreetool.com"
        assert first.find("sm:lastmod", ns).text == "2024-05-01T12:30:00+00:00"
        assert first.find("sm:changefreq", ns).text == "daily"
        assert first.find("sm:priority", ns).text == "1.0"

    def test_xml_declaration(self, entries):
        assert render_sitemap_xml(entries).startswith(b"<?xml")

"""
Tests for category display-name helpers.
"""

import unittest

from toolcatalog.catalog import category_glyph, category_label, split_display_name

from conftest import make_category


class TestSplitDisplayName(unittest.TestCase):
    def test_glyph_and_label(self):
        self.assertEqual(split_display_name("✍️ Writing & Text"), ("✍️", "Writing & Text"))

    def test_single_token_has_no_glyph(self):
        self.assertEqual(split_display_name("Calculators"), (None, "Calculators"))

    def test_extra_whitespace_is_trimmed(self):
        self.assertEqual(split_display_name("  🧮   Calculators  "), ("🧮", "Calculators"))

    def test_only_first_token_is_stripped(self):
        glyph, label = split_display_name("🔐 Security & Encoding Tools")
        self.assertEqual(glyph, "🔐")
        self.assertEqual(label, "Security & Encoding Tools")


class TestCategoryHelpers(unittest.TestCase):
    def test_label(self):
        category = make_category("writing", "✍️ Writing & Text", icon="📝")
        self.assertEqual(category_label(category), "Writing & Text")

    def test_glyph_comes_from_name_not_icon(self):
        category = make_category("calculators", "🧮 Calculators", icon="📊")
        self.assertEqual(category_glyph(category), "🧮")

    def test_glyph_falls_back_to_icon(self):
        category = make_category("misc", "Misc", icon="📦")
        self.assertEqual(category_glyph(category), "📦")

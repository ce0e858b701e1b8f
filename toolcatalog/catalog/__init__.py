"""
Tool catalog: the single source of truth for categories and tools.

Usage:
    from toolcatalog.catalog import CatalogLookup, load_catalog

    lookup = CatalogLookup(load_catalog())
    tool = lookup.get_tool_by_slug("word-counter")
"""

from .errors import CatalogError, DataIntegrityError
from .lookup import FEATURED_TOOLS_LIMIT, CatalogLookup
from .presentation import category_glyph, category_label, split_display_name
from .store import DEFAULT_CATALOG_PATH, CatalogStore, catalog_from_dict, load_catalog

__all__ = [
    "CatalogError",
    "CatalogLookup",
    "CatalogStore",
    "DataIntegrityError",
    "DEFAULT_CATALOG_PATH",
    "FEATURED_TOOLS_LIMIT",
    "catalog_from_dict",
    "category_glyph",
    "category_label",
    "load_catalog",
    "split_display_name",
]

"""
Query functions over the catalog store.

Every lookup is a pure function of the immutable store. A slug that does not
resolve yields ``None`` (or an empty tuple) rather than an exception: stale
bookmarks and crawler-guessed URLs are routine, not exceptional.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from ..types.catalog import Category, CategorySEO, Subcategory, Tool
from .store import CatalogStore

logger = logging.getLogger(__name__)

FEATURED_TOOLS_LIMIT = 6


class CatalogLookup:
    """
    Read-only query service for a CatalogStore.

    Usage:
        lookup = CatalogLookup(load_catalog())

        tool = lookup.get_tool_by_slug("emi-calculator")
        if tool is None:
            ...  # render the not-found variant

        tools = lookup.get_tools_by_category("calculators")
    """

    def __init__(self, store: CatalogStore):
        self._store = store
        self._tools_by_slug: Dict[str, Tool] = {t.slug: t for t in store.tools}
        self._categories_by_slug: Dict[str, Category] = {
            c.slug: c for c in store.categories
        }
        self._tools_by_category: Dict[str, List[Tool]] = {
            c.slug: [] for c in store.categories
        }
        for tool in store.tools:
            self._tools_by_category[tool.category].append(tool)

    @property
    def store(self) -> CatalogStore:
        return self._store

    # ==========================================================================
    # Core lookups
    # ==========================================================================

    def get_tool_by_slug(self, slug: str) -> Optional[Tool]:
        """
        Get a tool by its slug.

        Args:
            slug: Exact, case-sensitive routing key.

        Returns:
            The tool, or None if no tool has this slug.
        """
        return self._tools_by_slug.get(slug)

    def get_category_by_slug(self, slug: str) -> Optional[Category]:
        """
        Get a category by its slug.

        Args:
            slug: Exact, case-sensitive routing key.

        Returns:
            The category, or None if no category has this slug.
        """
        return self._categories_by_slug.get(slug)

    def get_tools_by_category(self, category_slug: str) -> Tuple[Tool, ...]:
        """
        Get every tool in a category, in catalog order.

        Args:
            category_slug: Slug of the owning category.

        Returns:
            Tuple of tools; empty when the category has none or is unknown.
        """
        return tuple(self._tools_by_category.get(category_slug, ()))

    def list_tools(self) -> Tuple[Tool, ...]:
        """All tools in catalog order."""
        return self._store.tools

    def list_categories(self) -> Tuple[Category, ...]:
        """All categories in catalog order."""
        return self._store.categories

    # ==========================================================================
    # Curated views
    # ==========================================================================

    def get_featured_tools(self, limit: int = FEATURED_TOOLS_LIMIT) -> Tuple[Tool, ...]:
        """Featured tools in catalog order, capped at ``limit``."""
        return tuple(t for t in self._store.tools if t.featured)[:limit]

    def get_related_tools(self, tool_slug: str) -> Tuple[Tool, ...]:
        """
        Get the tools a tool links to.

        Unresolvable slugs in the tool's ``related_tools`` are skipped.

        Args:
            tool_slug: Slug of the source tool.

        Returns:
            Tuple of related tools; empty for an unknown tool.
        """
        tool = self.get_tool_by_slug(tool_slug)
        if tool is None:
            return ()
        return self._resolve_tools(tool.related_tools)

    def get_category_seo(self, slug: str) -> Optional[CategorySEO]:
        """Editorial SEO copy for a category, if any was authored."""
        return self._store.category_seo.get(slug)

    def get_popular_tools_for_category(self, category_slug: str) -> Tuple[Tool, ...]:
        """Hand-picked popular tools of a category, in curated order."""
        return self._resolve_tools(self._store.popular_tools.get(category_slug, ()))

    def get_related_categories(self, category_slug: str) -> Tuple[Category, ...]:
        """Categories linked from a category page, in curated order."""
        slugs = self._store.related_categories.get(category_slug, ())
        return tuple(
            self._categories_by_slug[s] for s in slugs if s in self._categories_by_slug
        )

    def get_subcategories_for_category(self, category_slug: str) -> Tuple[Subcategory, ...]:
        """Tool groupings shown on a category page."""
        return self._store.subcategories.get(category_slug, ())

    def _resolve_tools(self, slugs: Iterable[str]) -> Tuple[Tool, ...]:
        return tuple(
            self._tools_by_slug[s] for s in slugs if s in self._tools_by_slug
        )

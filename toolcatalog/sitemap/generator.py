"""
Sitemap generation.

Enumerates every routable URL in a fixed order: home, categories, tools,
then the static pages. The catalog carries no per-entity modification times,
so every entry shares the generation timestamp.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from ..catalog.lookup import CatalogLookup
from ..types.site import SiteConfig
from ..types.sitemap import ChangeFrequency, SitemapEntry

logger = logging.getLogger(__name__)

HOME_PRIORITY = 1.0
CATEGORY_PRIORITY = 0.9
TOOL_PRIORITY = 0.8

# (path, priority, change frequency)
STATIC_PAGES: Tuple[Tuple[str, float, ChangeFrequency], ...] = (
    ("/about", 0.5, ChangeFrequency.MONTHLY),
    ("/favorites", 0.6, ChangeFrequency.WEEKLY),
    ("/privacy-policy", 0.3, ChangeFrequency.YEARLY),
    ("/cookie-policy", 0.3, ChangeFrequency.YEARLY),
)


class SitemapGenerator:
    """
    Builds the list of sitemap entries for a catalog.

    Usage:
        entries = SitemapGenerator(lookup, site).generate()
    """

    def __init__(self, lookup: CatalogLookup, site: SiteConfig):
        self.lookup = lookup
        self.site = site

    def generate(self, now: Optional[datetime] = None) -> List[SitemapEntry]:
        """
        Generate every sitemap entry.

        Args:
            now: Timestamp to stamp on every entry. Defaults to the current
                UTC time.

        Returns:
            Entries in order: home, categories, tools, static pages.
        """
        last_modified = now or datetime.now(timezone.utc)

        def entry(url: str, priority: float, frequency: ChangeFrequency) -> SitemapEntry:
            return SitemapEntry(
                url=url,
                last_modified=last_modified,
                change_frequency=frequency,
                priority=priority,
            )

        entries = [entry(self.site.url, HOME_PRIORITY, ChangeFrequency.DAILY)]

        entries.extend(
            entry(
                self.site.absolute(f"/category/{category.slug}"),
                CATEGORY_PRIORITY,
                ChangeFrequency.WEEKLY,
            )
            for category in self.lookup.list_categories()
        )

        entries.extend(
            entry(
                self.site.absolute(f"/tools/{tool.slug}"),
                TOOL_PRIORITY,
                ChangeFrequency.MONTHLY,
            )
            for tool in self.lookup.list_tools()
        )

        entries.extend(
            entry(self.site.absolute(path), priority, frequency)
            for path, priority, frequency in STATIC_PAGES
        )

        logger.debug(f"Generated {len(entries)} sitemap entries")
        return entries

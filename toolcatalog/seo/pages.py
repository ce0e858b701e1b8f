"""
Metadata for concrete pages: tools, categories and the static pages.

Resolvers look the entity up first and only call the generator when it
exists; an unknown slug yields ``PageMetadata.empty()``.
"""
import logging
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from ..catalog.lookup import CatalogLookup
from ..catalog.presentation import category_label
from ..types.seo import PageMetadata
from .metadata import MetadataGenerator

logger = logging.getLogger(__name__)


class StaticPage(BaseModel):
    """SEO copy for a page that is not backed by a catalog entity."""

    path: str
    title: str
    description: str
    keywords: Tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)


STATIC_PAGES: Dict[str, StaticPage] = {
    "home": StaticPage(
        path="/",
        title="Free Daily-Use Tools & Calculators",
        description=(
            "Simple, free calculators and utilities for everyday life. EMI calculator, "
            "BMI calculator, word counter, and more. No signup required."
        ),
        keywords=(
            "free tools",
            "calculators",
            "online tools",
            "emi calculator",
            "bmi calculator",
            "word counter",
        ),
    ),
    "privacy-policy": StaticPage(
        path="/privacy-policy",
        title="Privacy Policy",
        description=(
            "Privacy policy for gofreetool.com. We respect your privacy and do not "
            "collect personal data."
        ),
        keywords=("privacy policy", "data protection"),
    ),
    "cookie-policy": StaticPage(
        path="/cookie-policy",
        title="Cookie Policy",
        description="Cookie policy for gofreetool.com. Learn about the cookies we use.",
        keywords=("cookie policy",),
    ),
    "about": StaticPage(
        path="/about",
        title="About Us",
        description=(
            "Learn about gofreetool.com - a collection of free, easy-to-use tools for "
            "everyday tasks."
        ),
        keywords=("about us",),
    ),
}


class PageMetadataResolver:
    """Resolves slugs and page names to PageMetadata."""

    def __init__(
        self,
        lookup: CatalogLookup,
        generator: MetadataGenerator,
        static_pages: Optional[Dict[str, StaticPage]] = None,
    ):
        self.lookup = lookup
        self.generator = generator
        self.static_pages = static_pages if static_pages is not None else STATIC_PAGES

    def for_tool(self, slug: str) -> PageMetadata:
        """Metadata for ``/tools/<slug>``; empty when the tool does not exist."""
        tool = self.lookup.get_tool_by_slug(slug)
        if tool is None:
            logger.debug(f"No metadata for unknown tool '{slug}'")
            return PageMetadata.empty()

        return self.generator.generate(
            tool.seo.title,
            tool.seo.description,
            tool.seo.keywords,
            f"/tools/{tool.slug}",
        )

    def for_category(self, slug: str) -> PageMetadata:
        """
        Metadata for ``/category/<slug>``.

        Uses the authored category SEO copy when present and falls back to a
        title synthesized from the category label.
        """
        category = self.lookup.get_category_by_slug(slug)
        if category is None:
            logger.debug(f"No metadata for unknown category '{slug}'")
            return PageMetadata.empty()

        path = f"/category/{category.slug}"
        seo = self.lookup.get_category_seo(slug)
        if seo is not None:
            return self.generator.generate(seo.title, seo.description, seo.keywords, path)

        return self.generator.generate(
            f"Free {category_label(category)} Tools Online",
            category.description,
            (),
            path,
        )

    def for_page(self, name: str) -> PageMetadata:
        """Metadata for a static page such as ``about``; empty for unknown names."""
        page = self.static_pages.get(name)
        if page is None:
            return PageMetadata.empty()
        return self.generator.generate(page.title, page.description, page.keywords, page.path)

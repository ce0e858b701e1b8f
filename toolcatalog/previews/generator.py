"""
Preview image generation.

Binds catalog entities to templates and hands them to the rasterizer.
Unknown slugs never fail: they produce the "not found" fallback image.
"""

import asyncio
import logging
from typing import Optional, Union

from ..catalog.lookup import CatalogLookup
from ..types.previews import PreviewKind, PreviewTemplate
from ..types.site import SiteConfig
from .rasterizer import PillowRasterizer
from .templates import (
    CATEGORY_NOT_FOUND,
    TOOL_NOT_FOUND,
    category_template,
    home_template,
    not_found_template,
    tool_template,
)

logger = logging.getLogger(__name__)


class PreviewImageGenerator:
    """
    Produces 1200x630 social preview PNGs for the home page, categories and tools.

    Usage:
        generator = PreviewImageGenerator(lookup, site, PillowRasterizer())
        png = generator.render(PreviewKind.TOOL, "word-counter")
    """

    def __init__(
        self,
        lookup: CatalogLookup,
        site: SiteConfig,
        rasterizer: Optional[PillowRasterizer] = None,
    ):
        self.lookup = lookup
        self.site = site
        self.rasterizer = rasterizer or PillowRasterizer()

    def build_template(
        self,
        kind: Union[PreviewKind, str],
        slug: Optional[str] = None,
    ) -> PreviewTemplate:
        """
        Choose and fill the template for a page.

        Args:
            kind: ``home``, ``category`` or ``tool``
            slug: Category or tool slug; ignored for ``home``

        Raises:
            ValueError: If ``kind`` is not a known preview kind
        """
        kind = PreviewKind(kind)

        if kind == PreviewKind.HOME:
            return home_template(self.site)

        if kind == PreviewKind.CATEGORY:
            category = self.lookup.get_category_by_slug(slug) if slug else None
            if category is None:
                logger.info(f"No category for preview slug {slug!r}, using fallback")
                return not_found_template(CATEGORY_NOT_FOUND)
            return category_template(category, self.site)

        tool = self.lookup.get_tool_by_slug(slug) if slug else None
        if tool is None:
            logger.info(f"No tool for preview slug {slug!r}, using fallback")
            return not_found_template(TOOL_NOT_FOUND)
        return tool_template(tool, self.site)

    def render(self, kind: Union[PreviewKind, str], slug: Optional[str] = None) -> bytes:
        """
        Render the preview for a page as PNG bytes.

        Raises:
            ValueError: If ``kind`` is not a known preview kind
            RenderError: If rasterization fails
        """
        return self.rasterizer.render(self.build_template(kind, slug))

    async def render_async(
        self,
        kind: Union[PreviewKind, str],
        slug: Optional[str] = None,
    ) -> bytes:
        """Same as ``render``, with rasterization on a worker thread."""
        template = self.build_template(kind, slug)
        return await asyncio.to_thread(self.rasterizer.render, template)

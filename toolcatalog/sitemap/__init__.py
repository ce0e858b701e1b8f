"""Sitemap generation and serialization."""

from .generator import (
    CATEGORY_PRIORITY,
    HOME_PRIORITY,
    STATIC_PAGES,
    TOOL_PRIORITY,
    SitemapGenerator,
)
from .serializer import SITEMAP_NAMESPACE, render_sitemap_xml

__all__ = [
    "CATEGORY_PRIORITY",
    "HOME_PRIORITY",
    "SITEMAP_NAMESPACE",
    "STATIC_PAGES",
    "SitemapGenerator",
    "TOOL_PRIORITY",
    "render_sitemap_xml",
]

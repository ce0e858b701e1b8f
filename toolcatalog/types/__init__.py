"""Type definitions for the tool catalog."""

from .catalog import FAQ, Category, CategorySEO, Subcategory, Tool, ToolSEO
from .previews import (
    PREVIEW_HEIGHT,
    PREVIEW_WIDTH,
    Background,
    GradientStop,
    LayerPosition,
    PreviewKind,
    PreviewTemplate,
    TextLayer,
)
from .seo import (
    Alternates,
    OpenGraph,
    OpenGraphImage,
    PageMetadata,
    StructuredData,
    TwitterCard,
)
from .site import SiteConfig
from .sitemap import ChangeFrequency, SitemapEntry

__all__ = [
    # Catalog
    "Category",
    "CategorySEO",
    "FAQ",
    "Subcategory",
    "Tool",
    "ToolSEO",
    # Site
    "SiteConfig",
    # SEO
    "Alternates",
    "OpenGraph",
    "OpenGraphImage",
    "PageMetadata",
    "StructuredData",
    "TwitterCard",
    # Sitemap
    "ChangeFrequency",
    "SitemapEntry",
    # Previews
    "PREVIEW_WIDTH",
    "PREVIEW_HEIGHT",
    "Background",
    "GradientStop",
    "LayerPosition",
    "PreviewKind",
    "PreviewTemplate",
    "TextLayer",
]

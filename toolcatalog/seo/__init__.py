"""SEO artifacts: page metadata and structured data."""

from .metadata import SITE_KEYWORDS, InvalidPathError, MetadataGenerator, merge_keywords
from .pages import STATIC_PAGES, PageMetadataResolver, StaticPage
from .structured_data import (
    breadcrumb_schema,
    collection_page_schema,
    faq_schema,
    organization_schema,
    website_schema,
)

__all__ = [
    "InvalidPathError",
    "MetadataGenerator",
    "PageMetadataResolver",
    "SITE_KEYWORDS",
    "STATIC_PAGES",
    "StaticPage",
    "merge_keywords",
    "breadcrumb_schema",
    "collection_page_schema",
    "faq_schema",
    "organization_schema",
    "website_schema",
]

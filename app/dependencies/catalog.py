"""
Catalog and generator providers for route handlers.

The catalog is loaded once per process from the configured path and shared
by every request. Tests replace these providers through
``app.dependency_overrides``.
"""

import logging
from functools import lru_cache

from fastapi import Depends

from toolcatalog.catalog import CatalogLookup, CatalogStore, load_catalog
from toolcatalog.config import get_settings
from toolcatalog.previews import PillowRasterizer, PreviewImageGenerator
from toolcatalog.seo import MetadataGenerator, PageMetadataResolver
from toolcatalog.sitemap import SitemapGenerator
from toolcatalog.types import SiteConfig

logger = logging.getLogger(__name__)


@lru_cache()
def get_default_catalog() -> CatalogStore:
    """
    Load the catalog named by ``CATALOG_DATA_PATH`` (or the packaged file).

    Raises:
        DataIntegrityError: If the catalog file is missing or inconsistent
    """
    store = load_catalog(get_settings().catalog.catalog_data_path)
    logger.info(
        f"Catalog ready: {len(store.categories)} categories, {len(store.tools)} tools"
    )
    return store


@lru_cache()
def get_site() -> SiteConfig:
    return get_settings().site.to_site_config()


@lru_cache()
def get_rasterizer() -> PillowRasterizer:
    previews = get_settings().previews
    return PillowRasterizer(
        font_path=previews.preview_font_path,
        bold_font_path=previews.preview_bold_font_path,
        emoji_font_path=previews.preview_emoji_font_path,
    )


@lru_cache(maxsize=4)
def _lookup_for(store: CatalogStore) -> CatalogLookup:
    return CatalogLookup(store)


def get_lookup(store: CatalogStore = Depends(get_default_catalog)) -> CatalogLookup:
    """Indexed view of the catalog, built once per store."""
    return _lookup_for(store)


def get_metadata_resolver(
    lookup: CatalogLookup = Depends(get_lookup),
    site: SiteConfig = Depends(get_site),
) -> PageMetadataResolver:
    return PageMetadataResolver(lookup, MetadataGenerator(site))


def get_sitemap_generator(
    lookup: CatalogLookup = Depends(get_lookup),
    site: SiteConfig = Depends(get_site),
) -> SitemapGenerator:
    return SitemapGenerator(lookup, site)


def get_preview_generator(
    lookup: CatalogLookup = Depends(get_lookup),
    site: SiteConfig = Depends(get_site),
    rasterizer: PillowRasterizer = Depends(get_rasterizer),
) -> PreviewImageGenerator:
    return PreviewImageGenerator(lookup, site, rasterizer)

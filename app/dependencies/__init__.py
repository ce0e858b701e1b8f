"""
FastAPI dependencies for the tool catalog API.

Usage:
    from app.dependencies import get_lookup, get_preview_generator
"""

from app.dependencies.catalog import (
    get_default_catalog,
    get_lookup,
    get_metadata_resolver,
    get_preview_generator,
    get_rasterizer,
    get_site,
    get_sitemap_generator,
)

__all__ = [
    "get_default_catalog",
    "get_lookup",
    "get_metadata_resolver",
    "get_preview_generator",
    "get_rasterizer",
    "get_site",
    "get_sitemap_generator",
]

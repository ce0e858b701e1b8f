"""API routes for the tool catalog service."""

from .catalog import router as catalog_router
from .health import router as health_router
from .pages import router as pages_router
from .previews import router as previews_router
from .sitemap import router as sitemap_router

__all__ = [
    "catalog_router",
    "health_router",
    "pages_router",
    "previews_router",
    "sitemap_router",
]

"""
Page metadata endpoints.

Return the SEO record (title, canonical URL, Open Graph, Twitter card) for a
page. Unknown tools, categories and pages yield an empty object so callers can
render a page without metadata rather than fail.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends

from toolcatalog.seo import PageMetadataResolver
from toolcatalog.types import PageMetadata

from ..dependencies import get_metadata_resolver

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/metadata", tags=["metadata"])


def _to_response(metadata: PageMetadata) -> Dict[str, Any]:
    if metadata.is_empty:
        return {}
    return metadata.model_dump(mode="json", exclude_none=True)


@router.get("/pages/{page}")
async def page_metadata(
    page: str,
    resolver: PageMetadataResolver = Depends(get_metadata_resolver),
) -> Dict[str, Any]:
    """Metadata for a static page: ``home``, ``about``, ``privacy-policy``, ``cookie-policy``."""
    return _to_response(resolver.for_page(page))


@router.get("/tools/{slug}")
async def tool_metadata(
    slug: str,
    resolver: PageMetadataResolver = Depends(get_metadata_resolver),
) -> Dict[str, Any]:
    return _to_response(resolver.for_tool(slug))


@router.get("/categories/{slug}")
async def category_metadata(
    slug: str,
    resolver: PageMetadataResolver = Depends(get_metadata_resolver),
) -> Dict[str, Any]:
    return _to_response(resolver.for_category(slug))

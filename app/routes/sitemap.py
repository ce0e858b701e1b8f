"""
Sitemap endpoint.
"""

import logging

from fastapi import APIRouter, Depends, Response

from toolcatalog.sitemap import SitemapGenerator, render_sitemap_xml

from ..dependencies import get_sitemap_generator

logger = logging.getLogger(__name__)

router = APIRouter(tags=["sitemap"])


@router.get("/sitemap.xml", response_class=Response)
async def sitemap(generator: SitemapGenerator = Depends(get_sitemap_generator)) -> Response:
    """All routable URLs in sitemaps.org format, stamped with the current time."""
    entries = generator.generate()
    logger.debug(f"Serving sitemap with {len(entries)} URLs")
    return Response(content=render_sitemap_xml(entries), media_type="application/xml")

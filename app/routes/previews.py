"""
Social preview image endpoints.

Serve 1200x630 PNGs at the paths crawlers expect next to each page. Unknown
slugs still get an image (the "not found" fallback), never a 404.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Response
from fastapi.concurrency import run_in_threadpool

from toolcatalog.config import get_settings
from toolcatalog.previews import PreviewImageGenerator, RenderError
from toolcatalog.types import PreviewKind

from ..dependencies import get_preview_generator
from ..exceptions import PreviewRenderError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["previews"])

PNG_MEDIA_TYPE = "image/png"


async def _render(
    generator: PreviewImageGenerator,
    kind: PreviewKind,
    slug: Optional[str] = None,
) -> Response:
    try:
        png = await run_in_threadpool(generator.render, kind, slug)
    except RenderError as exc:
        raise PreviewRenderError(
            kind=kind.value,
            slug=slug,
            internal_message=str(exc),
        ) from exc

    max_age = get_settings().previews.preview_cache_seconds
    return Response(
        content=png,
        media_type=PNG_MEDIA_TYPE,
        headers={"Cache-Control": f"public, max-age={max_age}, immutable"},
    )


@router.get("/opengraph-image", response_class=Response)
async def home_preview(
    generator: PreviewImageGenerator = Depends(get_preview_generator),
) -> Response:
    return await _render(generator, PreviewKind.HOME)


@router.get("/tools/{slug}/opengraph-image", response_class=Response)
async def tool_preview(
    slug: str,
    generator: PreviewImageGenerator = Depends(get_preview_generator),
) -> Response:
    return await _render(generator, PreviewKind.TOOL, slug)


@router.get("/category/{slug}/opengraph-image", response_class=Response)
async def category_preview(
    slug: str,
    generator: PreviewImageGenerator = Depends(get_preview_generator),
) -> Response:
    return await _render(generator, PreviewKind.CATEGORY, slug)

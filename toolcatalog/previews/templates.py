"""
Preview templates for the home page, categories and tools.

Each builder maps a catalog entity onto a ``PreviewTemplate``. Nothing here
touches Pillow, so templates can be inspected in tests without rendering.
"""

from typing import Tuple

from ..catalog.presentation import category_glyph, category_label
from ..types.catalog import Category, Tool
from ..types.previews import (
    Background,
    GradientStop,
    LayerPosition,
    PreviewTemplate,
    TextLayer,
)
from ..types.site import SiteConfig

TEAL = "#0d9488"
CYAN = "#0891b2"
INDIGO = "#6366f1"

GRADIENT_ANGLE = 135.0

BRAND_GRADIENT = Background(
    angle=GRADIENT_ANGLE,
    stops=(
        GradientStop(color=TEAL, offset=0.0),
        GradientStop(color=CYAN, offset=0.5),
        GradientStop(color=INDIGO, offset=1.0),
    ),
)

FALLBACK_GRADIENT = Background(
    angle=GRADIENT_ANGLE,
    stops=(
        GradientStop(color=TEAL, offset=0.0),
        GradientStop(color=CYAN, offset=1.0),
    ),
)

CONTENT_PADDING = 60

HOME_GLYPH = "🛠️"
HOME_CAPTION = "No Signup Required • 100% Free • Browser-Based"

TOOL_NOT_FOUND = "Tool Not Found"
CATEGORY_NOT_FOUND = "Category Not Found"


def _white(opacity: float = 1.0) -> Tuple[int, int, int, int]:
    return (255, 255, 255, round(255 * opacity))


def _footer(site: SiteConfig) -> TextLayer:
    return TextLayer(
        text=site.domain,
        font_size=24,
        color=_white(0.6),
        position=LayerPosition.FOOTER,
        bottom_offset=40,
    )


def _glyph(text: str, size: int, margin_bottom: int) -> TextLayer:
    return TextLayer(text=text, font_size=size, glyph=True, margin_bottom=margin_bottom)


def home_template(site: SiteConfig) -> PreviewTemplate:
    """Site-wide preview: tool glyph, brand, tagline and a short pitch."""
    return PreviewTemplate(
        background=BRAND_GRADIENT,
        layers=(
            _glyph(HOME_GLYPH, 80, margin_bottom=40),
            TextLayer(
                text=site.brand,
                font_size=72,
                bold=True,
                shadow=True,
                margin_bottom=20,
            ),
            TextLayer(
                text=site.tagline,
                font_size=36,
                color=_white(0.9),
                max_width=800,
            ),
            TextLayer(
                text=HOME_CAPTION,
                font_size=24,
                color=_white(0.7),
                margin_top=30,
            ),
        ),
    )


def category_template(category: Category, site: SiteConfig) -> PreviewTemplate:
    """
    Preview for a category page.

    The glyph and title both come from the display name: ``"✍️ Writing & Text"``
    yields the glyph ``"✍️"`` and the title ``"Writing & Text"``.
    """
    label = category_label(category)
    return PreviewTemplate(
        background=BRAND_GRADIENT,
        padding=CONTENT_PADDING,
        layers=(
            _glyph(category_glyph(category), 100, margin_bottom=30),
            TextLayer(
                text=label,
                font_size=60,
                bold=True,
                shadow=True,
                margin_bottom=20,
            ),
            TextLayer(
                text=f"Free {label} Tools Online",
                font_size=28,
                color=_white(0.9),
                max_width=900,
            ),
            _footer(site),
        ),
    )


def tool_template(tool: Tool, site: SiteConfig) -> PreviewTemplate:
    """Preview for a tool page. Long names wrap onto at most two lines."""
    return PreviewTemplate(
        background=BRAND_GRADIENT,
        padding=CONTENT_PADDING,
        layers=(
            _glyph(tool.icon, 100, margin_bottom=30),
            TextLayer(
                text=tool.name,
                font_size=60,
                bold=True,
                shadow=True,
                max_width=1000,
                max_lines=2,
                margin_bottom=20,
            ),
            TextLayer(
                text=tool.short_description,
                font_size=28,
                color=_white(0.9),
                max_width=900,
                line_height=1.4,
            ),
            _footer(site),
        ),
    )


def not_found_template(message: str) -> PreviewTemplate:
    """Plain fallback used when the requested entity does not exist."""
    return PreviewTemplate(
        background=FALLBACK_GRADIENT,
        layers=(TextLayer(text=message, font_size=48),),
    )

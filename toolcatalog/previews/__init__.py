"""
Social preview images.

Usage:
    from toolcatalog.previews import PillowRasterizer, PreviewImageGenerator

    generator = PreviewImageGenerator(lookup, site, PillowRasterizer())
    png = generator.render("category", "writing")
"""

from .generator import PreviewImageGenerator
from .rasterizer import PillowRasterizer, RenderError, load_font, paint_gradient, wrap_text
from .templates import (
    CATEGORY_NOT_FOUND,
    TOOL_NOT_FOUND,
    category_template,
    home_template,
    not_found_template,
    tool_template,
)

__all__ = [
    "CATEGORY_NOT_FOUND",
    "PillowRasterizer",
    "PreviewImageGenerator",
    "RenderError",
    "TOOL_NOT_FOUND",
    "category_template",
    "home_template",
    "load_font",
    "not_found_template",
    "paint_gradient",
    "tool_template",
    "wrap_text",
]

"""
Display helpers for catalog entities.

Category names are authored as ``"<glyph> <label>"``. These helpers split
that convention for templates; they are not part of the data model, and the
``icon`` field stays independent of the name.
"""

from typing import Optional, Tuple

from ..types.catalog import Category


def split_display_name(name: str) -> Tuple[Optional[str], str]:
    """
    Split a display name into its leading glyph and its label.

    Args:
        name: Display name such as ``"✍️ Writing & Text"``.

    Returns:
        ``(glyph, label)``. A single-token name has no glyph and is returned
        whole as the label.
    """
    parts = name.strip().split(None, 1)
    if len(parts) < 2:
        return None, name.strip()
    return parts[0], parts[1].strip()


def category_label(category: Category) -> str:
    """Human-readable category label with the leading glyph removed."""
    return split_display_name(category.name)[1]


def category_glyph(category: Category) -> str:
    """Glyph leading the category name, falling back to ``icon``."""
    glyph, _ = split_display_name(category.name)
    return glyph or category.icon

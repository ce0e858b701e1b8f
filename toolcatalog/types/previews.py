"""
Type definitions for social preview images.

A preview is described declaratively: a gradient background plus an ordered
list of text layers. The rasterizer knows nothing about tools or categories;
it only draws ``PreviewTemplate`` instances.
"""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

PREVIEW_WIDTH = 1200
PREVIEW_HEIGHT = 630


class PreviewKind(str, Enum):
    """Which page a preview image belongs to."""

    HOME = "home"
    CATEGORY = "category"
    TOOL = "tool"


class LayerPosition(str, Enum):
    """How a layer is placed on the canvas."""

    FLOW = "flow"  # stacked and vertically centered with the other flow layers
    FOOTER = "footer"  # pinned above the bottom edge


class GradientStop(BaseModel):
    """A color at a relative offset (0.0 to 1.0) along the gradient line."""

    color: str
    offset: float = Field(..., ge=0.0, le=1.0)

    model_config = ConfigDict(frozen=True)


class Background(BaseModel):
    """Linear gradient background, angle in CSS degrees (135 = to bottom right)."""

    angle: float = 135.0
    stops: Tuple[GradientStop, ...] = Field(..., min_length=2)

    model_config = ConfigDict(frozen=True)


class TextLayer(BaseModel):
    """A block of horizontally centered text."""

    text: str
    font_size: int = Field(..., gt=0)
    bold: bool = False
    glyph: bool = False  # emoji/icon text, drawn with the emoji font when one is configured
    color: Tuple[int, int, int, int] = (255, 255, 255, 255)
    max_width: Optional[int] = None
    max_lines: Optional[int] = None
    line_height: float = 1.2
    margin_top: int = 0
    margin_bottom: int = 0
    shadow: bool = False
    position: LayerPosition = LayerPosition.FLOW
    bottom_offset: int = 0

    model_config = ConfigDict(frozen=True)


class PreviewTemplate(BaseModel):
    """Everything the rasterizer needs to draw one image."""

    background: Background
    layers: Tuple[TextLayer, ...] = ()
    padding: int = 0
    width: int = PREVIEW_WIDTH
    height: int = PREVIEW_HEIGHT

    model_config = ConfigDict(frozen=True)

    @property
    def texts(self) -> Tuple[str, ...]:
        """The text of every layer, in drawing order."""
        return tuple(layer.text for layer in self.layers)

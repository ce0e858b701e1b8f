"""
Pillow rasterizer for preview templates.

One pipeline draws every ``PreviewTemplate``:

1. Paint the linear gradient background (CSS angle semantics).
2. Lay out FLOW layers as a vertically centered column and FOOTER layers at a
   fixed distance from the bottom edge.
3. Draw drop shadows onto a blurred layer, then text onto a transparent
   overlay, and composite both over the background.
4. Encode the result as an RGB PNG.
"""

import io
import logging
import math
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional, Sequence, Tuple

from PIL import Image, ImageColor, ImageDraw, ImageFilter, ImageFont

from ..types.previews import Background, LayerPosition, PreviewTemplate, TextLayer
from ..utils.logging import Timer

logger = logging.getLogger(__name__)

ELLIPSIS = "…"

SHADOW_OFFSET = 4
SHADOW_BLUR_RADIUS = 4
SHADOW_COLOR = (0, 0, 0, 77)

# Color emoji fonts (CBDT/sbix) only ship bitmaps at this size.
EMOJI_NATIVE_SIZE = 109

FontType = ImageFont.FreeTypeFont


class RenderError(Exception):
    """Raised when a preview image cannot be produced."""


@lru_cache(maxsize=64)
def load_font(path: Optional[str], size: int) -> FontType:
    """
    Load a font, cached per ``(path, size)``.

    Args:
        path: TrueType/OpenType file, or None for Pillow's bundled font
        size: Size in pixels

    Raises:
        RenderError: If a configured font cannot be loaded
    """
    if path is None:
        return ImageFont.load_default(size=size)
    try:
        return ImageFont.truetype(path, size)
    except OSError as exc:
        raise RenderError(f"Cannot load font {path!r} at size {size}: {exc}") from exc


def parse_color(value: str) -> Tuple[int, int, int]:
    """Parse a CSS-style color into an RGB triple."""
    try:
        return ImageColor.getrgb(value)[:3]
    except ValueError as exc:
        raise RenderError(f"Invalid gradient color {value!r}") from exc


def gradient_lut(background: Background) -> Tuple[List[int], List[int], List[int]]:
    """
    Build one 256-entry lookup table per channel for the gradient stops.

    Position 0 is the start of the gradient line and 255 its end. Before the
    first stop and after the last, the nearest stop color is used.
    """
    stops = sorted(background.stops, key=lambda stop: stop.offset)
    colors = [parse_color(stop.color) for stop in stops]
    offsets = [stop.offset for stop in stops]

    channels: Tuple[List[int], List[int], List[int]] = ([], [], [])
    for i in range(256):
        t = i / 255
        if t <= offsets[0]:
            rgb = colors[0]
        elif t >= offsets[-1]:
            rgb = colors[-1]
        else:
            index = next(n for n in range(1, len(offsets)) if t <= offsets[n])
            start, end = offsets[index - 1], offsets[index]
            span = end - start
            ratio = (t - start) / span if span else 1.0
            rgb = tuple(
                round(a + (b - a) * ratio)
                for a, b in zip(colors[index - 1], colors[index])
            )
        for channel, value in zip(channels, rgb):
            channel.append(value)
    return channels


def paint_gradient(background: Background, width: int, height: int) -> Image.Image:
    """
    Paint a linear gradient the way CSS ``linear-gradient(<angle>deg, ...)`` does.

    A vertical ramp (CSS 180deg) as long as the CSS gradient line is drawn on
    a square big enough to cover the canvas at any rotation, rotated into
    place, and center-cropped.
    """
    radians = math.radians(background.angle)
    line_length = abs(width * math.sin(radians)) + abs(height * math.cos(radians))
    side = math.ceil(math.hypot(width, height)) + 2
    ramp_length = max(1, round(line_length))
    ramp_top = (side - ramp_length) // 2

    field = Image.new("L", (side, side), 0)
    field.paste(255, (0, ramp_top + ramp_length, side, side))
    field.paste(Image.linear_gradient("L").resize((side, ramp_length)), (0, ramp_top))
    field = field.rotate(180 - background.angle, resample=Image.Resampling.BICUBIC)

    left = (side - width) // 2
    top = (side - height) // 2
    field = field.crop((left, top, left + width, top + height))

    red, green, blue = gradient_lut(background)
    return Image.merge("RGB", (field.point(red), field.point(green), field.point(blue)))


@dataclass
class _PlacedLayer:
    layer: TextLayer
    font: FontType
    lines: List[str]
    line_height: int

    @property
    def block_height(self) -> int:
        return self.line_height * len(self.lines)

    @property
    def outer_height(self) -> int:
        return self.layer.margin_top + self.block_height + self.layer.margin_bottom


class PillowRasterizer:
    """
    Renders ``PreviewTemplate`` instances to PNG bytes.

    Usage:
        rasterizer = PillowRasterizer(font_path="/fonts/Inter-Regular.ttf")
        png = rasterizer.render(template)
    """

    def __init__(
        self,
        font_path: Optional[str] = None,
        bold_font_path: Optional[str] = None,
        emoji_font_path: Optional[str] = None,
    ):
        self.font_path = font_path
        self.bold_font_path = bold_font_path or font_path
        self.emoji_font_path = emoji_font_path

    def render(self, template: PreviewTemplate) -> bytes:
        """
        Draw a template and encode it as PNG.

        Raises:
            RenderError: On font, layout or encode failure
        """
        with Timer("rasterize", logger) as timer:
            try:
                image = self._draw(template)
                buffer = io.BytesIO()
                image.save(buffer, format="PNG")
            except RenderError:
                raise
            except (OSError, ValueError) as exc:
                raise RenderError(f"Failed to render preview: {exc}") from exc

        png = buffer.getvalue()
        logger.debug(
            f"Rendered {template.width}x{template.height} preview "
            f"({len(png)} bytes, {timer.elapsed_ms:.1f}ms)"
        )
        return png

    # =========================================================================
    # Drawing
    # =========================================================================

    def _draw(self, template: PreviewTemplate) -> Image.Image:
        size = (template.width, template.height)
        canvas = paint_gradient(template.background, *size).convert("RGBA")
        shadows = Image.new("RGBA", size, (0, 0, 0, 0))
        overlay = Image.new("RGBA", size, (0, 0, 0, 0))
        measure = ImageDraw.Draw(overlay)

        content_width = template.width - 2 * template.padding
        flow = [
            self._place(layer, measure, content_width)
            for layer in template.layers
            if layer.position == LayerPosition.FLOW
        ]
        footers = [
            self._place(layer, measure, content_width)
            for layer in template.layers
            if layer.position == LayerPosition.FOOTER
        ]

        content_height = template.height - 2 * template.padding
        y = template.padding + (content_height - sum(p.outer_height for p in flow)) / 2
        for placed in flow:
            y += placed.layer.margin_top
            self._draw_block(placed, y, template.width, overlay, shadows)
            y += placed.block_height + placed.layer.margin_bottom

        for placed in footers:
            top = template.height - placed.layer.bottom_offset - placed.block_height
            self._draw_block(placed, top, template.width, overlay, shadows)

        if any(p.layer.shadow for p in flow + footers):
            shadows = shadows.filter(ImageFilter.GaussianBlur(SHADOW_BLUR_RADIUS))
            canvas = Image.alpha_composite(canvas, shadows)
        canvas = Image.alpha_composite(canvas, overlay)
        return canvas.convert("RGB")

    def _font_for(self, layer: TextLayer) -> FontType:
        if layer.glyph and self.emoji_font_path:
            return load_font(self.emoji_font_path, EMOJI_NATIVE_SIZE)
        path = self.bold_font_path if layer.bold else self.font_path
        return load_font(path, layer.font_size)

    def _place(
        self,
        layer: TextLayer,
        draw: ImageDraw.ImageDraw,
        content_width: int,
    ) -> _PlacedLayer:
        font = self._font_for(layer)
        if layer.glyph:
            lines = [layer.text]
        else:
            width = min(layer.max_width or content_width, content_width)
            lines = wrap_text(draw, layer.text, font, width, layer.max_lines)
        return _PlacedLayer(
            layer=layer,
            font=font,
            lines=lines,
            line_height=round(layer.font_size * layer.line_height),
        )

    def _draw_block(
        self,
        placed: _PlacedLayer,
        top: float,
        canvas_width: int,
        overlay: Image.Image,
        shadows: Image.Image,
    ) -> None:
        layer = placed.layer
        center_x = canvas_width / 2
        # Center each line's em box within its line box.
        leading = (placed.line_height - layer.font_size) / 2

        for index, line in enumerate(placed.lines):
            line_top = top + index * placed.line_height + leading
            if layer.glyph and self.emoji_font_path:
                self._paste_glyph(line, placed.font, layer.font_size, center_x, line_top, overlay)
                continue

            if layer.shadow:
                ImageDraw.Draw(shadows).text(
                    (center_x, line_top + SHADOW_OFFSET),
                    line,
                    font=placed.font,
                    fill=SHADOW_COLOR,
                    anchor="ma",
                )
            ImageDraw.Draw(overlay).text(
                (center_x, line_top),
                line,
                font=placed.font,
                fill=layer.color,
                anchor="ma",
            )

    @staticmethod
    def _paste_glyph(
        text: str,
        font: FontType,
        size: int,
        center_x: float,
        top: float,
        overlay: Image.Image,
    ) -> None:
        """Draw a color glyph at its native bitmap size, then scale it down."""
        left, upper, right, lower = font.getbbox(text)
        if right <= left or lower <= upper:
            return
        glyph = Image.new("RGBA", (right - left, lower - upper), (0, 0, 0, 0))
        ImageDraw.Draw(glyph).text((-left, -upper), text, font=font, embedded_color=True)

        scale = size / EMOJI_NATIVE_SIZE
        scaled = glyph.resize(
            (max(1, round(glyph.width * scale)), max(1, round(glyph.height * scale))),
            Image.Resampling.LANCZOS,
        )
        x = round(center_x - scaled.width / 2)
        overlay.alpha_composite(scaled, dest=(max(0, x), max(0, round(top))))


def wrap_text(
    draw: ImageDraw.ImageDraw,
    text: str,
    font: FontType,
    max_width: float,
    max_lines: Optional[int] = None,
) -> List[str]:
    """
    Greedy word wrap.

    A single word wider than ``max_width`` gets a line of its own. When the
    text needs more than ``max_lines`` lines, the last kept line ends with an
    ellipsis.
    """
    words = text.split()
    if not words:
        return [""]

    lines: List[str] = []
    current = words[0]
    for word in words[1:]:
        candidate = f"{current} {word}"
        if draw.textlength(candidate, font=font) <= max_width:
            current = candidate
        else:
            lines.append(current)
            current = word
    lines.append(current)

    if max_lines is not None and len(lines) > max_lines:
        lines = lines[:max_lines]
        lines[-1] = _with_ellipsis(draw, lines[-1], font, max_width)
    return lines


def _with_ellipsis(
    draw: ImageDraw.ImageDraw,
    line: str,
    font: FontType,
    max_width: float,
) -> str:
    words: Sequence[str] = line.split()
    while words:
        candidate = " ".join(words) + ELLIPSIS
        if draw.textlength(candidate, font=font) <= max_width or len(words) == 1:
            return candidate
        words = words[:-1]
    return ELLIPSIS

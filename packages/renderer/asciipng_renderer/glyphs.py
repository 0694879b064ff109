"""Luminance-to-glyph mapping."""

from __future__ import annotations

from asciipng_decoder.models import RasterImage

from .models import GlyphCell, GlyphRamp, RenderedArt
from .ramps import get_ramp

BLANK = GlyphCell(glyph=" ", color=None)


def luminance(r: int, g: int, b: int) -> float:
    return (0.299 * r + 0.587 * g + 0.114 * b) / 255


def glyph_index(r: int, g: int, b: int, ramp_size: int) -> int:
    index = int(luminance(r, g, b) * (ramp_size - 1))
    return max(0, min(ramp_size - 1, index))


def render(image: RasterImage, ramp: GlyphRamp | None = None) -> RenderedArt:
    ramp = ramp or get_ramp(None)
    glyphs = ramp.glyphs
    size = len(glyphs)

    rows: list[tuple[GlyphCell, ...]] = []
    for pixel_row in image.data.tolist():
        cells = []
        for r, g, b, a in pixel_row:
            if a == 0:
                cells.append(BLANK)
            else:
                cells.append(GlyphCell(glyph=glyphs[glyph_index(r, g, b, size)], color=(r, g, b)))
        rows.append(tuple(cells))

    return RenderedArt(width=image.width, height=image.height, rows=tuple(rows))

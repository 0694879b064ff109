"""Renderer package: bilinear resampling and glyph art output."""

from .glyphs import glyph_index, luminance, render
from .markup import MarkupFormat, format_art, to_ansi, to_html, to_text
from .models import GlyphCell, GlyphRamp, RenderedArt
from .ramps import DEFAULT_RAMP_NAME, get_ramp, list_ramps
from .resample import resample

__all__ = [
    "DEFAULT_RAMP_NAME",
    "GlyphCell",
    "GlyphRamp",
    "MarkupFormat",
    "RenderedArt",
    "format_art",
    "get_ramp",
    "glyph_index",
    "list_ramps",
    "luminance",
    "render",
    "resample",
    "to_ansi",
    "to_html",
    "to_text",
]

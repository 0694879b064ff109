"""Built-in glyph ramps, ordered from least to most ink."""

from __future__ import annotations

from .models import GlyphRamp

DEFAULT_RAMP_NAME = "classic"

RAMPS: dict[str, GlyphRamp] = {
    "classic": GlyphRamp(name="classic", glyphs=(".", "+", "*", "#", "@")),
    "dense": GlyphRamp(name="dense", glyphs=(".", ",", ":", ";", "-", "+", "=", "*", "#", "%", "@")),
    "dots": GlyphRamp(name="dots", glyphs=(".", ":", "!", "*", "o", "O", "8", "@")),
    "blocks": GlyphRamp(name="blocks", glyphs=("░", "▒", "▓", "█")),
}


def list_ramps() -> list[str]:
    return sorted(RAMPS.keys())


def get_ramp(name: str | None) -> GlyphRamp:
    if not name:
        return RAMPS[DEFAULT_RAMP_NAME]
    return RAMPS.get(name, RAMPS[DEFAULT_RAMP_NAME])

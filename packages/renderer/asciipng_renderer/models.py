"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GlyphRamp:
    name: str
    glyphs: tuple[str, ...]


@dataclass(frozen=True)
class GlyphCell:
    glyph: str
    color: tuple[int, int, int] | None = None

    @property
    def transparent(self) -> bool:
        return self.color is None


@dataclass(frozen=True)
class RenderedArt:
    width: int
    height: int
    rows: tuple[tuple[GlyphCell, ...], ...]

    def cells(self):
        for row in self.rows:
            yield from row

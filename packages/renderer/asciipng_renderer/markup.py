"""Markup surfaces for rendered glyph art."""

from __future__ import annotations

import html
from enum import Enum

from .models import RenderedArt

ANSI_RESET = "\x1b[0m"


class MarkupFormat(str, Enum):
    HTML = "html"
    ANSI = "ansi"
    TEXT = "text"


def to_html(art: RenderedArt) -> str:
    parts = ["<pre>"]
    for row in art.rows:
        for cell in row:
            if cell.transparent:
                parts.append(" ")
            else:
                r, g, b = cell.color
                parts.append(f'<span style="color: rgb({r},{g},{b});">{html.escape(cell.glyph)}</span>')
        parts.append("\n")
    parts.append("</pre>")
    return "".join(parts)


def to_ansi(art: RenderedArt) -> str:
    parts = []
    for row in art.rows:
        for cell in row:
            if cell.transparent:
                parts.append(" ")
            else:
                r, g, b = cell.color
                parts.append(f"\x1b[38;2;{r};{g};{b}m{cell.glyph}{ANSI_RESET}")
        parts.append("\n")
    return "".join(parts)


def to_text(art: RenderedArt) -> str:
    return "".join("".join(cell.glyph for cell in row) + "\n" for row in art.rows)


def format_art(art: RenderedArt, fmt: MarkupFormat | str = MarkupFormat.HTML) -> str:
    fmt = MarkupFormat(fmt)
    if fmt == MarkupFormat.ANSI:
        return to_ansi(art)
    if fmt == MarkupFormat.TEXT:
        return to_text(art)
    return to_html(art)

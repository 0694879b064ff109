"""Flask HTTP service for PNG-to-glyph-art conversion."""

from .server import create_app, parse_width

__all__ = ["create_app", "parse_width"]

"""Core services: settings, logging, and the PNG-to-glyph-art pipeline."""

from .config import AppConfig, load_config, save_config
from .pipeline import RenderResult, decode_and_render, decode_png, render_png, target_height_for

__all__ = [
    "AppConfig",
    "RenderResult",
    "decode_and_render",
    "decode_png",
    "load_config",
    "render_png",
    "save_config",
    "target_height_for",
]

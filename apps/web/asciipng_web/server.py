"""HTTP front end: multipart PNG upload in, glyph art markup out."""

from __future__ import annotations

import re

from flask import Flask, jsonify, request

from asciipng_core import AppConfig, load_config, render_png
from asciipng_core.logging_setup import get_logger
from asciipng_decoder import PngDecodeError
from asciipng_renderer import to_html


class WidthError(ValueError):
    pass


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_width(raw: str | None, default: int, maximum: int) -> int:
    """Read the leading integer of ``raw`` (``"12px"`` -> 12, ``"1.5"`` -> 1).

    Missing, non-numeric, or zero widths fall back to ``default``.
    """
    match = _LEADING_INT.match(raw or "")
    if match is None:
        return default
    value = int(match.group(1))
    if value == 0:
        return default
    if value < 0:
        raise WidthError("width must be a positive integer")
    return min(value, maximum)


def create_app(cfg: AppConfig | None = None) -> Flask:
    cfg = cfg or load_config()
    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = cfg.server.max_upload_mb * 1024 * 1024
    app.config["ASCIIPNG"] = cfg
    logger = get_logger()

    @app.get("/health")
    def health():
        return jsonify({"status": "ok"})

    @app.post("/api/asciipng")
    def asciipng():
        upload = request.files.get("file")
        if upload is None or not upload.filename:
            return jsonify({"error": "No file uploaded!"}), 400

        try:
            width = parse_width(request.form.get("width"), cfg.render.default_width, cfg.render.max_width)
        except WidthError as exc:
            return jsonify({"error": str(exc)}), 400

        data = upload.read()
        try:
            result = render_png(
                data,
                width,
                ramp_name=cfg.render.ramp,
                verify_crc=cfg.decoder.strict_crc,
            )
        except PngDecodeError as exc:
            return jsonify(exc.to_payload()), 500
        except Exception as exc:
            logger.exception(f"render failed for {upload.filename}", extra={"event": "upload_failed"})
            return jsonify({"error": str(exc) or exc.__class__.__name__}), 500

        logger.info(
            f"served {upload.filename}",
            extra={"event": "upload_rendered", "target_width": result.art.width, "target_height": result.art.height},
        )
        return jsonify({"ascii": to_html(result.art), "width": result.art.width, "height": result.art.height})

    return app

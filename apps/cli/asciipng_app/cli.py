"""CLI entrypoints for rendering, inspecting, and serving PNG glyph art."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

from asciipng_core import load_config, render_png
from asciipng_core.config import config_path
from asciipng_core.logging_setup import configure_logging, install_crash_hooks
from asciipng_decoder import PngDecodeError, inspect_png
from asciipng_renderer import MarkupFormat, format_art, list_ramps


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _error_payload(exc: PngDecodeError, path: str) -> dict[str, object]:
    payload: dict[str, object] = {"success": False, "path": path}
    payload.update(exc.to_payload())
    return payload


def cmd_render(args: argparse.Namespace) -> int:
    cfg = load_config()
    width = args.width or cfg.render.default_width
    if width <= 0:
        _print_json({"success": False, "error": "width must be a positive integer"})
        return 2

    data = Path(args.path).read_bytes()
    try:
        result = render_png(
            data,
            width,
            ramp_name=args.ramp or cfg.render.ramp,
            verify_crc=args.strict_crc or cfg.decoder.strict_crc,
        )
    except PngDecodeError as exc:
        _print_json(_error_payload(exc, args.path))
        return 2

    output = format_art(result.art, args.format or cfg.render.markup)
    if args.out:
        Path(args.out).write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)
    return 0


def cmd_inspect(args: argparse.Namespace) -> int:
    data = Path(args.path).read_bytes()
    try:
        report = inspect_png(data, strict=not args.no_strict)
    except PngDecodeError as exc:
        _print_json(_error_payload(exc, args.path))
        return 2

    payload = asdict(report)
    payload["success"] = not report.errors and report.header_error is None
    _print_json(payload)
    return 0 if payload["success"] else 2


def cmd_serve(args: argparse.Namespace) -> int:
    from asciipng_web import create_app

    cfg = load_config()
    install_crash_hooks()
    app = create_app(cfg)
    app.run(host=args.host or cfg.server.host, port=args.port or cfg.server.port)
    return 0


def cmd_config_show(_args: argparse.Namespace) -> int:
    cfg = load_config()
    _print_json({"path": str(config_path()), "config": asdict(cfg)})
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="asciipng", description="PNG to colored glyph art")
    sub = parser.add_subparsers(dest="command", required=True)

    render_cmd = sub.add_parser("render", help="Render a PNG file as glyph art")
    render_cmd.add_argument("path", help="Path to a non-interlaced RGB or RGBA PNG")
    render_cmd.add_argument("--width", type=int, default=None, help="Output width in glyphs")
    render_cmd.add_argument("--format", default=None, choices=[m.value for m in MarkupFormat])
    render_cmd.add_argument("--ramp", default=None, choices=list_ramps())
    render_cmd.add_argument("--strict-crc", action="store_true", help="Reject chunks with bad CRC-32")
    render_cmd.add_argument("--out", default=None, help="Write markup to this file instead of stdout")
    render_cmd.set_defaults(func=cmd_render)

    inspect_cmd = sub.add_parser("inspect", help="Report the chunk layout of a PNG file")
    inspect_cmd.add_argument("path")
    inspect_cmd.add_argument("--no-strict", action="store_true", help="Skip mandatory IHDR/IDAT/IEND checks")
    inspect_cmd.set_defaults(func=cmd_inspect)

    serve_cmd = sub.add_parser("serve", help="Run the HTTP upload service")
    serve_cmd.add_argument("--host", default=None)
    serve_cmd.add_argument("--port", type=int, default=None)
    serve_cmd.set_defaults(func=cmd_serve)

    config_cmd = sub.add_parser("config", help="Settings")
    config_sub = config_cmd.add_subparsers(dest="config_cmd", required=True)
    show_cmd = config_sub.add_parser("show", help="Print effective settings")
    show_cmd.set_defaults(func=cmd_config_show)

    return parser


def main(argv: list[str] | None = None) -> int:
    cfg = load_config()
    parser = build_parser()
    args = parser.parse_args(argv)
    # Only the long-running server writes to the console; other commands print JSON or markup.
    configure_logging(keep_files=cfg.logging.keep_files, console=cfg.logging.console and args.command == "serve")
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())

"""Persistent settings schema and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from asciipng_renderer.markup import MarkupFormat
from asciipng_renderer.ramps import DEFAULT_RAMP_NAME, RAMPS


CONFIG_VERSION = 1
WIDTH_LIMIT = 2000


@dataclass
class RenderConfig:
    default_width: int = 150
    max_width: int = 500
    ramp: str = DEFAULT_RAMP_NAME
    markup: str = MarkupFormat.HTML.value


@dataclass
class DecoderConfig:
    strict_crc: bool = False


@dataclass
class ServerConfig:
    host: str = "127.0.0.1"
    port: int = 3000
    max_upload_mb: int = 20


@dataclass
class LoggingConfig:
    keep_files: int = 7
    console: bool = True


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    render: RenderConfig = field(default_factory=RenderConfig)
    decoder: DecoderConfig = field(default_factory=DecoderConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def config_path() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "AsciiPng" / "config.json"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "AsciiPng" / "config.json"
    return Path.home() / ".config" / "asciipng" / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_render(cfg: AppConfig) -> None:
    render = cfg.render
    render.default_width = max(1, min(WIDTH_LIMIT, int(render.default_width)))
    render.max_width = max(render.default_width, min(WIDTH_LIMIT, int(render.max_width)))
    if render.ramp not in RAMPS:
        render.ramp = DEFAULT_RAMP_NAME
    if render.markup not in {m.value for m in MarkupFormat}:
        render.markup = MarkupFormat.HTML.value


def _normalize_server(cfg: AppConfig) -> None:
    cfg.server.port = max(1, min(65535, int(cfg.server.port)))
    cfg.server.max_upload_mb = max(1, int(cfg.server.max_upload_mb))


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except Exception:
        return AppConfig()
    if not isinstance(data, dict):
        return AppConfig()

    cfg = AppConfig(
        config_version=int(data.get("config_version", CONFIG_VERSION)),
        render=_merge(RenderConfig, data.get("render", {})),
        decoder=_merge(DecoderConfig, data.get("decoder", {})),
        server=_merge(ServerConfig, data.get("server", {})),
        logging=_merge(LoggingConfig, data.get("logging", {})),
    )

    _normalize_render(cfg)
    _normalize_server(cfg)
    cfg.decoder.strict_crc = bool(cfg.decoder.strict_crc)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path

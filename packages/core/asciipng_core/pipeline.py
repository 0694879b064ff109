"""Decode -> resample -> render pipeline entry points."""

from __future__ import annotations

import time
from dataclasses import dataclass

from asciipng_decoder import (
    ImageHeader,
    InvalidGeometryError,
    PngDecodeError,
    RasterImage,
    collect_idat,
    interpret_header,
    parse_chunks,
    reconstruct,
)
from asciipng_renderer import RenderedArt, get_ramp, render, resample

from .logging_setup import get_logger


@dataclass(frozen=True)
class RenderResult:
    header: ImageHeader
    art: RenderedArt
    decode_s: float
    resample_s: float
    render_s: float

    @property
    def duration_s(self) -> float:
        return self.decode_s + self.resample_s + self.render_s


def target_height_for(width: int, height: int, target_width: int) -> int:
    """Height that keeps the aspect ratio at ``target_width``, never below one row."""
    if width <= 0 or height <= 0:
        raise InvalidGeometryError(f"Source geometry {width}x{height} has a zero dimension")
    if target_width <= 0:
        raise InvalidGeometryError(f"Target width {target_width} must be positive")
    return max(1, int(height / width * target_width))


def decode_png(data: bytes, verify_crc: bool = False) -> tuple[ImageHeader, RasterImage]:
    chunks = parse_chunks(data, verify_crc=verify_crc)
    header = interpret_header(chunks)
    image = reconstruct(collect_idat(chunks), header)
    return header, image


def render_png(
    data: bytes,
    target_width: int,
    *,
    ramp_name: str | None = None,
    verify_crc: bool = False,
) -> RenderResult:
    logger = get_logger()
    try:
        start = time.perf_counter()
        header, image = decode_png(data, verify_crc=verify_crc)
        decoded = time.perf_counter()

        target_height = target_height_for(header.width, header.height, target_width)
        resized = resample(image, target_width, target_height)
        resampled = time.perf_counter()

        art = render(resized, get_ramp(ramp_name))
        rendered = time.perf_counter()
    except PngDecodeError as exc:
        logger.warning(
            f"render failed: {exc}",
            extra={"event": "render_failed", "kind": exc.kind.value, "target_width": target_width},
        )
        raise

    result = RenderResult(
        header=header,
        art=art,
        decode_s=decoded - start,
        resample_s=resampled - decoded,
        render_s=rendered - resampled,
    )
    logger.info(
        "render complete",
        extra={
            "event": "render_complete",
            "width": header.width,
            "height": header.height,
            "target_width": art.width,
            "target_height": art.height,
            "duration_s": result.duration_s,
        },
    )
    return result


def decode_and_render(
    data: bytes,
    target_width: int,
    *,
    ramp_name: str | None = None,
    verify_crc: bool = False,
) -> RenderedArt:
    return render_png(data, target_width, ramp_name=ramp_name, verify_crc=verify_crc).art

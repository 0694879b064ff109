"""IHDR interpretation."""

from __future__ import annotations

from typing import Iterable

from .errors import (
    InterlacedUnsupportedError,
    InvalidGeometryError,
    MissingIHDRError,
    TruncatedChunkError,
    UnsupportedBitDepthError,
    UnsupportedColorTypeError,
)
from .models import Chunk, ColorType, ImageHeader

IHDR_LENGTH = 13
SUPPORTED_BIT_DEPTHS = (8, 16)


def find_chunk(chunks: Iterable[Chunk], kind: str) -> Chunk | None:
    for chunk in chunks:
        if chunk.kind == kind:
            return chunk
    return None


def interpret_header(chunks: Iterable[Chunk]) -> ImageHeader:
    ihdr = find_chunk(chunks, "IHDR")
    if ihdr is None:
        raise MissingIHDRError("IHDR chunk not found")

    data = ihdr.payload
    if len(data) < IHDR_LENGTH:
        raise TruncatedChunkError(f"IHDR payload is {len(data)} bytes, expected {IHDR_LENGTH}")

    width = int.from_bytes(data[0:4], "big")
    height = int.from_bytes(data[4:8], "big")
    bit_depth = data[8]
    color_type = data[9]
    interlace = data[12]

    if interlace != 0:
        raise InterlacedUnsupportedError("Interlaced images not supported")
    if color_type not in (ColorType.TRUECOLOR, ColorType.TRUECOLOR_ALPHA):
        raise UnsupportedColorTypeError(f"Color type {color_type} not supported, expected 2 or 6")
    if width == 0 or height == 0:
        raise InvalidGeometryError(f"Image geometry {width}x{height} has a zero dimension")
    if bit_depth not in SUPPORTED_BIT_DEPTHS:
        raise UnsupportedBitDepthError(f"Bit depth {bit_depth} not supported for color type {color_type}")

    return ImageHeader(
        width=width,
        height=height,
        bit_depth=bit_depth,
        color_type=ColorType(color_type),
        interlaced=False,
    )

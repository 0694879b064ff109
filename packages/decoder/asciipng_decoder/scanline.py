"""IDAT inflate and per-scanline filter reconstruction."""

from __future__ import annotations

import zlib
from typing import Iterable

import numpy as np

from .errors import DecompressionError, UnknownFilterTypeError
from .models import Chunk, FilterType, ImageHeader, RasterImage


def collect_idat(chunks: Iterable[Chunk]) -> bytes:
    return b"".join(chunk.payload for chunk in chunks if chunk.kind == "IDAT")


def inflate(payload: bytes) -> bytes:
    try:
        return zlib.decompress(payload)
    except zlib.error as exc:
        raise DecompressionError("Image data could not be decompressed") from exc


def paeth_predictor(a: int, b: int, c: int) -> int:
    """Pick whichever of left (a), above (b), upper-left (c) is closest to a + b - c."""
    p = a + b - c
    pa = abs(p - a)
    pb = abs(p - b)
    pc = abs(p - c)
    if pa <= pb and pa <= pc:
        return a
    if pb <= pc:
        return b
    return c


def _unfilter_row(filter_type: FilterType, line: bytearray, prev: bytes, bpp: int) -> None:
    n = len(line)
    if filter_type == FilterType.SUB:
        for i in range(bpp, n):
            line[i] = (line[i] + line[i - bpp]) & 0xFF
    elif filter_type == FilterType.UP:
        for i in range(n):
            line[i] = (line[i] + prev[i]) & 0xFF
    elif filter_type == FilterType.AVERAGE:
        for i in range(n):
            left = line[i - bpp] if i >= bpp else 0
            line[i] = (line[i] + ((left + prev[i]) >> 1)) & 0xFF
    elif filter_type == FilterType.PAETH:
        for i in range(n):
            if i >= bpp:
                left = line[i - bpp]
                upper_left = prev[i - bpp]
            else:
                left = 0
                upper_left = 0
            line[i] = (line[i] + paeth_predictor(left, prev[i], upper_left)) & 0xFF


def unfilter_scanlines(raw: bytes, header: ImageHeader) -> bytes:
    """Reverse the per-row filters of a decompressed stream, top row first."""
    stride = header.stride
    bpp = header.bytes_per_pixel
    expected = header.height * (stride + 1)
    if len(raw) < expected:
        raise DecompressionError(f"Decompressed image data is {len(raw)} bytes, expected {expected}")

    out = bytearray(header.height * stride)
    prev = bytes(stride)
    offset = 0
    for y in range(header.height):
        filter_byte = raw[offset]
        if filter_byte > FilterType.PAETH:
            raise UnknownFilterTypeError(f"Unknown scanline filter type {filter_byte} on row {y}")
        line = bytearray(raw[offset + 1 : offset + 1 + stride])
        _unfilter_row(FilterType(filter_byte), line, prev, bpp)
        out[y * stride : (y + 1) * stride] = line
        prev = bytes(line)
        offset += stride + 1
    return bytes(out)


def reconstruct(idat_payload: bytes, header: ImageHeader) -> RasterImage:
    raw = inflate(idat_payload)
    samples = np.frombuffer(unfilter_scanlines(raw, header), dtype=np.uint8)
    samples = samples.reshape((header.height, header.width, header.bytes_per_pixel))
    if header.bit_depth == 16:
        # Big-endian samples: keep the most significant byte.
        samples = samples[:, :, ::2]

    if header.channels == 3:
        alpha = np.full((header.height, header.width, 1), 255, dtype=np.uint8)
        samples = np.concatenate([samples, alpha], axis=2)

    return RasterImage(width=header.width, height=header.height, data=np.ascontiguousarray(samples))

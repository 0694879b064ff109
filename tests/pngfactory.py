"""Minimal PNG encoder for fixtures with explicit per-row filters."""

from __future__ import annotations

import zlib

SIGNATURE = bytes([0x89, 0x50, 0x4E, 0x47, 0x0D, 0x0A, 0x1A, 0x0A])


def chunk(kind: str, payload: bytes, crc: int | None = None) -> bytes:
    tag = kind.encode("ascii")
    if crc is None:
        crc = zlib.crc32(tag + payload) & 0xFFFFFFFF
    return len(payload).to_bytes(4, "big") + tag + payload + crc.to_bytes(4, "big")


def ihdr(width: int, height: int, bit_depth: int = 8, color_type: int = 2, interlace: int = 0) -> bytes:
    payload = (
        width.to_bytes(4, "big")
        + height.to_bytes(4, "big")
        + bytes([bit_depth, color_type, 0, 0, interlace])
    )
    return chunk("IHDR", payload)


def _paeth(a: int, b: int, c: int) -> int:
    p = a + b - c
    pa, pb, pc = abs(p - a), abs(p - b), abs(p - c)
    if pa <= pb and pa <= pc:
        return a
    if pb <= pc:
        return b
    return c


def filter_row(filter_type: int, row: bytes, prev: bytes, bpp: int) -> bytes:
    out = bytearray(len(row))
    for i, value in enumerate(row):
        left = row[i - bpp] if i >= bpp else 0
        up = prev[i]
        upper_left = prev[i - bpp] if i >= bpp else 0
        if filter_type == 0:
            pred = 0
        elif filter_type == 1:
            pred = left
        elif filter_type == 2:
            pred = up
        elif filter_type == 3:
            pred = (left + up) // 2
        elif filter_type == 4:
            pred = _paeth(left, up, upper_left)
        else:
            raise ValueError(f"Unknown filter {filter_type}")
        out[i] = (value - pred) & 0xFF
    return bytes(out)


def scanlines(rows: list[bytes], filters: list[int], bpp: int) -> bytes:
    stream = bytearray()
    prev = bytes(len(rows[0]))
    for row, filter_type in zip(rows, filters):
        stream.append(filter_type)
        stream += filter_row(filter_type, row, prev, bpp)
        prev = row
    return bytes(stream)


def encode_png(
    width: int,
    height: int,
    rows: list[bytes],
    color_type: int = 2,
    bit_depth: int = 8,
    filters: list[int] | int = 0,
    idat_parts: int = 1,
) -> bytes:
    """Build a PNG from raw (unfiltered) sample rows."""
    channels = 4 if color_type == 6 else 3
    bpp = channels * (bit_depth // 8)
    if isinstance(filters, int):
        filters = [filters] * height
    compressed = zlib.compress(scanlines(rows, filters, bpp))

    size = max(1, -(-len(compressed) // idat_parts))
    idat = b"".join(chunk("IDAT", compressed[i : i + size]) for i in range(0, len(compressed), size))
    return SIGNATURE + ihdr(width, height, bit_depth, color_type) + idat + chunk("IEND", b"")


def rgb_rows(pixels: list[list[tuple[int, ...]]]) -> list[bytes]:
    return [bytes(v for px in row for v in px) for row in pixels]


def build_test_pattern(name: str, width: int, height: int, alpha: bool = False) -> list[list[tuple[int, ...]]]:
    rows = []
    for y in range(height):
        row = []
        for x in range(width):
            if name == "gradient":
                c = ((x * 37) % 256, (y * 53) % 256, ((x + y) * 19) % 256)
            elif name == "quadrants":
                if x < width // 2 and y < height // 2:
                    c = (255, 0, 0)
                elif x >= width // 2 and y < height // 2:
                    c = (0, 255, 0)
                elif x < width // 2 and y >= height // 2:
                    c = (0, 0, 255)
                else:
                    c = (255, 255, 255)
            elif name == "checkerboard":
                c = (255, 255, 255) if ((x // 2 + y // 2) % 2 == 0) else (0, 0, 0)
            else:
                raise ValueError(f"Unknown pattern: {name}")
            if alpha:
                c = c + ((x * 29 + y * 7) % 256,)
            row.append(c)
        rows.append(row)
    return rows

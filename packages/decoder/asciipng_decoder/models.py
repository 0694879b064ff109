"""Typed models for PNG chunks, headers, and decoded rasters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator

import numpy as np


class ColorType(IntEnum):
    TRUECOLOR = 2
    TRUECOLOR_ALPHA = 6


class FilterType(IntEnum):
    NONE = 0
    SUB = 1
    UP = 2
    AVERAGE = 3
    PAETH = 4


@dataclass(frozen=True)
class Chunk:
    kind: str
    length: int
    payload: bytes
    checksum: int


@dataclass(frozen=True)
class ImageHeader:
    width: int
    height: int
    bit_depth: int
    color_type: ColorType
    interlaced: bool = False

    @property
    def channels(self) -> int:
        return 4 if self.color_type == ColorType.TRUECOLOR_ALPHA else 3

    @property
    def bytes_per_pixel(self) -> int:
        return self.channels * (self.bit_depth // 8)

    @property
    def stride(self) -> int:
        return self.width * self.bytes_per_pixel


@dataclass(frozen=True)
class Pixel:
    r: int
    g: int
    b: int
    a: int = 255


@dataclass(frozen=True, eq=False)
class RasterImage:
    """Row-major RGBA grid backed by a read-only ``(height, width, 4)`` uint8 array."""

    width: int
    height: int
    data: np.ndarray

    def __post_init__(self) -> None:
        if self.data.shape != (self.height, self.width, 4):
            raise ValueError(f"Raster data must have shape {(self.height, self.width, 4)}, got {self.data.shape}")
        if self.data.dtype != np.uint8:
            raise ValueError("Raster data must be uint8")
        self.data.setflags(write=False)

    @classmethod
    def from_pixels(cls, width: int, height: int, pixels: list[Pixel]) -> RasterImage:
        if len(pixels) != width * height:
            raise ValueError(f"Expected {width * height} pixels, got {len(pixels)}")
        flat = np.array([(p.r, p.g, p.b, p.a) for p in pixels], dtype=np.uint8)
        return cls(width=width, height=height, data=flat.reshape((height, width, 4)))

    def __len__(self) -> int:
        return self.width * self.height

    def pixel_at(self, x: int, y: int) -> Pixel:
        r, g, b, a = (int(v) for v in self.data[y, x])
        return Pixel(r, g, b, a)

    def pixels(self) -> Iterator[Pixel]:
        for r, g, b, a in self.data.reshape((-1, 4)).tolist():
            yield Pixel(r, g, b, a)

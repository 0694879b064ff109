"""Bilinear resampling of decoded rasters."""

from __future__ import annotations

import numpy as np

from asciipng_decoder.errors import InvalidGeometryError
from asciipng_decoder.models import RasterImage


def resample(image: RasterImage, target_width: int, target_height: int) -> RasterImage:
    """Bilinear resize to ``target_width`` x ``target_height``.

    Neighbours past the right or bottom edge count as the zero pixel. Channels
    are rounded half up and wrapped into a byte.
    """
    if target_width <= 0 or target_height <= 0:
        raise InvalidGeometryError(f"Target size {target_width}x{target_height} must be positive")

    width, height = image.width, image.height
    x_ratio = width / target_width
    y_ratio = height / target_height

    xs = np.arange(target_width, dtype=np.float64) * x_ratio
    ys = np.arange(target_height, dtype=np.float64) * y_ratio
    src_x = np.floor(xs).astype(np.intp)
    src_y = np.floor(ys).astype(np.intp)
    x_weight = (xs - src_x)[np.newaxis, :, np.newaxis]
    y_weight = (ys - src_y)[:, np.newaxis, np.newaxis]

    # One zero row and column so the +1 neighbours never index out of range.
    padded = np.zeros((height + 1, width + 1, 4), dtype=np.float64)
    padded[:height, :width] = image.data

    rows = src_y[:, np.newaxis]
    cols = src_x[np.newaxis, :]
    top_left = padded[rows, cols]
    top_right = padded[rows, cols + 1]
    bottom_left = padded[rows + 1, cols]
    bottom_right = padded[rows + 1, cols + 1]

    x_inverse = 1 - x_weight
    y_inverse = 1 - y_weight
    blended = (
        top_left * (x_inverse * y_inverse)
        + top_right * (x_weight * y_inverse)
        + bottom_left * (x_inverse * y_weight)
        + bottom_right * (x_weight * y_weight)
    )

    rounded = np.floor(blended + 0.5).astype(np.int64) % 256
    return RasterImage(width=target_width, height=target_height, data=rounded.astype(np.uint8))

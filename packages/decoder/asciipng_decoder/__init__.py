"""PNG decoding package: chunk framing, IHDR, and scanline reconstruction."""

from .chunks import PNG_SIGNATURE, check_signature, parse_chunks
from .errors import (
    ChecksumMismatchError,
    DecompressionError,
    ErrorKind,
    InterlacedUnsupportedError,
    InvalidGeometryError,
    InvalidSignatureError,
    MissingIHDRError,
    PngDecodeError,
    TruncatedChunkError,
    UnknownFilterTypeError,
    UnsupportedBitDepthError,
    UnsupportedColorTypeError,
)
from .header import interpret_header
from .report import ChunkEntry, ChunkReport, inspect_png
from .models import Chunk, ColorType, FilterType, ImageHeader, Pixel, RasterImage
from .scanline import collect_idat, inflate, paeth_predictor, reconstruct, unfilter_scanlines

__all__ = [
    "PNG_SIGNATURE",
    "ChecksumMismatchError",
    "Chunk",
    "ChunkEntry",
    "ChunkReport",
    "ColorType",
    "DecompressionError",
    "ErrorKind",
    "FilterType",
    "ImageHeader",
    "InterlacedUnsupportedError",
    "InvalidGeometryError",
    "InvalidSignatureError",
    "MissingIHDRError",
    "Pixel",
    "PngDecodeError",
    "RasterImage",
    "TruncatedChunkError",
    "UnknownFilterTypeError",
    "UnsupportedBitDepthError",
    "UnsupportedColorTypeError",
    "check_signature",
    "collect_idat",
    "inflate",
    "inspect_png",
    "interpret_header",
    "paeth_predictor",
    "parse_chunks",
    "reconstruct",
    "unfilter_scanlines",
]

"""Typed decode failures. Every error aborts the whole request."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_SIGNATURE = "InvalidSignature"
    TRUNCATED_CHUNK = "TruncatedChunk"
    CHECKSUM_MISMATCH = "ChecksumMismatch"
    MISSING_IHDR = "MissingIHDR"
    INTERLACED_UNSUPPORTED = "InterlacedUnsupported"
    UNSUPPORTED_COLOR_TYPE = "UnsupportedColorType"
    UNSUPPORTED_BIT_DEPTH = "UnsupportedBitDepth"
    INVALID_GEOMETRY = "InvalidGeometry"
    UNKNOWN_FILTER_TYPE = "UnknownFilterType"
    DECOMPRESSION_ERROR = "DecompressionError"


class PngDecodeError(ValueError):
    kind: ErrorKind

    def to_payload(self) -> dict[str, str]:
        return {"error": str(self), "kind": self.kind.value}


class InvalidSignatureError(PngDecodeError):
    kind = ErrorKind.INVALID_SIGNATURE


class TruncatedChunkError(PngDecodeError):
    kind = ErrorKind.TRUNCATED_CHUNK


class ChecksumMismatchError(PngDecodeError):
    kind = ErrorKind.CHECKSUM_MISMATCH


class MissingIHDRError(PngDecodeError):
    kind = ErrorKind.MISSING_IHDR


class InterlacedUnsupportedError(PngDecodeError):
    kind = ErrorKind.INTERLACED_UNSUPPORTED


class UnsupportedColorTypeError(PngDecodeError):
    kind = ErrorKind.UNSUPPORTED_COLOR_TYPE


class UnsupportedBitDepthError(PngDecodeError):
    kind = ErrorKind.UNSUPPORTED_BIT_DEPTH


class InvalidGeometryError(PngDecodeError):
    kind = ErrorKind.INVALID_GEOMETRY


class UnknownFilterTypeError(PngDecodeError):
    kind = ErrorKind.UNKNOWN_FILTER_TYPE


class DecompressionError(PngDecodeError):
    kind = ErrorKind.DECOMPRESSION_ERROR

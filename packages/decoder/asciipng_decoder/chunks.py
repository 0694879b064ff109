"""PNG signature check and chunk framing."""

from __future__ import annotations

import zlib

from .errors import ChecksumMismatchError, InvalidSignatureError, TruncatedChunkError
from .models import Chunk

PNG_SIGNATURE = bytes([0x89, 0x50, 0x4E, 0x47, 0x0D, 0x0A, 0x1A, 0x0A])

# length (4) + tag (4) + crc (4)
CHUNK_OVERHEAD = 12


def check_signature(buffer: bytes) -> None:
    if bytes(buffer[:8]) != PNG_SIGNATURE:
        raise InvalidSignatureError("Invalid PNG signature")


def chunk_crc(kind: str, payload: bytes) -> int:
    return zlib.crc32(payload, zlib.crc32(kind.encode("latin-1"))) & 0xFFFFFFFF


def parse_chunks(buffer: bytes, verify_crc: bool = False) -> list[Chunk]:
    """Split ``buffer`` into chunks after validating the PNG signature.

    CRC values are read but only compared when ``verify_crc`` is set.
    """
    check_signature(buffer)

    chunks: list[Chunk] = []
    offset = len(PNG_SIGNATURE)
    end = len(buffer)
    while offset < end:
        if offset + CHUNK_OVERHEAD > end:
            raise TruncatedChunkError(f"Chunk framing at offset {offset} runs past end of buffer")

        length = int.from_bytes(buffer[offset : offset + 4], "big")
        kind = bytes(buffer[offset + 4 : offset + 8]).decode("latin-1")
        data_start = offset + 8
        data_end = data_start + length
        if data_end + 4 > end:
            raise TruncatedChunkError(
                f"Chunk {kind!r} at offset {offset} declares {length} bytes, only {max(end - data_start - 4, 0)} remain"
            )

        payload = bytes(buffer[data_start:data_end])
        checksum = int.from_bytes(buffer[data_end : data_end + 4], "big")
        if verify_crc and chunk_crc(kind, payload) != checksum:
            raise ChecksumMismatchError(f"CRC mismatch in chunk {kind!r} at offset {offset}")

        chunks.append(Chunk(kind=kind, length=length, payload=payload, checksum=checksum))
        offset += CHUNK_OVERHEAD + length

    return chunks

"""Chunk layout inspection for diagnosing PNG files."""

from __future__ import annotations

from dataclasses import dataclass, field

from .chunks import chunk_crc, parse_chunks
from .errors import PngDecodeError
from .header import interpret_header
from .models import ImageHeader


@dataclass(frozen=True)
class ChunkEntry:
    index: int
    kind: str
    length: int
    crc_ok: bool


@dataclass
class ChunkReport:
    total_chunks: int = 0
    idat_bytes: int = 0
    chunk_counts: dict[str, int] = field(default_factory=dict)
    entries: list[ChunkEntry] = field(default_factory=list)
    crc_mismatches: list[str] = field(default_factory=list)
    header: ImageHeader | None = None
    header_error: str | None = None
    errors: list[str] = field(default_factory=list)


def inspect_png(data: bytes, strict: bool = True) -> ChunkReport:
    chunks = parse_chunks(data)
    report = ChunkReport(total_chunks=len(chunks))

    for idx, chunk in enumerate(chunks):
        crc_ok = chunk_crc(chunk.kind, chunk.payload) == chunk.checksum
        report.entries.append(ChunkEntry(index=idx, kind=chunk.kind, length=chunk.length, crc_ok=crc_ok))
        report.chunk_counts[chunk.kind] = report.chunk_counts.get(chunk.kind, 0) + 1
        if not crc_ok:
            report.crc_mismatches.append(chunk.kind)
        if chunk.kind == "IDAT":
            report.idat_bytes += chunk.length

    try:
        report.header = interpret_header(chunks)
    except PngDecodeError as exc:
        report.header_error = f"{exc.kind.value}: {exc}"

    if strict:
        if "IHDR" not in report.chunk_counts:
            report.errors.append("missing_ihdr")
        elif chunks[0].kind != "IHDR":
            report.errors.append("ihdr_not_first")
        if "IDAT" not in report.chunk_counts:
            report.errors.append("missing_idat")
        if not chunks or chunks[-1].kind != "IEND":
            report.errors.append("missing_iend")

    return report

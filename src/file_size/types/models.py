"""Data models for file-size results.

This module defines immutable dataclasses returned by every size
computation. Results are created fresh per call and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True, frozen=True)
class FileSizeResult:
    """Raw and gzip size of a single buffer or file.

    ``file`` is the canonical (symlink-resolved) path when the content was
    read from disk, and ``None`` for an in-memory buffer.
    """

    raw_size: int
    compressed_size: int
    original_buffer: bytes
    compressed_buffer: bytes
    file: Path | None = None


@dataclass(slots=True, frozen=True)
class SizeResult:
    """Aggregate size of one or more files.

    The compressed size of an aggregate is the gzip size of every file's
    content concatenated in input order, not the sum of per-file gzip sizes.
    """

    raw_size: int
    compressed_size: int
    files: tuple[FileSizeResult, ...] = ()
    original_buffer: bytes = b""
    compressed_buffer: bytes = b""

    @classmethod
    def empty(cls) -> SizeResult:
        """Zero result used when no file participates in the computation."""
        return cls(raw_size=0, compressed_size=0)

    @classmethod
    def from_file_result(
        cls,
        result: FileSizeResult,
        files: tuple[FileSizeResult, ...] = (),
    ) -> SizeResult:
        """Lift a single buffer/file result into an aggregate."""
        return cls(
            raw_size=result.raw_size,
            compressed_size=result.compressed_size,
            files=files,
            original_buffer=result.original_buffer,
            compressed_buffer=result.compressed_buffer,
        )

"""Raw and gzip size aggregation over buffers, files and file sets.

Multiple files are aggregated by concatenating their contents in input
order and compressing the concatenation once. Compressing files together
usually yields less than the sum of independent compressions, and that
combined figure is what gets reported.
"""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from file_size.config import GzipOptions
from file_size.core.compression import gzip_compress, gzip_compress_async
from file_size.core.filesystem.walker import canonicalize, walk_directory, walk_directory_async
from file_size.exceptions import InvalidArgumentError, translate_os_errors
from file_size.types.models import FileSizeResult, SizeResult

logger = logging.getLogger(__name__)

Buffer = bytes | bytearray | memoryview
StrPath = str | os.PathLike[str]


def _require_content(buffer: object) -> None:
    # Empty files are measured through _measure directly and never hit this check
    if buffer is None:
        raise InvalidArgumentError("Argument 1 must be a bytes-like object, got None")
    if isinstance(buffer, (bytes, bytearray, memoryview)) and len(buffer) == 0:
        raise InvalidArgumentError("Argument 1 must be a non-empty bytes-like object")


def _build_result(buffer: Buffer, compressed: bytes, file: Path | None) -> FileSizeResult:
    original = bytes(buffer)
    return FileSizeResult(
        raw_size=len(original),
        compressed_size=len(compressed),
        original_buffer=original,
        compressed_buffer=compressed,
        file=file,
    )


def _measure(buffer: Buffer, options: GzipOptions | None, file: Path | None = None) -> FileSizeResult:
    return _build_result(buffer, gzip_compress(buffer, options), file)


async def _measure_async(
    buffer: Buffer,
    options: GzipOptions | None,
    file: Path | None = None,
) -> FileSizeResult:
    return _build_result(buffer, await gzip_compress_async(buffer, options), file)


def _read_file(path: StrPath) -> tuple[Path, bytes]:
    canonical = canonicalize(path)
    with translate_os_errors(canonical):
        return canonical, canonical.read_bytes()


def _aggregate(files: tuple[FileSizeResult, ...], combined: FileSizeResult | None) -> SizeResult:
    if not files:
        return SizeResult.empty()
    if combined is None:
        combined = files[0]
    logger.debug(
        "Aggregated file sizes",
        extra={
            "file_count": len(files),
            "raw_size": combined.raw_size,
            "compressed_size": combined.compressed_size,
        },
    )
    return SizeResult.from_file_result(combined, files)


def _concatenate(files: tuple[FileSizeResult, ...]) -> bytes | None:
    # A single file is its own aggregate; nothing to re-compress
    if len(files) < 2:
        return None
    return b"".join(file.original_buffer for file in files)


def size_from_buffer(buffer: Buffer, options: GzipOptions | None = None) -> FileSizeResult:
    """Compute the raw and gzip size of an in-memory buffer.

    Args:
        buffer: Non-empty bytes-like object
        options: Compressor options, zlib defaults when omitted

    Returns:
        Sizes plus original and compressed bytes; ``file`` is None

    Raises:
        InvalidArgumentError: If the buffer is None or empty
        CompressionError: If the buffer is not bytes-like or zlib rejects the options
    """
    _require_content(buffer)
    return _measure(buffer, options)


async def size_from_buffer_async(buffer: Buffer, options: GzipOptions | None = None) -> FileSizeResult:
    """Non-blocking variant of :func:`size_from_buffer`."""
    _require_content(buffer)
    return await _measure_async(buffer, options)


def size_from_file(path: StrPath, options: GzipOptions | None = None) -> FileSizeResult:
    """Compute the raw and gzip size of one file.

    The file is read in full from its canonical path. An empty file is
    measured like any other: raw size 0 and the gzip size of empty input.

    Raises:
        NotFoundError: If the path does not exist
        PermissionDeniedError: If the file cannot be read
        CompressionError: If zlib rejects the options
    """
    canonical, content = _read_file(path)
    return _measure(content, options, canonical)


async def size_from_file_async(path: StrPath, options: GzipOptions | None = None) -> FileSizeResult:
    """Non-blocking variant of :func:`size_from_file`."""
    canonical, content = await asyncio.to_thread(_read_file, path)
    return await _measure_async(content, options, canonical)


def size_from_files(paths: Iterable[StrPath], options: GzipOptions | None = None) -> SizeResult:
    """Compute per-file sizes and their aggregate.

    Args:
        paths: Files to measure; order determines concatenation order
        options: Compressor options, zlib defaults when omitted

    Returns:
        Aggregate result with one ``FileSizeResult`` per path, in input order
    """
    files = tuple(size_from_file(path, options) for path in paths)
    buffer = _concatenate(files)
    combined = _measure(buffer, options) if buffer is not None else None
    return _aggregate(files, combined)


async def size_from_files_async(paths: Iterable[StrPath], options: GzipOptions | None = None) -> SizeResult:
    """Non-blocking variant of :func:`size_from_files`.

    Files are read and compressed concurrently; results and the
    concatenation keep the input order.
    """
    files = tuple(await asyncio.gather(*(size_from_file_async(path, options) for path in paths)))
    buffer = _concatenate(files)
    combined = await _measure_async(buffer, options) if buffer is not None else None
    return _aggregate(files, combined)


def size_from_directory(directory: StrPath, options: GzipOptions | None = None) -> SizeResult:
    """Compute the aggregate size of every file below ``directory``, unfiltered."""
    return size_from_files(walk_directory(directory, absolute=True), options)


async def size_from_directory_async(directory: StrPath, options: GzipOptions | None = None) -> SizeResult:
    """Non-blocking variant of :func:`size_from_directory`."""
    files = await walk_directory_async(directory, absolute=True)
    return await size_from_files_async(files, options)

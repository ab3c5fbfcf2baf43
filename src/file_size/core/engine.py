"""Size computation entry point that dispatches on the kind of path."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from file_size.config import FileSizeOptions, GzipOptions, PatternSet
from file_size.core.aggregator import StrPath, size_from_files, size_from_files_async
from file_size.core.filesystem.filters import filter_files, should_include_file
from file_size.core.filesystem.walker import EntryKind, classify, walk_directory, walk_directory_async
from file_size.types.models import SizeResult

logger = logging.getLogger(__name__)


def _filters(options: GzipOptions | None) -> tuple[PatternSet | None, PatternSet | None]:
    if isinstance(options, FileSizeOptions):
        return options.include, options.exclude
    return None, None


def _skip_special(canonical: Path) -> SizeResult:
    logger.debug("Skipping special file", extra={"path": str(canonical)})
    return SizeResult.empty()


def size_of(path: StrPath, options: GzipOptions | None = None) -> SizeResult:
    """Compute the raw and gzip size of a file or a directory tree.

    Directories are walked and every file is tested against the include
    and exclude patterns of ``options`` by its canonical absolute path. A
    single file that does not pass the filter yields the zero result,
    as does a socket, FIFO or device, which is never opened.

    Args:
        path: File or directory to measure
        options: Compression and filter options

    Returns:
        Aggregate size result

    Raises:
        NotFoundError: If the path does not exist
        PermissionDeniedError: If an entry cannot be read or listed
        CompressionError: If zlib rejects the options
    """
    canonical, kind = classify(Path(path))
    include, exclude = _filters(options)

    if kind is EntryKind.OTHER:
        return _skip_special(canonical)

    if kind is EntryKind.DIRECTORY:
        files = filter_files(walk_directory(canonical, absolute=True), include, exclude)
        logger.debug("Measuring directory", extra={"path": str(canonical), "file_count": len(files)})
        return size_from_files(files, options)

    if should_include_file(canonical, include, exclude):
        return size_from_files([canonical], options)

    logger.debug("File filtered out", extra={"path": str(canonical)})
    return SizeResult.empty()


async def size_of_async(path: StrPath, options: GzipOptions | None = None) -> SizeResult:
    """Non-blocking variant of :func:`size_of` with identical results."""
    canonical, kind = await asyncio.to_thread(classify, Path(path))
    include, exclude = _filters(options)

    if kind is EntryKind.OTHER:
        return _skip_special(canonical)

    if kind is EntryKind.DIRECTORY:
        files = filter_files(await walk_directory_async(canonical, absolute=True), include, exclude)
        logger.debug("Measuring directory", extra={"path": str(canonical), "file_count": len(files)})
        return await size_from_files_async(files, options)

    if should_include_file(canonical, include, exclude):
        return await size_from_files_async([canonical], options)

    logger.debug("File filtered out", extra={"path": str(canonical)})
    return SizeResult.empty()

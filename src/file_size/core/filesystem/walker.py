"""Recursive directory walker that follows symlinks by canonical path."""

from __future__ import annotations

import asyncio
import logging
import os
import stat
from enum import Enum
from pathlib import Path

from file_size.exceptions import translate_os_errors

logger = logging.getLogger(__name__)


class EntryKind(str, Enum):
    """Classification of a directory entry after symlink resolution."""

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"  # sockets, FIFOs, devices


def canonicalize(path: str | os.PathLike[str]) -> Path:
    """Resolve every symlink in ``path`` and return the absolute real path.

    Raises:
        NotFoundError: If the path (or a symlink target) does not exist
        PermissionDeniedError: If a path component cannot be accessed
    """
    with translate_os_errors(path):
        return Path(os.path.realpath(path, strict=True))


def classify(entry: Path) -> tuple[Path, EntryKind]:
    """Canonicalize a directory entry and report what it points to."""
    canonical = canonicalize(entry)
    with translate_os_errors(canonical):
        mode = os.stat(canonical).st_mode
    if stat.S_ISDIR(mode):
        return canonical, EntryKind.DIRECTORY
    if stat.S_ISREG(mode):
        return canonical, EntryKind.FILE
    return canonical, EntryKind.OTHER


def list_directory(directory: Path) -> list[str]:
    """List entry names of a directory in sorted order."""
    with translate_os_errors(directory):
        return sorted(os.listdir(directory))


def _is_cycle(canonical: Path, ancestors: frozenset[Path]) -> bool:
    if canonical in ancestors:
        logger.warning("Skipping symlink cycle at %s", canonical)
        return True
    return False


def _relativize(files: list[Path], root: Path, absolute: bool) -> list[Path]:
    if absolute:
        return files
    return [Path(os.path.relpath(file, root)) for file in files]


def _walk_sync(directory: Path, ancestors: frozenset[Path], files: list[Path]) -> None:
    for name in list_directory(directory):
        canonical, kind = classify(directory / name)
        if kind is EntryKind.DIRECTORY:
            if not _is_cycle(canonical, ancestors):
                _walk_sync(canonical, ancestors | {canonical}, files)
        elif kind is EntryKind.FILE:
            files.append(canonical)
        else:
            logger.debug("Skipping special file", extra={"path": str(canonical)})


def walk_directory(root: str | os.PathLike[str], absolute: bool = False) -> list[Path]:
    """Enumerate every regular file below ``root``.

    The root and each entry are resolved to their canonical path; symlinked
    directories are descended into unless they lead back to a directory on
    the current recursion chain. No filtering happens here.

    Args:
        root: Directory to walk
        absolute: Emit canonical absolute paths instead of paths relative
            to the canonical root

    Returns:
        File paths in depth-first, name-sorted order

    Raises:
        NotFoundError: If the root or a symlink target does not exist
        PermissionDeniedError: If a directory cannot be listed
    """
    real_root = canonicalize(root)
    logger.debug("Walking directory", extra={"root": str(real_root)})

    files: list[Path] = []
    _walk_sync(real_root, frozenset({real_root}), files)
    return _relativize(files, real_root, absolute)


async def _walk_async(directory: Path, ancestors: frozenset[Path]) -> list[Path]:
    names = await asyncio.to_thread(list_directory, directory)

    async def visit(entry: Path) -> list[Path]:
        canonical, kind = await asyncio.to_thread(classify, entry)
        if kind is EntryKind.DIRECTORY:
            if _is_cycle(canonical, ancestors):
                return []
            return await _walk_async(canonical, ancestors | {canonical})
        if kind is EntryKind.FILE:
            return [canonical]
        logger.debug("Skipping special file", extra={"path": str(canonical)})
        return []

    # gather keeps listing order regardless of completion order
    nested = await asyncio.gather(*(visit(directory / name) for name in names))
    return [file for group in nested for file in group]


async def walk_directory_async(root: str | os.PathLike[str], absolute: bool = False) -> list[Path]:
    """Concurrent variant of :func:`walk_directory` with identical output."""
    real_root = await asyncio.to_thread(canonicalize, root)
    logger.debug("Walking directory", extra={"root": str(real_root)})

    files = await _walk_async(real_root, frozenset({real_root}))
    return _relativize(files, real_root, absolute)

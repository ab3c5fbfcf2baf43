"""Filesystem operations: directory walking and path filtering."""

from __future__ import annotations

from .filters import compile_patterns, filter_files, should_include_file
from .walker import EntryKind, canonicalize, walk_directory, walk_directory_async

__all__ = [
    "EntryKind",
    "canonicalize",
    "compile_patterns",
    "filter_files",
    "should_include_file",
    "walk_directory",
    "walk_directory_async",
]

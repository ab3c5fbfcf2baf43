"""Core size engine: compression, filesystem traversal and aggregation."""

from __future__ import annotations

from .aggregator import (
    size_from_buffer,
    size_from_buffer_async,
    size_from_directory,
    size_from_directory_async,
    size_from_file,
    size_from_file_async,
    size_from_files,
    size_from_files_async,
)
from .compression import GzipSizeStream, gzip_compress, gzip_compress_async, gzip_size_from_stream
from .engine import size_of, size_of_async

__all__ = [
    "GzipSizeStream",
    "gzip_compress",
    "gzip_compress_async",
    "gzip_size_from_stream",
    "size_from_buffer",
    "size_from_buffer_async",
    "size_from_directory",
    "size_from_directory_async",
    "size_from_file",
    "size_from_file_async",
    "size_from_files",
    "size_from_files_async",
    "size_of",
    "size_of_async",
]

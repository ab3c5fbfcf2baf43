"""File Size - raw and gzip-compressed size of files, directories and buffers.

This package computes the on-disk size and the gzip size of a buffer, a
file, a set of files or a whole directory tree, with optional
include/exclude filtering. Every blocking entry point has an ``async``
twin returning the same result types.
"""

from file_size.config import FileSizeOptions, GzipOptions
from file_size.core import (
    GzipSizeStream,
    gzip_compress,
    gzip_compress_async,
    gzip_size_from_stream,
    size_from_buffer,
    size_from_buffer_async,
    size_from_directory,
    size_from_directory_async,
    size_from_file,
    size_from_file_async,
    size_from_files,
    size_from_files_async,
    size_of,
    size_of_async,
)
from file_size.core.filesystem import should_include_file, walk_directory, walk_directory_async
from file_size.exceptions import (
    CompressionError,
    ConfigurationError,
    FileSizeError,
    InvalidArgumentError,
    NotFoundError,
    PermissionDeniedError,
)
from file_size.types import FileSizeResult, SizeResult

__all__ = [
    "CompressionError",
    "ConfigurationError",
    "FileSizeError",
    "FileSizeOptions",
    "FileSizeResult",
    "GzipOptions",
    "GzipSizeStream",
    "InvalidArgumentError",
    "NotFoundError",
    "PermissionDeniedError",
    "SizeResult",
    "gzip_compress",
    "gzip_compress_async",
    "gzip_size_from_stream",
    "should_include_file",
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
    "walk_directory",
    "walk_directory_async",
]

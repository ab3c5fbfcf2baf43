"""Error taxonomy for size computations.

Every error raised by the library derives from :class:`FileSizeError`. The
filesystem flavours also derive from the matching builtin ``OSError``
subclass so callers that already catch ``FileNotFoundError`` or
``PermissionError`` keep working.
"""

from __future__ import annotations

import errno
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any


class FileSizeError(Exception):
    """Base exception for all file-size errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:  # pyright: ignore[reportAny] # Flexible error context
        """Initialize FileSizeError.

        Args:
            message: Error message
            context: Additional context information for debugging
        """
        super().__init__(message)
        self.context: dict[str, Any] = context or {}  # pyright: ignore[reportAny] # Flexible error context


class InvalidArgumentError(FileSizeError, ValueError):
    """Raised when an empty or missing buffer is passed where content is required."""


class NotFoundError(FileSizeError, FileNotFoundError):
    """Raised when a path does not resolve to an existing filesystem entry."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        context = {"path": str(path)} if path is not None else None
        super().__init__(message, context)
        self.path: str | None = str(path) if path is not None else None


class PermissionDeniedError(FileSizeError, PermissionError):
    """Raised when a filesystem entry exists but cannot be read or listed."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        context = {"path": str(path)} if path is not None else None
        super().__init__(message, context)
        self.path: str | None = str(path) if path is not None else None


class CompressionError(FileSizeError):
    """Raised when the compressor rejects its options or its input."""


class ConfigurationError(FileSizeError):
    """Raised when a configuration file cannot be loaded or validated."""

    def __init__(self, message: str, file_path: str | Path | None = None) -> None:
        context = {"file_path": str(file_path)} if file_path is not None else None
        super().__init__(message, context)
        self.file_path: str | None = str(file_path) if file_path is not None else None


@contextmanager
def translate_os_errors(path: str | Path) -> Iterator[None]:
    """Translate missing-entry and access errors into the library taxonomy.

    Other ``OSError`` values (symlink loops, I/O errors) propagate unchanged.

    Args:
        path: Path the wrapped operation works on, used in the message

    Raises:
        NotFoundError: If the entry does not exist
        PermissionDeniedError: If the entry cannot be accessed
    """
    try:
        yield
    except FileNotFoundError as exc:
        raise NotFoundError(f"No such file or directory: {path}", path) from exc
    except NotADirectoryError as exc:
        raise NotFoundError(f"Not a directory: {path}", path) from exc
    except PermissionError as exc:
        raise PermissionDeniedError(f"Permission denied: {path}", path) from exc
    except OSError as exc:
        if exc.errno == errno.ENOENT:
            raise NotFoundError(f"No such file or directory: {path}", path) from exc
        raise

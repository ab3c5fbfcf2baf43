"""Result types shared across the size engine."""

from file_size.types.models import FileSizeResult, SizeResult

__all__ = [
    "FileSizeResult",
    "SizeResult",
]

"""Shared utility modules.

This package provides stateless helpers for:
- Byte count formatting (bytes to human-readable)
- Logging configuration for the command line
"""

from file_size.utils.formatting import format_bytes
from file_size.utils.logging import configure_logging

__all__ = [
    "configure_logging",
    "format_bytes",
]

"""Command-line application for file-size."""

from __future__ import annotations

from file_size.app.cli import cli

__all__ = [
    "cli",
]

"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import gzip
import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

# Text with enough repetition to compress well
SAMPLE_TEXT: bytes = b"The quick brown fox jumps over the lazy dog. " * 64


def reference_gzip_size(data: bytes, level: int = -1) -> int:
    """Gzip length computed by the standard library gzip module."""
    return len(gzip.compress(data, compresslevel=level, mtime=0))


@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[None, None, None]:
    """Undo handler and level changes made by configure_logging."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    try:
        yield
    finally:
        root_logger.handlers[:] = handlers
        root_logger.setLevel(level)


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, bytes], Path]:
    """Create a file below tmp_path, creating parent directories as needed."""

    def _write(relative: str, content: bytes) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        _ = path.write_bytes(content)
        return path

    return _write


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Directory with nested files of distinct content.

    Layout::

        tree/
          app.js
          style.css
          lib/
            util.js
            vendor/
              big.js
    """
    root = tmp_path / "tree"
    (root / "lib" / "vendor").mkdir(parents=True)
    _ = (root / "app.js").write_bytes(b"console.log('app');\n" * 20)
    _ = (root / "style.css").write_bytes(b"body { margin: 0; }\n" * 30)
    _ = (root / "lib" / "util.js").write_bytes(b"export const util = () => 42;\n" * 10)
    _ = (root / "lib" / "vendor" / "big.js").write_bytes(SAMPLE_TEXT)
    return root


@pytest.fixture
def gzip_size() -> Callable[..., int]:
    """Reference gzip length function independent of the code under test."""
    return reference_gzip_size


@pytest.fixture
def sample_text() -> bytes:
    return SAMPLE_TEXT

"""Test suite for the error taxonomy and OS error translation."""

from __future__ import annotations

import errno

import pytest

from file_size.exceptions import (
    CompressionError,
    FileSizeError,
    InvalidArgumentError,
    NotFoundError,
    PermissionDeniedError,
    translate_os_errors,
)


class TestErrorHierarchy:
    """Test that library errors are also the matching builtin errors."""

    def test_not_found_is_file_not_found(self) -> None:
        error = NotFoundError("gone", "/tmp/x")

        assert isinstance(error, FileSizeError)
        assert isinstance(error, FileNotFoundError)
        assert error.path == "/tmp/x"
        assert error.context == {"path": "/tmp/x"}
        assert str(error) == "gone"

    def test_permission_denied_is_permission_error(self) -> None:
        error = PermissionDeniedError("denied", "/root")

        assert isinstance(error, PermissionError)
        assert str(error) == "denied"

    def test_invalid_argument_is_value_error(self) -> None:
        assert isinstance(InvalidArgumentError("empty"), ValueError)

    def test_compression_error_context(self) -> None:
        error = CompressionError("bad", {"level": 42})

        assert error.context == {"level": 42}


class TestTranslateOsErrors:
    """Test translation of filesystem errors."""

    def test_file_not_found(self) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            with translate_os_errors("/missing"):
                raise FileNotFoundError(errno.ENOENT, "No such file")

        assert exc_info.value.path == "/missing"
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_permission(self) -> None:
        with pytest.raises(PermissionDeniedError):
            with translate_os_errors("/locked"):
                raise PermissionError(errno.EACCES, "Permission denied")

    def test_other_os_errors_propagate_unchanged(self) -> None:
        original = OSError(errno.ELOOP, "Too many levels of symbolic links")

        with pytest.raises(OSError) as exc_info:
            with translate_os_errors("/loop"):
                raise original

        assert exc_info.value is original

    def test_no_error(self) -> None:
        with translate_os_errors("/fine"):
            pass

"""Test suite for include/exclude path filtering."""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from file_size.core.filesystem.filters import compile_patterns, filter_files, should_include_file

JS = re.compile(r"\.js$")
CSS = re.compile(r"\.css$")
VENDOR = re.compile(r"/vendor/")


class TestShouldIncludeFile:
    """Test the include/exclude decision."""

    def test_no_filters_includes_everything(self) -> None:
        assert should_include_file("/project/app.js")

    def test_matching_include_pattern(self) -> None:
        assert should_include_file("/project/app.js", [JS])

    def test_any_include_pattern_suffices(self) -> None:
        """Test that include patterns combine with any-of semantics."""
        assert should_include_file("/project/style.css", [JS, CSS])

    def test_non_matching_include_pattern(self) -> None:
        assert not should_include_file("/project/readme.md", [JS, CSS])

    def test_empty_include_set_matches_nothing(self) -> None:
        """Test that an empty include set differs from a missing one."""
        assert not should_include_file("/project/app.js", [])
        assert should_include_file("/project/app.js", None)

    def test_exclude_overrides_include(self) -> None:
        assert not should_include_file("/project/vendor/lib.js", [JS], [VENDOR])

    def test_exclude_without_include(self) -> None:
        assert not should_include_file("/project/vendor/lib.js", None, [VENDOR])
        assert should_include_file("/project/src/lib.js", None, [VENDOR])

    def test_empty_exclude_set_excludes_nothing(self) -> None:
        assert should_include_file("/project/app.js", None, [])

    def test_pattern_searches_anywhere_in_path(self) -> None:
        """Test that patterns are searched, not anchored at the start."""
        assert should_include_file("/deep/nested/src/app.js", [re.compile("src")])

    def test_accepts_path_objects(self) -> None:
        assert should_include_file(Path("/project/app.js"), [JS])

    def test_accepts_generators(self) -> None:
        """Test that pattern iterables are not required to be lists."""
        assert should_include_file("/project/app.js", (p for p in [CSS, JS]))


class TestFilterFiles:
    """Test filtering a sequence of paths."""

    def test_preserves_order_and_type(self) -> None:
        paths = [Path("/b.js"), Path("/a.css"), Path("/a.js")]

        assert filter_files(paths, [JS]) == [Path("/b.js"), Path("/a.js")]

    def test_empty_include_drops_everything(self) -> None:
        assert filter_files(["/a.js", "/b.css"], []) == []


class TestCompilePatterns:
    """Test pattern set compilation."""

    def test_none_stays_none(self) -> None:
        assert compile_patterns(None) is None

    def test_empty_stays_empty(self) -> None:
        assert compile_patterns([]) == ()

    def test_mixed_strings_and_patterns(self) -> None:
        compiled = compile_patterns([r"\.js$", CSS])

        assert compiled is not None
        assert [p.pattern for p in compiled] == [r"\.js$", r"\.css$"]

    def test_invalid_pattern_raises(self) -> None:
        with pytest.raises(re.error):
            _ = compile_patterns(["("])

"""Include/exclude filtering of file paths by regular expression."""

from __future__ import annotations

import re
from collections.abc import Iterable
from os import PathLike
from typing import TypeVar

P = TypeVar("P", bound="str | PathLike[str]")


def compile_patterns(patterns: Iterable[str | re.Pattern[str]] | None) -> tuple[re.Pattern[str], ...] | None:
    """Compile a pattern set, keeping ``None`` distinct from an empty set.

    Args:
        patterns: Regular expression strings or precompiled patterns

    Returns:
        Tuple of compiled patterns, or None when no set was given

    Raises:
        re.error: If a pattern string is not a valid regular expression
    """
    if patterns is None:
        return None
    return tuple(p if isinstance(p, re.Pattern) else re.compile(p) for p in patterns)


def _matches_any(path: str, patterns: Iterable[re.Pattern[str]]) -> bool:
    return any(pattern.search(path) for pattern in patterns)


def should_include_file(
    path: str | PathLike[str],
    include: Iterable[re.Pattern[str]] | None = None,
    exclude: Iterable[re.Pattern[str]] | None = None,
) -> bool:
    """Decide whether a file participates in a size computation.

    Patterns are searched anywhere in the path string. A path is kept when
    it matches at least one include pattern and no exclude pattern. A
    missing include set admits everything while an empty one admits
    nothing; exclude admits everything when missing or empty.

    Args:
        path: File path to test
        include: Patterns of which at least one must match, or None
        exclude: Patterns of which none may match, or None

    Returns:
        True if the file should be included, False otherwise

    Examples:
        >>> should_include_file("/a/b.js", [re.compile(r"\\.js$")])
        True
        >>> should_include_file("/a/b.js", [])
        False
        >>> should_include_file("/a/b.js", None, [re.compile("b")])
        False
    """
    target = str(path)
    included = True if include is None else _matches_any(target, include)
    excluded = False if exclude is None else _matches_any(target, exclude)
    return included and not excluded


def filter_files(
    paths: Iterable[P],
    include: Iterable[re.Pattern[str]] | None = None,
    exclude: Iterable[re.Pattern[str]] | None = None,
) -> list[P]:
    """Keep the paths accepted by :func:`should_include_file`, in input order."""
    include = tuple(include) if include is not None else None
    exclude = tuple(exclude) if exclude is not None else None
    return [path for path in paths if should_include_file(path, include, exclude)]

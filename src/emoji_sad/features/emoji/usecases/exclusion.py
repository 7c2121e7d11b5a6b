"""src/emoji_sad/features/emoji/usecases/exclusion.py
What: Match walk paths against caller-supplied exclusion patterns.
Why: One pattern may name an absolute path, a directory anywhere in the tree, a basename or a glob.
Assumptions: - Glob wildcards never cross a path separator.
"""

from __future__ import annotations

import fnmatch
import os
from collections.abc import Iterable
from typing import Final

GLOB_CHARACTERS: Final[tuple[str, ...]] = ("*", "?")


def normalize_path(value: str) -> str:
    """Clean ``value`` so separators and trailing slashes compare equal."""

    return os.path.normpath(value)


def _glob_full_path(path: str, pattern: str) -> bool:
    path_parts = path.split(os.sep)
    pattern_parts = pattern.split(os.sep)
    if len(path_parts) != len(pattern_parts):
        return False
    return all(
        fnmatch.fnmatchcase(part, glob)
        for part, glob in zip(path_parts, pattern_parts, strict=True)
    )


def matches_exclusion(path: str, pattern: str) -> bool:
    """Return whether ``path`` is excluded by ``pattern``.

    Args:
        path: Path produced by the walk (relative or absolute).
        pattern: Exclusion pattern as supplied by the user.

    Returns:
        bool: ``True`` when the pattern names the path, one of its ancestors,
        its basename, or matches it as a glob.
    """
    path = normalize_path(path)
    pattern = normalize_path(pattern)

    if path == pattern:
        return True

    if os.path.isabs(pattern):
        # Absolute patterns compare against the absolute form of the walk path.
        absolute = os.path.abspath(path)
        prefix = pattern if pattern.endswith(os.sep) else pattern + os.sep
        return absolute == pattern or absolute.startswith(prefix)

    if pattern in path.split(os.sep):
        return True

    basename = os.path.basename(path)
    if path.endswith(os.sep + pattern) or basename == pattern:
        return True

    if any(char in pattern for char in GLOB_CHARACTERS):
        return _glob_full_path(path, pattern) or fnmatch.fnmatchcase(basename, pattern)

    return False


def is_excluded(path: str, patterns: Iterable[str]) -> bool:
    """Return whether any non-empty pattern excludes ``path``."""

    return any(matches_exclusion(path, pattern) for pattern in patterns if pattern)


__all__ = ["GLOB_CHARACTERS", "is_excluded", "matches_exclusion", "normalize_path"]

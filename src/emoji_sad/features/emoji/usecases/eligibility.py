"""src/emoji_sad/features/emoji/usecases/eligibility.py
What: Decide which filesystem entries are read at all.
Why: Binary formats, special files and VCS internals must never be rewritten.
"""

from __future__ import annotations

import os
import stat
from typing import Final

# Denylist rather than allowlist: unknown text formats are scanned.
SKIP_EXTENSIONS: Final[frozenset[str]] = frozenset(
    {
        ".exe", ".bin", ".so", ".dll",
        ".jpg", ".jpeg", ".png", ".gif", ".bmp",
        ".mp3", ".mp4", ".avi", ".mov",
        ".zip", ".tar", ".gz", ".7z",
        ".pdf",
        ".sock",
    }
)

VCS_DIRECTORY_NAMES: Final[frozenset[str]] = frozenset({".git", ".svn", ".hg"})


def file_extension(path: str) -> str:
    """Return the suffix from the last dot of the basename, or ``""``.

    Unlike ``os.path.splitext`` a dotfile such as ``.gz`` counts as its own
    extension.
    """
    name = os.path.basename(path)
    dot = name.rfind(".")
    return name[dot:] if dot != -1 else ""


def is_vcs_path(path: str) -> bool:
    """Return whether any segment of ``path`` is a VCS metadata directory."""

    normalized = os.path.normpath(path)
    return any(part in VCS_DIRECTORY_NAMES for part in normalized.split(os.sep))


def should_skip(path: str) -> bool:
    """Return whether ``path`` is ineligible for scanning.

    Entries that cannot be stat'd are skipped rather than reported.
    """
    try:
        info = os.lstat(path)
    except OSError:
        return True

    if not stat.S_ISREG(info.st_mode):
        return True

    return file_extension(path) in SKIP_EXTENSIONS


__all__ = [
    "SKIP_EXTENSIONS",
    "VCS_DIRECTORY_NAMES",
    "file_extension",
    "is_vcs_path",
    "should_skip",
]

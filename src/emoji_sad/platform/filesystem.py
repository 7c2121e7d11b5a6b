"""Filesystem helpers shared by adapters.

Where: src/emoji_sad/platform/filesystem.py
What: Whole-file reads, owner-only rewrites and sorted directory listings.
Why: Keep raw ``os`` calls out of the use case layer.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Final

OWNER_READ_WRITE: Final[int] = 0o600


def read_file_bytes(path: str) -> bytes:
    """Read the whole file at ``path``."""

    with open(path, "rb") as handle:
        return handle.read()


def write_owner_only(path: str, data: bytes) -> None:
    """Overwrite ``path`` in place and set its mode to ``0o600``.

    The mode is applied after writing so the result does not depend on the
    umask or on the permission bits the file had before.
    """

    with open(path, "wb") as handle:
        _ = handle.write(data)
    os.chmod(path, OWNER_READ_WRITE)


def iter_sorted_entries(path: str) -> Iterator[tuple[str, bool]]:
    """Yield ``(child_path, is_directory)`` for entries of ``path`` sorted by name."""

    with os.scandir(path) as entries:
        children = sorted(
            ((entry.name, entry.is_dir(follow_symlinks=False)) for entry in entries),
            key=lambda item: item[0],
        )
    for name, is_directory in children:
        yield os.path.join(path, name), is_directory


__all__ = [
    "OWNER_READ_WRITE",
    "iter_sorted_entries",
    "read_file_bytes",
    "write_owner_only",
]

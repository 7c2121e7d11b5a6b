"""Where: src/emoji_sad/features/emoji/usecases/ports.py
What: Protocols the tree processor depends on for filesystem access.
Why: Tests can swap in doubles that fail reads or writes on demand.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileStorePort(Protocol):
    """Port abstracting whole-file reads, rewrites and directory listings."""

    def read_bytes(self, path: str) -> bytes:
        """Return the full contents of ``path``."""
        ...

    def write_private(self, path: str, data: bytes) -> None:
        """Overwrite ``path`` with ``data`` and restrict it to owner read/write."""
        ...

    def list_directory(self, path: str) -> Iterator[tuple[str, bool]]:
        """Yield ``(child_path, is_directory)`` pairs sorted by name.

        Symbolic links are never reported as directories.
        """
        ...


__all__ = ["FileStorePort"]

"""src/emoji_sad/features/emoji/adapters/filesystem_adapter.py
What: Adapter implementing FileStorePort on top of platform helpers.
Why: Keep filesystem I/O in adapters while use cases target abstractions."""

from __future__ import annotations

from collections.abc import Iterator

from emoji_sad.features.emoji.usecases.ports import FileStorePort
from emoji_sad.platform.filesystem import (
    iter_sorted_entries,
    read_file_bytes,
    write_owner_only,
)


class LocalFileStoreAdapter(FileStorePort):
    """Adapter delegating file access to the shared platform module."""

    def read_bytes(self, path: str) -> bytes:
        return read_file_bytes(path)

    def write_private(self, path: str, data: bytes) -> None:
        write_owner_only(path, data)

    def list_directory(self, path: str) -> Iterator[tuple[str, bool]]:
        return iter_sorted_entries(path)


__all__ = ["LocalFileStoreAdapter"]

"""src/emoji_sad/features/emoji/usecases/errors.py
What: Exception taxonomy raised by scanning and rewriting.
Why: Let the CLI map every failure to a message and exit code in one place.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .processing_types import ProcessResult


class EmojiSadError(Exception):
    """Base class for all emoji-sad failures."""


class ReadError(EmojiSadError):
    """Raised when a file cannot be opened or read."""

    def __init__(self, path: str, cause: BaseException) -> None:
        super().__init__(f"failed to read file {path}: {cause}")
        self.path: str = path


class WriteError(EmojiSadError):
    """Raised when a cleaned file cannot be written back or re-permissioned.

    ``result`` still describes what was found so callers can report it.
    """

    def __init__(self, path: str, result: ProcessResult, cause: BaseException) -> None:
        super().__init__(f"failed to write cleaned file {path}: {cause}")
        self.path: str = path
        self.result: ProcessResult = result


class WalkError(EmojiSadError):
    """Raised when a tree walk cannot continue.

    ``results`` holds what the walk reported before it stopped; files behind
    those results may already have been rewritten.
    """

    def __init__(
        self,
        path: str,
        cause: BaseException,
        results: list[ProcessResult] | None = None,
    ) -> None:
        super().__init__(f"failed to process {path}: {cause}")
        self.path: str = path
        self.results: list[ProcessResult] = list(results or [])


class ConfigError(EmojiSadError):
    """Raised for invalid option combinations, targets or configuration files."""


class AllowFileError(EmojiSadError):
    """Raised when an allow list file cannot be loaded."""

    def __init__(self, path: str, cause: BaseException) -> None:
        super().__init__(f"failed to load allow file {path}: {cause}")
        self.path: str = path


__all__ = [
    "AllowFileError",
    "ConfigError",
    "EmojiSadError",
    "ReadError",
    "WalkError",
    "WriteError",
]

"""src/emoji_sad/features/emoji/usecases/processing_types.py
Where: Emoji feature usecases layer.
What: Shared enums and dataclasses for the scanning flow.
Why: Keep the tree processor lean by centralising type definitions.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class ProcessingEvent(StrEnum):
    """Structured event identifiers for scan logs."""

    TREE_START = "scan.tree.start"
    TREE_COMPLETE = "scan.tree.complete"
    TREE_ERROR = "scan.tree.error"
    FILE_SKIP_EXCLUDED = "scan.file.skip.excluded"
    FILE_SKIP_INELIGIBLE = "scan.file.skip.ineligible"
    FILE_SKIP_VCS = "scan.file.skip.vcs"
    FILE_CLEAN = "scan.file.clean"
    FILE_EMOJIS = "scan.file.emojis"
    FILE_REWRITTEN = "scan.file.rewritten"
    FILE_ERROR = "scan.file.error"
    PATH_MISSING = "scan.path.missing"


@dataclass(frozen=True, slots=True)
class ProcessResult:
    """Outcome of scanning one file (or one block of piped content)."""

    file_path: str
    emojis_found: list[str] = field(default_factory=list)
    original_size: int = 0
    new_size: int | None = None
    modified: bool = False


@dataclass(slots=True)
class WalkStats:
    """Mutable bookkeeping for a tree walk."""

    root: str
    preview_only: bool
    start_time: float = field(default_factory=time.perf_counter)
    scanned: int = 0
    skipped: int = 0
    reported: int = 0

    def record_scan(self, result: ProcessResult) -> None:
        """Count a scanned file and whether it produced a report."""

        self.scanned += 1
        if result.emojis_found:
            self.reported += 1

    def record_skip(self) -> None:
        self.skipped += 1

    def duration_seconds(self) -> float:
        return time.perf_counter() - self.start_time

    def summary_extra(self) -> dict[str, Any]:
        """Return a dictionary suitable for structured logging extras."""

        return {
            "directory": self.root,
            "scanned": self.scanned,
            "skipped": self.skipped,
            "reported": self.reported,
            "dry_run": self.preview_only,
            "duration_seconds": round(self.duration_seconds(), 4),
        }


__all__ = ["ProcessResult", "ProcessingEvent", "WalkStats"]

"""
Summary: Walk a file tree, detect emojis in eligible files and optionally strip them.
Why: Tie together eligibility, exclusion matching, detection and rewriting.
"""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterable
from typing import Any

from emoji_sad.features.emoji.domain import Detector
from emoji_sad.platform.logging import logger

from .eligibility import VCS_DIRECTORY_NAMES, is_vcs_path, should_skip
from .errors import ReadError, WalkError, WriteError
from .exclusion import is_excluded
from .ports import FileStorePort
from .processing_types import ProcessResult, ProcessingEvent, WalkStats

# Bytes that are not valid UTF-8 survive a decode/encode round trip untouched.
TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "surrogateescape"


class TreeProcessor:
    """Scan files for emojis and rewrite them without."""

    detector: Detector
    excludes: tuple[str, ...]

    def __init__(
        self,
        excludes: Iterable[str] = (),
        allowed: Iterable[str] = (),
        *,
        file_store: FileStorePort | None = None,
    ) -> None:
        """Create a processor.

        Args:
            excludes: Exclusion patterns consulted for every walked entry.
            allowed: Emojis that are neither reported nor removed.
            file_store: File access port; defaults to the local filesystem.
        """
        if file_store is None:
            from emoji_sad.features.emoji.adapters import LocalFileStoreAdapter

            file_store = LocalFileStoreAdapter()

        self.detector = Detector.with_allowed(allowed)
        self.excludes = tuple(pattern for pattern in excludes if pattern)
        self._files: FileStorePort = file_store

    def log_processing(
        self,
        level: int,
        event: ProcessingEvent,
        message: str,
        *message_args: object,
        **context: Any,
    ) -> None:
        extra: dict[str, Any] = {"processing_event": event.value}
        extra.update(context)
        logger.log(level, message, *message_args, extra=extra, stacklevel=2)

    def is_excluded(self, path: str) -> bool:
        return is_excluded(path, self.excludes)

    def process_file(self, file_path: str, preview_only: bool = True) -> ProcessResult:
        """Scan one file and, unless previewing, rewrite it without emojis.

        Args:
            file_path: File to scan.
            preview_only: Report what would change without touching the file.

        Returns:
            ProcessResult: Emojis found and byte sizes before and after.

        Raises:
            ReadError: The file could not be read.
            WriteError: The cleaned content or its permissions could not be written.
        """
        try:
            content = self._files.read_bytes(file_path)
        except OSError as exc:
            raise ReadError(file_path, exc) from exc

        text = content.decode(TEXT_ENCODING, errors=TEXT_ERRORS)
        emojis = self.detector.find_emojis(text)

        if not emojis:
            self.log_processing(
                logging.DEBUG,
                ProcessingEvent.FILE_CLEAN,
                "No emojis in %s",
                file_path,
                source_path=file_path,
            )
            return ProcessResult(file_path=file_path, original_size=len(content))

        cleaned = self.detector.remove_emojis(text).encode(TEXT_ENCODING, errors=TEXT_ERRORS)
        result = ProcessResult(
            file_path=file_path,
            emojis_found=emojis,
            original_size=len(content),
            new_size=len(cleaned),
            modified=True,
        )
        self.log_processing(
            logging.DEBUG,
            ProcessingEvent.FILE_EMOJIS,
            "Found %d emoji(s) in %s",
            len(emojis),
            file_path,
            source_path=file_path,
            emoji_count=len(emojis),
        )

        if preview_only:
            return result

        try:
            self._files.write_private(file_path, cleaned)
        except OSError as exc:
            raise WriteError(file_path, result, exc) from exc

        self.log_processing(
            logging.INFO,
            ProcessingEvent.FILE_REWRITTEN,
            "Rewrote %s (%d -> %d bytes)",
            file_path,
            result.original_size,
            result.new_size,
            source_path=file_path,
            original_size=result.original_size,
            new_size=result.new_size,
        )
        return result

    def process_tree(self, root_path: str, preview_only: bool = True) -> list[ProcessResult]:
        """Walk ``root_path`` depth-first and scan every eligible file.

        Entries are visited in name order. Only files containing emojis are
        returned. The first file that fails aborts the walk; files rewritten
        before that stay rewritten.

        Raises:
            WalkError: The root or a directory could not be listed, or a file
                could not be read or written.
        """
        try:
            root_info = os.lstat(root_path)
        except OSError as exc:
            raise WalkError(root_path, exc) from exc

        stats = WalkStats(root=root_path, preview_only=preview_only)
        self.log_processing(
            logging.DEBUG,
            ProcessingEvent.TREE_START,
            "Scanning %s (dry_run=%s)",
            root_path,
            preview_only,
            directory=root_path,
            dry_run=preview_only,
        )

        results: list[ProcessResult] = []
        stack: list[tuple[str, bool]] = [(root_path, stat.S_ISDIR(root_info.st_mode))]

        while stack:
            path, is_directory = stack.pop()

            if self.is_excluded(path):
                stats.record_skip()
                self.log_processing(
                    logging.DEBUG,
                    ProcessingEvent.FILE_SKIP_EXCLUDED,
                    "Excluded %s",
                    path,
                    source_path=path,
                )
                continue

            if is_directory:
                if os.path.basename(os.path.normpath(path)) in VCS_DIRECTORY_NAMES:
                    stats.record_skip()
                    continue
                try:
                    children = list(self._files.list_directory(path))
                except OSError as exc:
                    self._log_tree_error(path, exc)
                    raise WalkError(path, exc, results) from exc
                stack.extend(reversed(children))
                continue

            if is_vcs_path(path):
                stats.record_skip()
                self.log_processing(
                    logging.DEBUG,
                    ProcessingEvent.FILE_SKIP_VCS,
                    "Skipping version control file %s",
                    path,
                    source_path=path,
                )
                continue

            if should_skip(path):
                stats.record_skip()
                self.log_processing(
                    logging.DEBUG,
                    ProcessingEvent.FILE_SKIP_INELIGIBLE,
                    "Skipping ineligible file %s",
                    path,
                    source_path=path,
                )
                continue

            try:
                result = self.process_file(path, preview_only)
            except (ReadError, WriteError) as exc:
                self.log_processing(
                    logging.DEBUG,
                    ProcessingEvent.FILE_ERROR,
                    "Failed %s: %s",
                    path,
                    exc,
                    source_path=path,
                    error_message=str(exc),
                )
                raise WalkError(path, exc, results) from exc

            stats.record_scan(result)
            if result.emojis_found:
                results.append(result)

        self.log_processing(
            logging.DEBUG,
            ProcessingEvent.TREE_COMPLETE,
            "Scan complete [scanned=%d, skipped=%d, reported=%d]",
            stats.scanned,
            stats.skipped,
            stats.reported,
            **stats.summary_extra(),
        )
        return results

    def _log_tree_error(self, path: str, error: OSError) -> None:
        self.log_processing(
            logging.DEBUG,
            ProcessingEvent.TREE_ERROR,
            "Cannot list %s: %s",
            path,
            error,
            directory=path,
            error_message=str(error),
        )


__all__ = ["TreeProcessor"]

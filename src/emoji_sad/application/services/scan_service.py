"""Application service for scanning inputs for emojis.

This layer resolves what the user pointed at (a directory, a file, a list of
paths or literal piped text) into calls on the tree processor so the CLI only
deals with presentation.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import BinaryIO, Callable, final

from emoji_sad.config.settings import STDIN_FILE_ID, STDIN_MARKER
from emoji_sad.features.emoji import (
    ConfigError,
    ProcessResult,
    ProcessingEvent,
    TreeProcessor,
    WalkError,
)
from emoji_sad.features.emoji.usecases.eligibility import is_vcs_path, should_skip
from emoji_sad.features.emoji.usecases.tree_processor import TEXT_ENCODING, TEXT_ERRORS
from emoji_sad.platform.logging import logger


@dataclass(frozen=True)
class ScanRequest:
    """Input parameters for a scan.

    Attributes:
        target: Directory or file path, or ``-`` for standard input.
        preview_only: If True, performs no file mutations.
        excludes: Exclusion patterns for tree walks.
        allowed: Emojis to leave in place.
        files_from_stdin: With ``-``, treat stdin as newline-separated paths.
        list_only: The caller only wants matching paths listed.
    """

    target: str
    preview_only: bool = True
    excludes: tuple[str, ...] = ()
    allowed: tuple[str, ...] = ()
    files_from_stdin: bool = False
    list_only: bool = False

    @property
    def reads_stdin(self) -> bool:
        return self.target == STDIN_MARKER

    @property
    def is_stdin_content(self) -> bool:
        """Whether stdin carries the text to clean rather than file paths."""

        return self.reads_stdin and not self.files_from_stdin


@dataclass
class ScanOutcome:
    """What a scan produced, ready for presentation."""

    results: list[ProcessResult]
    is_stdin_content: bool = False
    cleaned_content: str | None = None
    warnings: list[str] = field(default_factory=list)


def normalize_piped_text(raw: str) -> str:
    """Split piped text into lines and rejoin them without a trailing newline.

    Carriage returns ending a line are dropped.
    """
    lines = raw.split("\n")
    if lines and lines[-1] == "":
        _ = lines.pop()
    return "\n".join(line.removesuffix("\r") for line in lines)


@final
class ScanEmojiService:
    """Application service that orchestrates scans for every input mode."""

    def __init__(
        self,
        *,
        processor_factory: Callable[..., TreeProcessor] | None = None,
    ) -> None:
        """Create a service with an overridable processor factory.

        Tests can inject light-weight doubles while production code builds a
        real ``TreeProcessor``.
        """
        self._processor_factory: Callable[..., TreeProcessor] = (
            processor_factory or TreeProcessor
        )

    def build_processor(self, request: ScanRequest) -> TreeProcessor:
        """Build a processor configured with the request's excludes and allow list."""

        return self._processor_factory(excludes=request.excludes, allowed=request.allowed)

    def run(self, request: ScanRequest, stdin: BinaryIO | None = None) -> ScanOutcome:
        """Execute the scan described by ``request``.

        Args:
            request: Scan parameters.
            stdin: Binary stream used when the target is ``-``.

        Returns:
            ScanOutcome: Results in traversal (or input) order.

        Raises:
            ConfigError: Listing was requested for piped content, or the target is missing.
            WalkError: A tree walk failed.
        """
        if request.is_stdin_content and request.list_only:
            raise ConfigError(
                "--list-only cannot be used with stdin content processing "
                "(use --files-from-stdin for file lists)"
            )

        processor = self.build_processor(request)

        if request.reads_stdin:
            stream = stdin if stdin is not None else sys.stdin.buffer
            raw = stream.read().decode(TEXT_ENCODING, errors=TEXT_ERRORS)
            if request.files_from_stdin:
                return self.process_path_list(processor, raw.splitlines(), request.preview_only)
            return self.process_content(processor, raw, request.preview_only)

        if not os.path.lexists(request.target):
            raise ConfigError(f"directory does not exist: {request.target}")

        results = processor.process_tree(request.target, request.preview_only)
        return ScanOutcome(results=results)

    def process_path_list(
        self,
        processor: TreeProcessor,
        lines: list[str],
        preview_only: bool,
    ) -> ScanOutcome:
        """Scan every path named in ``lines``; failures become warnings.

        Each path goes through the same exclusion and eligibility policy as a
        tree walk; a directory is walked in full. A listed file the policy
        rejects is logged at debug level and left out of the report. When a
        walk stops early, whatever it reported before failing is kept.
        """
        outcome = ScanOutcome(results=[])
        for line in lines:
            path = line.strip()
            if not path:
                continue

            if not os.path.lexists(path):
                self._warn(outcome, f"file does not exist: {path}", ProcessingEvent.PATH_MISSING, path)
                continue

            if self._is_rejected_file(processor, path):
                logger.debug(
                    "Skipping listed file %s (excluded or ineligible)",
                    path,
                    extra={
                        "processing_event": ProcessingEvent.FILE_SKIP_INELIGIBLE.value,
                        "source_path": path,
                    },
                )
                continue

            try:
                results = processor.process_tree(path, preview_only)
            except WalkError as exc:
                outcome.results.extend(exc.results)
                cause = exc.__cause__ if exc.__cause__ is not None else exc
                self._warn(outcome, f"failed to process {path}: {cause}", ProcessingEvent.FILE_ERROR, path)
                continue

            outcome.results.extend(results)
        return outcome

    @staticmethod
    def _is_rejected_file(processor: TreeProcessor, path: str) -> bool:
        """Return whether a listed non-directory path would be skipped by a walk."""

        if os.path.isdir(path) and not os.path.islink(path):
            return False
        return processor.is_excluded(path) or is_vcs_path(path) or should_skip(path)

    def process_content(
        self,
        processor: TreeProcessor,
        raw: str,
        preview_only: bool,
    ) -> ScanOutcome:
        """Scan literal piped text; nothing on disk is touched.

        When not previewing, ``cleaned_content`` holds the text to emit, which
        is the input unchanged if it had no emojis.
        """
        text = normalize_piped_text(raw)
        outcome = ScanOutcome(results=[], is_stdin_content=True)
        if not text:
            return outcome

        detector = processor.detector
        emojis = detector.find_emojis(text)
        cleaned = detector.remove_emojis(text) if emojis else text

        if not preview_only:
            outcome.cleaned_content = cleaned

        if emojis:
            outcome.results.append(
                ProcessResult(
                    file_path=STDIN_FILE_ID,
                    emojis_found=emojis,
                    original_size=len(text.encode(TEXT_ENCODING, errors=TEXT_ERRORS)),
                    new_size=len(cleaned.encode(TEXT_ENCODING, errors=TEXT_ERRORS)),
                    modified=True,
                )
            )
        return outcome

    @staticmethod
    def _warn(outcome: ScanOutcome, message: str, event: ProcessingEvent, path: str) -> None:
        outcome.warnings.append(message)
        logger.debug(
            "%s",
            message,
            extra={"processing_event": event.value, "source_path": path, "error_message": message},
        )


__all__ = ["ScanEmojiService", "ScanOutcome", "ScanRequest", "normalize_piped_text"]

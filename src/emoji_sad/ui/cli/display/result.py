"""src/emoji_sad/ui/cli/display/result.py
What: Render user-facing text reports for scans.
Why: Keep console output formatting consistent across input modes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console

from emoji_sad.features.emoji import ProcessResult
from emoji_sad.features.emoji.usecases.tree_processor import TEXT_ENCODING, TEXT_ERRORS

from .summary import count_emojis, format_emoji_list


def _plain_console(*, stderr: bool = False) -> Console:
    # User content is printed verbatim: no markup, highlighting or :emoji: codes.
    return Console(stderr=stderr, markup=False, highlight=False, emoji=False, soft_wrap=True)


def _write_verbatim(console: Console, text: str) -> None:
    """Write ``text`` to the console's stream, bypassing Rich rendering.

    Rich expands tabs and drops control characters; paths and piped content
    must reach the stream unchanged.
    """
    data = text.encode(TEXT_ENCODING, errors=TEXT_ERRORS)
    stream = console.file
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        _ = stream.write(data.decode(TEXT_ENCODING, errors="replace"))
        stream.flush()
        return
    stream.flush()
    _ = buffer.write(data)
    buffer.flush()


@final
class ResultDisplay:
    """Handles text result display in CLI."""

    console: Console
    error_console: Console

    def __init__(self) -> None:
        """Initialize result display."""
        self.console = _plain_console()
        self.error_console = _plain_console(stderr=True)

    def show_report(
        self,
        results: Sequence[ProcessResult],
        *,
        dry_run: bool,
        to_stderr: bool = False,
    ) -> None:
        """Display the detailed per-file report.

        Args:
            results: Files that contained emojis.
            dry_run: Whether files were left untouched.
            to_stderr: Print to stderr, keeping stdout for cleaned content.
        """
        console = self.error_console if to_stderr else self.console
        total_files = len(results)

        if dry_run:
            console.print(f"DRY RUN: Found emojis in {total_files} file(s):")
        else:
            console.print(f"Processed {total_files} file(s) and removed emojis:")
        console.print()

        for result in results:
            _write_verbatim(console, f"File: {result.file_path}\n")
            console.print(f"  Emojis found: {format_emoji_list(result.emojis_found)}")
            if result.modified:
                verb = "Would reduce size" if dry_run else "Size changed"
                console.print(f"  {verb}: {result.original_size} → {result.new_size} bytes")
            console.print()

        total_emojis = count_emojis(results)
        if dry_run:
            console.print(
                f"Total: Would remove {total_emojis} emoji(s) from {total_files} file(s)"
            )
            console.print("Run with --no-dry-run to actually remove emojis.")
        else:
            console.print(f"Total: Removed {total_emojis} emoji(s) from {total_files} file(s)")

    def show_file_list(self, results: Sequence[ProcessResult]) -> None:
        """Print one matching path per line."""

        for result in results:
            _write_verbatim(self.console, result.file_path + "\n")

    def show_no_results(self) -> None:
        self.console.print("No emojis found in any files.")

    def show_warnings(self, warnings: Sequence[str]) -> None:
        """Print per-path warnings to stderr."""

        for warning in warnings:
            _write_verbatim(self.error_console, f"Warning: {warning}\n")

    def emit_content(self, content: str) -> None:
        """Write cleaned piped content to stdout exactly, without a newline."""

        _write_verbatim(self.console, content)


__all__ = ["ResultDisplay"]

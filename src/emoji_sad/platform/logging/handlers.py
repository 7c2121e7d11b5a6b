"""Rich console handler with styling for structured scan events.

Where: platform/logging/handlers.py
What: Render ``processing_event`` log records with icons, colours and compact paths.
Why: Keep handler formatting separate from logger bootstrap.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class ScanRichHandler(RichHandler):
    """Rich handler that renders scan events with compact, coloured paths."""

    # Plain ASCII markers: a tool that strips emojis should not print them.
    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "scan.tree.start": (">>", "cyan"),
        "scan.tree.complete": ("ok", "green"),
        "scan.tree.error": ("!!", "red"),
        "scan.file.skip.excluded": ("--", "yellow"),
        "scan.file.skip.ineligible": ("--", "yellow"),
        "scan.file.skip.vcs": ("--", "yellow"),
        "scan.file.clean": ("..", "blue"),
        "scan.file.emojis": ("**", "magenta"),
        "scan.file.rewritten": ("=>", "green"),
        "scan.file.error": ("!!", "red"),
        "scan.path.missing": ("??", "yellow"),
    }
    _EVENT_PREFIXES: ClassVar[dict[str, str]] = {
        "scan.file.skip.excluded": "Excluded ",
        "scan.file.skip.ineligible": "Skipped ",
        "scan.file.skip.vcs": "Skipped VCS ",
        "scan.file.clean": "Clean ",
        "scan.file.emojis": "Emojis in ",
        "scan.file.rewritten": "Rewrote ",
        "scan.file.error": "Failed ",
        "scan.path.missing": "Missing ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path with coloured separators and leading-segment truncation."""

        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display = ""
        if truncated:
            display = "…" + separator
        elif anchor:
            display = anchor.rstrip("\\/") + separator
        display += separator.join(body_parts)
        if not display:
            display = "."

        text = Text()
        for char in display:
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _render_scan_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured scan events with dedicated styling."""

        event = getattr(record, "processing_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("--", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        if event.startswith("scan.tree"):
            directory = getattr(record, "directory", None)
            if event == "scan.tree.start":
                _ = body.append("Scan start")
                if getattr(record, "dry_run", False):
                    _ = body.append(" [dry-run]")
            elif event == "scan.tree.complete":
                _ = body.append("Scan complete")
                metrics: list[str] = []
                for key in ("scanned", "skipped", "reported"):
                    value = getattr(record, key, None)
                    if isinstance(value, int):
                        metrics.append(f"{key}={value}")
                duration = getattr(record, "duration_seconds", None)
                if isinstance(duration, (int, float)):
                    metrics.append(f"duration={duration:.2f}s")
                if metrics:
                    _ = body.append(" [" + ", ".join(metrics) + "]")
            else:
                _ = body.append("Scan error")
            if directory:
                _ = body.append(" @ ")
                _ = body.append_text(self._format_path(str(directory)))
        else:
            prefix = self._EVENT_PREFIXES.get(event)
            if prefix:
                _ = body.append(prefix)
            source_path = getattr(record, "source_path", None)
            if source_path:
                _ = body.append_text(self._format_path(str(source_path)))

            details: list[str] = []
            if event == "scan.file.emojis":
                count = getattr(record, "emoji_count", None)
                if isinstance(count, int):
                    details.append(f"{count} distinct")
            elif event == "scan.file.rewritten":
                original = getattr(record, "original_size", None)
                new = getattr(record, "new_size", None)
                if isinstance(original, int) and isinstance(new, int):
                    details.append(f"{original} -> {new} bytes")
            if event == "scan.file.error":
                error_message = getattr(record, "error_message", None)
                if error_message:
                    details.append(str(error_message))
            if details:
                _ = body.append(" (" + ", ".join(details) + ")")

        if event == "scan.tree.error":
            error_message = getattr(record, "error_message", None)
            if error_message:
                _ = body.append(f" ({error_message})")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for scan events."""

        scan_text = self._render_scan_message(record)
        if scan_text is not None:
            return scan_text
        return super().render_message(record, message)


__all__ = ["ScanRichHandler"]

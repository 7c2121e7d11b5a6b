"""Tests for the plain text result display."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from emoji_sad.features.emoji import ProcessResult
from emoji_sad.ui.cli.display.result import ResultDisplay
from emoji_sad.ui.cli.display.summary import count_emojis, format_emoji_list


def _console(buffer: io.StringIO) -> Console:
    return Console(
        file=buffer, width=200, markup=False, highlight=False, emoji=False, soft_wrap=True
    )


@pytest.fixture
def streams() -> tuple[io.StringIO, io.StringIO]:
    return io.StringIO(), io.StringIO()


@pytest.fixture
def display(streams: tuple[io.StringIO, io.StringIO]) -> ResultDisplay:
    out, err = streams
    result_display = ResultDisplay()
    result_display.console = _console(out)
    result_display.error_console = _console(err)
    return result_display


RESULTS = [
    ProcessResult("a.txt", ["😊"], 7, 3, True),
    ProcessResult("docs/b.md", ["🚀", "✅"], 20, 13, True),
]


def test_dry_run_report(display: ResultDisplay, streams: tuple[io.StringIO, io.StringIO]) -> None:
    out, err = streams

    display.show_report(RESULTS, dry_run=True)

    assert out.getvalue().splitlines() == [
        "DRY RUN: Found emojis in 2 file(s):",
        "",
        "File: a.txt",
        "  Emojis found: [😊]",
        "  Would reduce size: 7 → 3 bytes",
        "",
        "File: docs/b.md",
        "  Emojis found: [🚀 ✅]",
        "  Would reduce size: 20 → 13 bytes",
        "",
        "Total: Would remove 3 emoji(s) from 2 file(s)",
        "Run with --no-dry-run to actually remove emojis.",
    ]
    assert err.getvalue() == ""


def test_processed_report(display: ResultDisplay, streams: tuple[io.StringIO, io.StringIO]) -> None:
    out, _ = streams

    display.show_report(RESULTS[:1], dry_run=False)

    lines = out.getvalue().splitlines()
    assert lines[0] == "Processed 1 file(s) and removed emojis:"
    assert "  Size changed: 7 → 3 bytes" in lines
    assert lines[-1] == "Total: Removed 1 emoji(s) from 1 file(s)"
    assert "Run with --no-dry-run" not in out.getvalue()


def test_report_can_go_to_stderr(display: ResultDisplay, streams: tuple[io.StringIO, io.StringIO]) -> None:
    out, err = streams

    display.show_report(RESULTS[:1], dry_run=True, to_stderr=True)

    assert out.getvalue() == ""
    assert err.getvalue().startswith("DRY RUN: Found emojis in 1 file(s):")


def test_file_list(display: ResultDisplay, streams: tuple[io.StringIO, io.StringIO]) -> None:
    out, _ = streams

    display.show_file_list(RESULTS)

    assert out.getvalue() == "a.txt\ndocs/b.md\n"


def test_no_results_message(display: ResultDisplay, streams: tuple[io.StringIO, io.StringIO]) -> None:
    out, _ = streams

    display.show_no_results()

    assert out.getvalue() == "No emojis found in any files.\n"


def test_warnings_go_to_stderr(display: ResultDisplay, streams: tuple[io.StringIO, io.StringIO]) -> None:
    out, err = streams

    display.show_warnings(["file does not exist: x.txt", "failed to process y: boom"])

    assert out.getvalue() == ""
    assert err.getvalue().splitlines() == [
        "Warning: file does not exist: x.txt",
        "Warning: failed to process y: boom",
    ]


def test_markup_in_paths_is_printed_verbatim(
    display: ResultDisplay, streams: tuple[io.StringIO, io.StringIO]
) -> None:
    out, _ = streams

    display.show_file_list([ProcessResult("[bold]x[/bold]:smile:.txt", ["😊"], 4, 0, True)])

    assert out.getvalue() == "[bold]x[/bold]:smile:.txt\n"


def test_emit_content_writes_text_without_newline(
    display: ResultDisplay, streams: tuple[io.StringIO, io.StringIO]
) -> None:
    out, _ = streams

    display.emit_content("Hi \nthere")

    assert out.getvalue() == "Hi \nthere"


def test_emit_content_writes_bytes_when_possible(display: ResultDisplay) -> None:
    raw = io.BytesIO()
    wrapper = io.TextIOWrapper(raw, encoding="utf-8")
    display.console = _console(io.StringIO())
    display.console.file = wrapper

    display.emit_content("café \udcff")

    assert raw.getvalue() == b"caf\xc3\xa9 \xff"


def test_summary_helpers() -> None:
    assert count_emojis(RESULTS) == 3
    assert count_emojis([]) == 0
    assert format_emoji_list(["😊", "🚀"]) == "[😊 🚀]"
    assert format_emoji_list([]) == "[]"


def test_file_list_keeps_tabs_and_control_characters(
    display: ResultDisplay, streams: tuple[io.StringIO, io.StringIO]
) -> None:
    out, _ = streams

    display.show_file_list(
        [
            ProcessResult("d/a\tb.txt", ["😊"], 8, 4, True),
            ProcessResult("d/c\rd\x0be.txt", ["😊"], 8, 4, True),
        ]
    )

    assert out.getvalue() == "d/a\tb.txt\nd/c\rd\x0be.txt\n"


def test_report_file_lines_keep_tabs(display: ResultDisplay, streams: tuple[io.StringIO, io.StringIO]) -> None:
    out, _ = streams

    display.show_report([ProcessResult("d/a\tb.txt", ["😊"], 8, 4, True)], dry_run=True)

    lines = out.getvalue().splitlines()
    assert lines[2] == "File: d/a\tb.txt"
    assert lines[3] == "  Emojis found: [😊]"


def test_warnings_keep_tabs(display: ResultDisplay, streams: tuple[io.StringIO, io.StringIO]) -> None:
    _, err = streams

    display.show_warnings(["file does not exist: x\ty.txt"])

    assert err.getvalue() == "Warning: file does not exist: x\ty.txt\n"

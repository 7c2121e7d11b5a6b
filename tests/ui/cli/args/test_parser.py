"""Tests for command line argument parser."""

import logging
from argparse import Namespace
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from emoji_sad.features.emoji import AllowFileError
from emoji_sad.platform.logging import DEFAULT_LOG_FILE
from emoji_sad.ui.cli.args import ArgumentParser, ScanArgs
from emoji_sad.ui.cli.args.parser import split_patterns


@pytest.fixture()
def mock_config(mocker: MockerFixture) -> MagicMock:
    """Replace configuration loading with an empty configuration."""

    config = mocker.patch("emoji_sad.ui.cli.args.parser.Config")
    loaded = config.load.return_value
    loaded.log_file = None
    loaded.allow_file = None
    loaded.exclude = []
    loaded.output = "text"
    return config


@pytest.fixture()
def mock_setup_logger(mocker: MockerFixture) -> MagicMock:
    return mocker.patch("emoji_sad.ui.cli.args.parser.setup_logger")


def test_create_parser() -> None:
    """Argument parser should expose the target and every option."""

    parser = ArgumentParser.create_parser()

    defaults: Namespace = parser.parse_args(["src"])
    assert defaults.target == "src"
    assert not defaults.no_dry_run and not defaults.list_only
    assert defaults.exclude is None and defaults.output is None

    all_flags = parser.parse_args(
        [
            "-",
            "--no-dry-run",
            "-l",
            "--exclude",
            "dist",
            "-o",
            "json",
            "--files-from-stdin",
            "-q",
            "-a",
            "allow.txt",
            "--verbose",
        ]
    )
    assert all_flags.no_dry_run and all_flags.list_only and all_flags.files_from_stdin
    assert all_flags.quiet and all_flags.verbose
    assert all_flags.exclude == ["dist"]
    assert all_flags.output == "json"
    assert all_flags.allow_file == "allow.txt"


def test_invalid_output_format_exits() -> None:
    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.create_parser().parse_args([".", "--output", "yaml"])

    assert excinfo.value.code == 2


def test_missing_target_exits() -> None:
    with pytest.raises(SystemExit):
        _ = ArgumentParser.create_parser().parse_args([])


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.create_parser().parse_args(["--version"])

    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == "emoji-sad 0.1.5"


def test_process_args_defaults(
    workdir: Path, mock_config: MagicMock, mock_setup_logger: MagicMock
) -> None:
    """A bare target previews with text output and warning-level console logs."""

    args = ArgumentParser.process_args(["."])

    assert args == ScanArgs(
        target=".",
        dry_run=True,
        list_only=False,
        excludes=(),
        output="text",
        files_from_stdin=False,
        quiet=False,
        verbose=False,
        allowed=(),
    )
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.WARNING
    assert mock_setup_logger.call_args.kwargs["log_file"] == DEFAULT_LOG_FILE
    mock_config.load.assert_called_once()


@pytest.mark.parametrize(
    ("flags", "level"),
    [
        (["-q"], logging.ERROR),
        (["--verbose"], logging.DEBUG),
        (["-q", "--verbose"], logging.ERROR),
    ],
)
def test_process_args_log_levels(
    workdir: Path,
    mock_config: MagicMock,
    mock_setup_logger: MagicMock,
    flags: list[str],
    level: int,
) -> None:
    _ = ArgumentParser.process_args([".", *flags])

    assert mock_setup_logger.call_args.kwargs["console_level"] == level


def test_process_args_merges_config_and_cli_excludes(
    workdir: Path, mock_config: MagicMock, mock_setup_logger: MagicMock
) -> None:
    mock_config.load.return_value.exclude = ["vendor"]

    args = ArgumentParser.process_args(
        [".", "--exclude", "node_modules,*.min.js", "--exclude", " dist "]
    )

    assert args.excludes == ("vendor", "node_modules", "*.min.js", "dist")


def test_process_args_output_falls_back_to_config(
    workdir: Path, mock_config: MagicMock, mock_setup_logger: MagicMock
) -> None:
    mock_config.load.return_value.output = "json"

    assert ArgumentParser.process_args(["."]).output == "json"
    assert ArgumentParser.process_args([".", "-o", "text"]).output == "text"


def test_process_args_uses_configured_log_file(
    workdir: Path, mock_config: MagicMock, mock_setup_logger: MagicMock
) -> None:
    log_file = workdir / "scan.log"
    mock_config.load.return_value.log_file = log_file

    _ = ArgumentParser.process_args(["."])

    assert mock_setup_logger.call_args.kwargs["log_file"] == log_file


def test_process_args_stdin_modes(
    workdir: Path, mock_config: MagicMock, mock_setup_logger: MagicMock
) -> None:
    content = ArgumentParser.process_args(["-", "--no-dry-run"])
    paths = ArgumentParser.process_args(["-", "--files-from-stdin"])

    assert content.is_stdin_content and not content.dry_run
    assert not paths.is_stdin_content and paths.files_from_stdin


def test_process_args_reads_default_allow_file(
    workdir: Path, mock_config: MagicMock, mock_setup_logger: MagicMock
) -> None:
    _ = (workdir / ".emoji-sad-allow").write_text("✅\n# note\n⭐\n", encoding="utf-8")

    assert ArgumentParser.process_args(["."]).allowed == ("✅", "⭐")


def test_process_args_explicit_allow_file(
    workdir: Path, mock_config: MagicMock, mock_setup_logger: MagicMock
) -> None:
    _ = (workdir / ".emoji-sad-allow").write_text("✅\n", encoding="utf-8")
    _ = (workdir / "custom.txt").write_text("☀\n", encoding="utf-8")

    assert ArgumentParser.process_args([".", "-a", "custom.txt"]).allowed == ("☀",)


def test_process_args_missing_allow_file(
    workdir: Path, mock_config: MagicMock, mock_setup_logger: MagicMock
) -> None:
    with pytest.raises(AllowFileError):
        _ = ArgumentParser.process_args([".", "--allow-file", "absent.txt"])


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        (None, []),
        (["a"], ["a"]),
        (["a,b", "c"], ["a", "b", "c"]),
        ([" a , ,b "], ["a", "b"]),
    ],
)
def test_split_patterns(values: list[str] | None, expected: list[str]) -> None:
    assert split_patterns(values) == expected


def test_files_from_stdin_help_mentions_skipped_files() -> None:
    help_text = ArgumentParser.create_parser().format_help()

    assert "ineligible" in help_text


def test_args_module_exports_only_scan_types() -> None:
    from emoji_sad.ui.cli.args import options

    assert options.__all__ == ["OutputFormat", "ScanArgs"]
    assert not hasattr(options, "CLIArgs")

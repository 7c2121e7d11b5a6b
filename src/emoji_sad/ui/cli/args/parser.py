"""Command line argument parser."""

import argparse
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import cast, final

from emoji_sad import __version__
from emoji_sad.config.allow_list import resolve_allowed
from emoji_sad.config.config import OUTPUT_FORMATS, Config
from emoji_sad.platform.logging import DEFAULT_LOG_FILE, setup_logger
from emoji_sad.ui.cli.args.options import OutputFormat, ScanArgs

_EPILOG = """\
Examples:
  # Preview emoji removal from current directory (dry-run)
  emoji-sad .

  # Actually remove emojis from a specific directory
  emoji-sad --no-dry-run /path/to/project

  # Only list files containing emojis
  emoji-sad -l /path/to/project

  # Process content from stdin directly
  cat file.txt | emoji-sad --no-dry-run -

  # Process file paths from stdin
  find . -name "*.txt" | emoji-sad --files-from-stdin -

  # Exclude specific files or directories
  emoji-sad . --exclude node_modules --exclude "*.test.js"

  # Output results in JSON format
  emoji-sad . --output json
"""


def split_patterns(values: Iterable[str] | None) -> list[str]:
    """Flatten repeated and comma-separated ``--exclude`` values."""

    patterns: list[str] = []
    for value in values or ():
        patterns.extend(part.strip() for part in value.split(",") if part.strip())
    return patterns


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="emoji-sad",
            description=(
                "Emoji Search and Destroy - find and remove emojis from all files "
                "in a directory, a single file, a list of files or piped content. "
                "Runs as a dry run unless --no-dry-run is given."
            ),
            epilog=_EPILOG,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "target",
            type=str,
            help="Directory or file to process, or '-' to read from stdin",
            metavar="TARGET",
        )
        _ = parser.add_argument(
            "--no-dry-run",
            action="store_true",
            help="Actually modify files instead of previewing",
        )
        _ = parser.add_argument(
            "-l",
            "--list-only",
            action="store_true",
            help="Only list files containing emojis, one per line",
        )
        _ = parser.add_argument(
            "--exclude",
            action="append",
            metavar="PATTERN",
            help="Exclude files or directories matching PATTERN (repeatable, comma-separated)",
        )
        _ = parser.add_argument(
            "-o",
            "--output",
            choices=OUTPUT_FORMATS,
            default=None,
            help="Output format: text or json (default: text)",
        )
        _ = parser.add_argument(
            "--files-from-stdin",
            action="store_true",
            help=(
                "Read file paths from stdin instead of processing stdin content directly; "
                "listed files that are excluded or ineligible (binary extension, symlink) "
                "are skipped"
            ),
        )
        _ = parser.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            help="Suppress processing reports (only output cleaned content for stdin)",
        )
        _ = parser.add_argument(
            "-a",
            "--allow-file",
            type=str,
            metavar="FILE",
            help="File containing allowed emojis, one per line (default: .emoji-sad-allow if it exists)",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = parser.add_argument(
            "--version",
            action="version",
            version=f"emoji-sad {__version__}",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> ScanArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            ScanArgs: Processed command line arguments.

        Raises:
            SystemExit: On unknown flags or invalid choices.
            ConfigError: The configuration file is invalid.
            AllowFileError: The allow list file cannot be read.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(parsed_args.quiet)
        is_verbose = bool(parsed_args.verbose)

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.WARNING

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        output = cast(OutputFormat, parsed_args.output or configuration.output)
        excludes = [*configuration.exclude, *split_patterns(parsed_args.exclude)]
        allowed = resolve_allowed(
            parsed_args.allow_file,
            configured=configuration.allow_file,
            cwd=Path.cwd(),
        )

        return ScanArgs(
            target=parsed_args.target,
            dry_run=not parsed_args.no_dry_run,
            list_only=parsed_args.list_only,
            excludes=tuple(excludes),
            output=output,
            files_from_stdin=parsed_args.files_from_stdin,
            quiet=is_quiet,
            verbose=is_verbose,
            allowed=tuple(allowed),
        )

"""Command line interface for emoji-sad."""

import sys
from collections.abc import Sequence
from typing import BinaryIO, final

from emoji_sad.config.settings import STDIN_MARKER
from emoji_sad.features.emoji import EmojiSadError
from emoji_sad.platform.logging import logger
from emoji_sad.ui.cli.args import ArgumentParser
from emoji_sad.ui.cli.args.options import ScanArgs
from emoji_sad.ui.cli.commands import (
    CommandExecutor,
    PathListCommand,
    StdinContentCommand,
    TreeCommand,
)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def build_command(args: ScanArgs, stdin: BinaryIO | None = None) -> CommandExecutor:
        """Pick the executor matching the target and stdin flags."""

        if args.target != STDIN_MARKER:
            return TreeCommand(args)
        if args.files_from_stdin:
            return PathListCommand(args, stdin=stdin)
        return StdinContentCommand(args, stdin=stdin)

    @staticmethod
    def process_command(
        args_list: Sequence[str] | None = None,
        stdin: BinaryIO | None = None,
    ) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
            stdin: Binary stream to read instead of ``sys.stdin`` (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            _ = CommandProcessor.build_command(args, stdin).execute()
            return

        except KeyboardInterrupt:
            logger.warning("Operation cancelled by user")
            sys.exit(130)
        except EmojiSadError as e:
            logger.error("%s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing, so this return is only
        reached when processing completes successfully.
    """
    CommandProcessor.process_command()
    return 0

"""src/emoji_sad/ui/cli/commands/tree.py
What: Execute scans of a directory tree or a single file via the CLI.
Why: Bridge parsed arguments with the scan service for path targets.
"""

from typing import override

from emoji_sad.application.services import ScanOutcome
from emoji_sad.ui.cli.commands.executor import CommandExecutor


class TreeCommand(CommandExecutor):
    """Command for processing a directory or a single file."""

    @override
    def execute(self) -> ScanOutcome:
        """Execute the tree scan command.

        Returns:
            The scan outcome.
        """
        outcome = self.scan()
        self.display_results(outcome)
        return outcome

"""src/emoji_sad/ui/cli/commands/path_list.py
What: Execute scans of file paths piped on stdin.
Why: Per-path failures are warnings, so the report still covers the rest.
"""

from typing import override

from emoji_sad.application.services import ScanOutcome
from emoji_sad.ui.cli.commands.executor import CommandExecutor


class PathListCommand(CommandExecutor):
    """Command for processing newline-separated paths read from stdin."""

    @override
    def execute(self) -> ScanOutcome:
        """Execute the path list command.

        Returns:
            The scan outcome, including any per-path warnings.
        """
        outcome = self.scan()
        self.result_display.show_warnings(outcome.warnings)
        self.display_results(outcome)
        return outcome

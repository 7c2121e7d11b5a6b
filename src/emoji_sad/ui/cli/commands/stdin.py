"""src/emoji_sad/ui/cli/commands/stdin.py
What: Execute scans of literal text piped on stdin.
Why: Cleaned text owns stdout, so the text report moves to stderr.
"""

from typing import override

from emoji_sad.application.services import ScanOutcome
from emoji_sad.ui.cli.commands.executor import CommandExecutor


class StdinContentCommand(CommandExecutor):
    """Command for cleaning piped content without touching any file."""

    @override
    def execute(self) -> ScanOutcome:
        """Execute the stdin content command.

        Returns:
            The scan outcome; ``cleaned_content`` is set unless previewing.
        """
        outcome = self.scan()

        if outcome.cleaned_content is not None:
            self.result_display.emit_content(outcome.cleaned_content)

        if self.args.output == "json":
            self.json_display.show(outcome.results, dry_run=self.args.dry_run, list_only=False)
            return outcome

        if self.args.quiet or not outcome.results:
            return outcome

        self.result_display.show_report(outcome.results, dry_run=self.args.dry_run, to_stderr=True)
        return outcome

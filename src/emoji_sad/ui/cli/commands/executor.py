"""src/emoji_sad/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse orchestration and presentation helpers across input modes.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO

from emoji_sad.application.services import ScanEmojiService, ScanOutcome, ScanRequest
from emoji_sad.ui.cli.args.options import ScanArgs
from emoji_sad.ui.cli.display.json_output import JsonDisplay
from emoji_sad.ui.cli.display.result import ResultDisplay


class CommandExecutor(ABC):
    """Base class for command execution."""

    args: ScanArgs
    app: ScanEmojiService
    request: ScanRequest
    result_display: ResultDisplay
    json_display: JsonDisplay

    def __init__(
        self,
        args: ScanArgs,
        *,
        app: ScanEmojiService | None = None,
        stdin: BinaryIO | None = None,
    ) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            app: Scan service; a default one is built when omitted.
            stdin: Binary stream read when the target is ``-``.
        """
        self.args = args
        self.app = app or ScanEmojiService()
        self.request = ScanRequest(
            target=args.target,
            preview_only=args.dry_run,
            excludes=args.excludes,
            allowed=args.allowed,
            files_from_stdin=args.files_from_stdin,
            list_only=args.list_only,
        )
        self.stdin = stdin
        self.result_display = ResultDisplay()
        self.json_display = JsonDisplay()

    @abstractmethod
    def execute(self) -> ScanOutcome:
        """Execute the command.

        Returns:
            The scan outcome that was displayed.
        """
        pass

    def scan(self) -> ScanOutcome:
        return self.app.run(self.request, self.stdin)

    def display_results(self, outcome: ScanOutcome) -> None:
        """Display results for directory, file and path-list scans."""

        results = outcome.results
        if self.args.output == "json":
            self.json_display.show(
                results,
                dry_run=self.args.dry_run,
                list_only=self.args.list_only,
            )
            return

        if self.args.quiet and not self.args.list_only:
            return

        if not results:
            if not self.args.list_only:
                self.result_display.show_no_results()
            return

        if self.args.list_only:
            self.result_display.show_file_list(results)
            return

        self.result_display.show_report(results, dry_run=self.args.dry_run)

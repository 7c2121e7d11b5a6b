"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final

from emoji_sad.config.settings import STDIN_MARKER

OutputFormat = Literal["text", "json"]


@final
@dataclass(slots=True)
class ScanArgs:
    """Processed command line arguments for a scan."""

    target: str
    dry_run: bool
    list_only: bool
    excludes: tuple[str, ...]
    output: OutputFormat
    files_from_stdin: bool
    quiet: bool
    verbose: bool
    allowed: tuple[str, ...]

    @property
    def is_stdin_content(self) -> bool:
        """Whether stdin carries text to clean rather than file paths."""

        return self.target == STDIN_MARKER and not self.files_from_stdin


__all__ = ["OutputFormat", "ScanArgs"]

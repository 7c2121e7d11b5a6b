"""Display management for CLI interface."""

from emoji_sad.ui.cli.display.json_output import JsonDisplay
from emoji_sad.ui.cli.display.result import ResultDisplay

__all__ = ["JsonDisplay", "ResultDisplay"]

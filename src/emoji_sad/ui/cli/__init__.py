"""Command line interface for emoji-sad."""

from emoji_sad.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]

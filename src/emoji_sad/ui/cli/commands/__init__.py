"""Command execution package for CLI."""

from emoji_sad.ui.cli.commands.executor import CommandExecutor
from emoji_sad.ui.cli.commands.path_list import PathListCommand
from emoji_sad.ui.cli.commands.stdin import StdinContentCommand
from emoji_sad.ui.cli.commands.tree import TreeCommand

__all__ = [
    "CommandExecutor",
    "PathListCommand",
    "StdinContentCommand",
    "TreeCommand",
]

"""Command line argument handling package."""

from emoji_sad.ui.cli.args.parser import ArgumentParser
from emoji_sad.ui.cli.args.options import OutputFormat, ScanArgs

__all__ = ["ArgumentParser", "OutputFormat", "ScanArgs"]

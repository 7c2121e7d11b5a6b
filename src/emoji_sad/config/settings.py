"""Where: src/emoji_sad/config/settings.py
What: Runtime constants shared by the command layer.
Why: Keep magic strings for stdin handling and output modes in one place.
"""

from __future__ import annotations

from typing import Final

from emoji_sad.config.config import OUTPUT_FORMATS

# Target argument meaning "read from standard input".
STDIN_MARKER: Final[str] = "-"

# File identifier reported for literal piped content.
STDIN_FILE_ID: Final[str] = "<stdin>"

# JSON summary mode tags.
MODE_LIST: Final[str] = "list"
MODE_PROCESS: Final[str] = "process"


__all__ = [
    "MODE_LIST",
    "MODE_PROCESS",
    "OUTPUT_FORMATS",
    "STDIN_FILE_ID",
    "STDIN_MARKER",
]

# Where: emoji_sad.features.emoji.__init__
# What: Expose the detector, tree processor and shared dataclasses.
# Why: Provide a cohesive import surface for UI and application layers.

from .domain import DEFAULT_RANGES, CodepointRange, Detector
from .usecases import (
    AllowFileError,
    ConfigError,
    EmojiSadError,
    ProcessResult,
    ProcessingEvent,
    ReadError,
    TreeProcessor,
    WalkError,
    WriteError,
)

__all__ = [
    "AllowFileError",
    "CodepointRange",
    "ConfigError",
    "DEFAULT_RANGES",
    "Detector",
    "EmojiSadError",
    "ProcessResult",
    "ProcessingEvent",
    "ReadError",
    "TreeProcessor",
    "WalkError",
    "WriteError",
]

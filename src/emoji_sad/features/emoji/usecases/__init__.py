"""Use cases for scanning files and trees for emojis."""

from .eligibility import SKIP_EXTENSIONS, VCS_DIRECTORY_NAMES, is_vcs_path, should_skip
from .errors import (
    AllowFileError,
    ConfigError,
    EmojiSadError,
    ReadError,
    WalkError,
    WriteError,
)
from .exclusion import is_excluded, matches_exclusion
from .ports import FileStorePort
from .processing_types import ProcessResult, ProcessingEvent, WalkStats
from .tree_processor import TreeProcessor

__all__ = [
    "AllowFileError",
    "ConfigError",
    "EmojiSadError",
    "FileStorePort",
    "ProcessResult",
    "ProcessingEvent",
    "ReadError",
    "SKIP_EXTENSIONS",
    "TreeProcessor",
    "VCS_DIRECTORY_NAMES",
    "WalkError",
    "WalkStats",
    "WriteError",
    "is_excluded",
    "is_vcs_path",
    "matches_exclusion",
    "should_skip",
]

"""Application services shared by the user interfaces."""

from .scan_service import ScanEmojiService, ScanOutcome, ScanRequest

__all__ = ["ScanEmojiService", "ScanOutcome", "ScanRequest"]

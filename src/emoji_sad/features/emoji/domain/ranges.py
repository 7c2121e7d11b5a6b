"""src/emoji_sad/features/emoji/domain/ranges.py
What: Code point intervals that classify a character as an emoji.
Why: Keep the emoji table as immutable data a detector can own.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class CodepointRange:
    """Closed interval ``[low, high]`` of Unicode code points."""

    low: int
    high: int
    label: str = ""

    def contains(self, code_point: int) -> bool:
        """Return whether ``code_point`` falls inside the interval."""

        return self.low <= code_point <= self.high


DEFAULT_RANGES: Final[tuple[CodepointRange, ...]] = (
    CodepointRange(0x1F600, 0x1F64F, "Emoticons"),
    CodepointRange(0x1F300, 0x1F5FF, "Miscellaneous Symbols and Pictographs"),
    CodepointRange(0x1F680, 0x1F6FF, "Transport and Map Symbols"),
    CodepointRange(0x1F1E0, 0x1F1FF, "Regional Indicator Symbols"),
    CodepointRange(0x2600, 0x26FF, "Miscellaneous Symbols"),
    CodepointRange(0x2700, 0x27BF, "Dingbats"),
    CodepointRange(0x1F900, 0x1F9FF, "Supplemental Symbols and Pictographs"),
    CodepointRange(0x1F018, 0x1F0FF, "Mahjong, Domino and Playing Card tail"),
    CodepointRange(0x1FA70, 0x1FA73, "Extended-A: clothing"),
    CodepointRange(0x1FA78, 0x1FA7A, "Extended-A: medical"),
    CodepointRange(0x1FA80, 0x1FA82, "Extended-A: toys"),
    CodepointRange(0x1FA90, 0x1FA95, "Extended-A: objects"),
)


__all__ = ["CodepointRange", "DEFAULT_RANGES"]

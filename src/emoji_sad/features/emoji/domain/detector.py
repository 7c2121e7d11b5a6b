"""src/emoji_sad/features/emoji/domain/detector.py
What: Find and strip emoji code points from text.
Why: One classification pass shared by detection and removal keeps both in step.
Assumptions: - Every emoji is a single code point; clusters are not assembled.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import final

from .ranges import DEFAULT_RANGES, CodepointRange


@final
class Detector:
    """Classify code points against a range table, sparing allowed emojis."""

    __slots__ = ("_allowed", "_floor", "_ranges")

    def __init__(
        self,
        allowed: Iterable[str] = (),
        ranges: Iterable[CodepointRange] = DEFAULT_RANGES,
    ) -> None:
        """Create a detector.

        Args:
            allowed: Exact strings that must never be reported or removed.
            ranges: Code point intervals treated as emoji.
        """
        self._ranges: tuple[CodepointRange, ...] = tuple(ranges)
        self._allowed: frozenset[str] = frozenset(allowed)
        # Lowest code point any range can match; everything below is plain text.
        self._floor: int = min((r.low for r in self._ranges), default=0)

    @classmethod
    def with_allowed(cls, allowed: Iterable[str]) -> Detector:
        """Build a detector on the default table with an allow list."""

        return cls(allowed=allowed)

    @property
    def ranges(self) -> tuple[CodepointRange, ...]:
        return self._ranges

    @property
    def allowed(self) -> frozenset[str]:
        return self._allowed

    def is_emoji(self, char: str) -> bool:
        """Return whether the single character ``char`` lies in any range.

        The allow list is not consulted here.
        """
        code_point = ord(char)
        if code_point < self._floor:
            return False
        return any(r.contains(code_point) for r in self._ranges)

    def _qualifies(self, char: str) -> bool:
        return self.is_emoji(char) and char not in self._allowed

    def find_emojis(self, text: str) -> list[str]:
        """Return distinct non-allowed emojis in order of first appearance."""

        found: dict[str, None] = {}
        for char in text:
            if char not in found and self._qualifies(char):
                found[char] = None
        return list(found)

    def remove_emojis(self, text: str) -> str:
        """Return ``text`` with every non-allowed emoji code point deleted."""

        return "".join(char for char in text if not self._qualifies(char))


__all__ = ["Detector"]

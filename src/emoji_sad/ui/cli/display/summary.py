"""Utilities shared by the text and JSON renderers."""

from __future__ import annotations

from collections.abc import Sequence

from emoji_sad.features.emoji import ProcessResult


def count_emojis(results: Sequence[ProcessResult]) -> int:
    """Sum the distinct emojis of every result."""

    return sum(len(result.emojis_found) for result in results)


def format_emoji_list(emojis: Sequence[str]) -> str:
    """Render emojis as ``[a b c]``."""

    return "[" + " ".join(emojis) + "]"


__all__ = ["count_emojis", "format_emoji_list"]

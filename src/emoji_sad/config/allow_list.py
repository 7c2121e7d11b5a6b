"""Where: src/emoji_sad/config/allow_list.py
What: Load the emojis a run must leave in place.
Why: Allow lists live in plain text files next to the project being scanned.
Assumptions: - One entry per line; blank lines and ``#`` comments are ignored.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from emoji_sad.config.paths import default_allow_file
from emoji_sad.features.emoji.usecases.errors import AllowFileError
from emoji_sad.platform.logging import logger


def parse_allow_entries(lines: Iterable[str]) -> list[str]:
    """Return trimmed entries, skipping blanks and comment lines."""

    entries: list[str] = []
    for line in lines:
        entry = line.strip()
        if entry and not entry.startswith("#"):
            entries.append(entry)
    return entries


def load_allow_file(path: Path | str) -> list[str]:
    """Read allow list entries from ``path``.

    Raises:
        AllowFileError: The file cannot be read or is not UTF-8.
    """
    if not str(path):
        raise AllowFileError(str(path), ValueError("filepath cannot be empty"))

    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise AllowFileError(str(path), exc) from exc

    entries = parse_allow_entries(content.splitlines())
    logger.debug("Loaded %d allowed emoji(s) from %s", len(entries), path)
    return entries


def resolve_allowed(
    explicit: Path | str | None,
    configured: Path | None = None,
    cwd: Path | None = None,
) -> list[str]:
    """Pick the allow list for a run.

    An explicit ``--allow-file`` wins over the configured file, which wins
    over ``.emoji-sad-allow`` in ``cwd``. Only the conventional default may be
    absent; a named file that cannot be read is an error.
    """
    if explicit:
        return load_allow_file(explicit)
    if configured is not None:
        return load_allow_file(configured)

    fallback = default_allow_file(cwd)
    if fallback.is_file():
        return load_allow_file(fallback)
    return []


__all__ = ["load_allow_file", "parse_allow_entries", "resolve_allowed"]

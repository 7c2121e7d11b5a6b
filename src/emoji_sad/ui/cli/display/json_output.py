"""src/emoji_sad/ui/cli/display/json_output.py
What: Render scan results as a JSON document.
Why: Give scripts a stable machine-readable report.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any, final

from rich.console import Console

from emoji_sad.config.settings import MODE_LIST, MODE_PROCESS
from emoji_sad.features.emoji import ProcessResult

from .summary import count_emojis


def build_json_document(
    results: Sequence[ProcessResult],
    *,
    dry_run: bool,
    list_only: bool,
) -> dict[str, Any]:
    """Build the JSON report structure.

    ``new_size`` appears only for modified files; ``files`` is always a list.
    """
    files: list[dict[str, Any]] = []
    for result in results:
        entry: dict[str, Any] = {
            "file_path": result.file_path,
            "emojis_found": list(result.emojis_found),
            "original_size": result.original_size,
        }
        if result.modified and result.new_size is not None:
            entry["new_size"] = result.new_size
        entry["modified"] = result.modified
        files.append(entry)

    return {
        "summary": {
            "total_files": len(results),
            "total_emojis": count_emojis(results),
            "dry_run": dry_run,
            "mode": MODE_LIST if list_only else MODE_PROCESS,
        },
        "files": files,
    }


def render_json(
    results: Sequence[ProcessResult],
    *,
    dry_run: bool,
    list_only: bool,
) -> str:
    """Serialize the JSON report with two-space indentation."""

    document = build_json_document(results, dry_run=dry_run, list_only=list_only)
    return json.dumps(document, indent=2, ensure_ascii=False)


@final
class JsonDisplay:
    """Prints JSON reports to stdout."""

    console: Console

    def __init__(self) -> None:
        self.console = Console(markup=False, highlight=False, emoji=False, soft_wrap=True)

    def show(
        self,
        results: Sequence[ProcessResult],
        *,
        dry_run: bool,
        list_only: bool,
    ) -> None:
        self.console.print(render_json(results, dry_run=dry_run, list_only=list_only))


__all__ = ["JsonDisplay", "build_json_document", "render_json"]

"""Smoke tests for unified entry points.

These tests assert that `python -m emoji_sad` and the console script
both resolve to the CLI's `main` function exposed under `emoji_sad.ui.cli`.
"""

from importlib import import_module

import emoji_sad


def test_module_entry_point_exposes_main() -> None:
    """`python -m emoji_sad` path exposes a `main` callable."""
    m = import_module("emoji_sad.__main__")
    assert hasattr(m, "main")


def test_console_script_target_exposes_main() -> None:
    """Console script points to `emoji_sad.ui.cli:main` and is importable."""
    m = import_module("emoji_sad.ui.cli")
    assert hasattr(m, "main")


def test_version() -> None:
    assert emoji_sad.__version__ == "0.1.5"

"""Shared pytest fixtures for the whole suite."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point configuration at a missing file and forget cached config."""

    from emoji_sad.config.config import Config

    config_path = tmp_path / "no-such-config.toml"
    monkeypatch.setenv("EMOJI_SAD_CONFIG", str(config_path))
    Config.reset()
    try:
        yield config_path
    finally:
        Config.reset()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty working directory."""

    root = tmp_path / "work"
    root.mkdir()
    monkeypatch.chdir(root)
    return root

"""Tests for config and log path resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from emoji_sad.config.paths import (
    ALLOW_FILE_NAME,
    CONFIG_FILE_NAME,
    default_allow_file,
    default_config_path,
    default_log_file,
    resolve_overridable_path,
)


def test_config_path_defaults_to_working_directory(workdir: Path) -> None:
    assert default_config_path(env={}) == (workdir / CONFIG_FILE_NAME).resolve()


def test_config_path_honours_environment(tmp_path: Path) -> None:
    custom = tmp_path / "custom.toml"

    assert default_config_path(env={"EMOJI_SAD_CONFIG": str(custom)}) == custom.resolve()


def test_blank_environment_value_is_ignored(workdir: Path) -> None:
    assert default_config_path(env={"EMOJI_SAD_CONFIG": "  "}) == (workdir / CONFIG_FILE_NAME).resolve()


def test_log_file_is_unset_by_default() -> None:
    assert default_log_file(env={}) is None


def test_log_file_from_environment(tmp_path: Path) -> None:
    log = tmp_path / "logs" / "run.log"

    assert default_log_file(env={"EMOJI_SAD_LOG_FILE": str(log)}) == log.resolve()


def test_allow_file_lives_in_given_directory(tmp_path: Path) -> None:
    assert default_allow_file(tmp_path) == tmp_path / ALLOW_FILE_NAME


def test_explicit_path_wins(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SOME_VAR", str(tmp_path / "env"))

    resolved = resolve_overridable_path(
        explicit_path=tmp_path / "explicit",
        env=None,
        env_var="SOME_VAR",
        default_factory=lambda: tmp_path / "default",
    )

    assert resolved == (tmp_path / "explicit").resolve()

"""Tests for the emoji feature import surface."""

from __future__ import annotations

import emoji_sad.features.emoji as feature
from emoji_sad.features.emoji.usecases import errors


def test_public_names_are_exported() -> None:
    for name in feature.__all__:
        assert hasattr(feature, name), name


def test_errors_share_one_base() -> None:
    for error in (
        errors.ReadError,
        errors.WriteError,
        errors.WalkError,
        errors.ConfigError,
        errors.AllowFileError,
    ):
        assert issubclass(error, feature.EmojiSadError)


def test_walk_error_message_names_the_path() -> None:
    error = errors.WalkError("src/a.txt", OSError("boom"))

    assert str(error) == "failed to process src/a.txt: boom"
    assert error.path == "src/a.txt"

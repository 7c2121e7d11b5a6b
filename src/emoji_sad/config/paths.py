"""Shared path utilities for configuration and log locations.

This module centralizes how the application discovers the files it reads
besides the ones it scans.

Policy (working-directory relative by default):
- Config: ``./.emoji-sad.toml`` unless overridden by ``EMOJI_SAD_CONFIG``.
- Allow list: ``./.emoji-sad-allow`` when present.
- Log file: none unless ``EMOJI_SAD_LOG_FILE`` or the config names one, so a
  scan never drops log files into the tree it is scanning.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Final

_ENV_CONFIG_FILE: Final[str] = "EMOJI_SAD_CONFIG"
_ENV_LOG_FILE: Final[str] = "EMOJI_SAD_LOG_FILE"

CONFIG_FILE_NAME: Final[str] = ".emoji-sad.toml"
ALLOW_FILE_NAME: Final[str] = ".emoji-sad-allow"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path | None],
) -> Path | None:
    """Resolve a path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = (mapping.get(env_var) or "").strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve() if default_path is not None else None


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the TOML config file."""

    resolved = resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CONFIG_FILE,
        default_factory=lambda: Path.cwd() / CONFIG_FILE_NAME,
    )
    assert resolved is not None
    return resolved


def default_allow_file(cwd: Path | None = None) -> Path:
    """Get the conventional allow list location in ``cwd``."""

    return (cwd or Path.cwd()) / ALLOW_FILE_NAME


def default_log_file(env: Mapping[str, str] | None = None) -> Path | None:
    """Get the log file requested through the environment, if any."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_LOG_FILE,
        default_factory=lambda: None,
    )


__all__ = [
    "ALLOW_FILE_NAME",
    "CONFIG_FILE_NAME",
    "default_allow_file",
    "default_config_path",
    "default_log_file",
    "resolve_overridable_path",
]

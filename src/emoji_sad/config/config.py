"""Configuration management for emoji-sad."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from emoji_sad.config.paths import default_config_path
from emoji_sad.features.emoji.usecases.errors import ConfigError
from emoji_sad.platform.logging import logger

OUTPUT_FORMATS: tuple[str, ...] = ("text", "json")


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration read from ``.emoji-sad.toml``."""

    # Log file path
    log_file: Path | None = _path_field()

    # Allow list file used instead of ./.emoji-sad-allow
    allow_file: Path | None = _path_field()

    # Exclusion patterns applied before any --exclude given on the command line
    exclude: list[str] = field(default_factory=list)

    # Report format when --output is not given
    output: str = "text"

    _instance: ClassVar[Config | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects and validate field types."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)
            elif value is not None and not isinstance(value, Path):
                raise ConfigError(f"{f.name} must be a string path")

        if not isinstance(self.exclude, list) or not all(
            isinstance(item, str) for item in self.exclude
        ):
            raise ConfigError("exclude must be a list of strings")

        if self.output not in OUTPUT_FORMATS:
            raise ConfigError(
                f"invalid output format: {self.output} (must be 'text' or 'json')"
            )

    @classmethod
    def from_file(cls, config_file: Path) -> Config:
        """Parse ``config_file``; unknown keys are rejected.

        Raises:
            ConfigError: The file is unreadable, not valid TOML or has bad values.
        """
        try:
            with open(config_file, "rb") as f:
                config_dict = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"failed to load configuration {config_file}: {e}") from e

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            raise ConfigError(
                f"unknown configuration keys in {config_file}: {', '.join(unknown)}"
            )

        return cls(**config_dict)

    @classmethod
    def load(cls) -> Config:
        """Load configuration, returning defaults when no file exists.

        The result is cached; ``reset`` clears the cache.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()
        if config_file.is_file():
            instance = cls.from_file(config_file)
            logger.debug("Configuration loaded from %s", config_file)
        else:
            instance = cls()

        cls._instance = instance
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached configuration."""

        cls._instance = None


__all__ = ["Config", "OUTPUT_FORMATS"]

"""Configuration loading utilities for binstring."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigError
from .paths import project_config_path, user_config_dir

CONFIG_ENV = "BINSTRING_CONFIG"

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Logging verbosity level")

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"Unknown log level '{value}'")
        return level


class BinStringConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


DEFAULT_CONFIG = BinStringConfig()

_active = DEFAULT_CONFIG.model_copy(deep=True)


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield Path(explicit)
    env_value = os.getenv(CONFIG_ENV)
    if env_value:
        yield Path(env_value).expanduser()
    yield project_config_path()
    yield user_config_dir() / "config.yaml"


def load_config(path: Optional[Path] = None) -> BinStringConfig:
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                try:
                    data = yaml.safe_load(handle) or {}
                except yaml.YAMLError as exc:
                    raise ConfigError(f"Malformed YAML in {candidate}: {exc}") from exc
            try:
                return BinStringConfig.model_validate(data)
            except ValidationError as exc:
                raise ConfigError(f"Invalid configuration in {candidate}: {exc}") from exc
    return DEFAULT_CONFIG.model_copy(deep=True)


def dump_default_config(target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(DEFAULT_CONFIG.model_dump(mode="json"), handle, sort_keys=False)


def get_config() -> BinStringConfig:
    """Return the active configuration."""
    return _active


def set_config(config: BinStringConfig | None) -> BinStringConfig:
    """Install ``config`` as the active configuration and return the previous one.

    Passing ``None`` restores the defaults.
    """

    global _active
    previous = _active
    _active = config if config is not None else DEFAULT_CONFIG.model_copy(deep=True)
    return previous


__all__ = [
    "BinStringConfig",
    "CONFIG_ENV",
    "DEFAULT_CONFIG",
    "LoggingConfig",
    "config_search_paths",
    "dump_default_config",
    "get_config",
    "load_config",
    "set_config",
]

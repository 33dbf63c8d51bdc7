"""Configuration loading utilities."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .core.exceptions import ConfigError
from .crypto.hasher import SUPPORTED_HASHES, normalise_hash_name
from .paths import runtime_config_dir

CONFIG_ENV = "HASHSIGN_CONFIG"

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Logging verbosity level")

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        if value.upper() not in _LEVELS:
            raise ValueError(f"Unknown log level '{value}'")
        return value

    def normalized_level(self) -> str:
        return self.level.upper()


class CryptoConfig(BaseModel):
    hash_algorithm: str = Field(default="sha256", description="Digest applied before signing")

    @field_validator("hash_algorithm")
    @classmethod
    def _validate_hash(cls, value: str) -> str:
        normalised = normalise_hash_name(value)
        if normalised not in SUPPORTED_HASHES:
            raise ValueError(f"Hash must be one of {', '.join(SUPPORTED_HASHES)}")
        return normalised


class AppConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    crypto: CryptoConfig = Field(default_factory=CryptoConfig)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    env_value = os.getenv(CONFIG_ENV)
    if env_value:
        yield Path(env_value).expanduser()
    yield Path.cwd() / ".hashsign" / "config.yaml"
    yield runtime_config_dir() / "config.yaml"


def load_config(path: Optional[Path] = None) -> AppConfig:
    if path is not None and not Path(path).is_file():
        raise ConfigError(f"Configuration file not found: {path}")
    for candidate in config_search_paths(path):
        if candidate.is_file():
            try:
                with candidate.open("r", encoding="utf-8") as handle:
                    data = yaml.safe_load(handle) or {}
            except yaml.YAMLError as exc:
                raise ConfigError(f"Malformed YAML in {candidate}: {exc}") from exc
            try:
                return AppConfig.model_validate(data)
            except ValidationError as exc:
                raise ConfigError(f"Invalid configuration in {candidate}: {exc}") from exc
    return DEFAULT_CONFIG.model_copy(deep=True)


def dump_default_config(target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(DEFAULT_CONFIG.model_dump(mode="json"), handle, sort_keys=False)


__all__ = [
    "AppConfig",
    "CONFIG_ENV",
    "CryptoConfig",
    "DEFAULT_CONFIG",
    "LoggingConfig",
    "config_search_paths",
    "dump_default_config",
    "load_config",
]

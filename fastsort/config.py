# Copyright Krafter SAS <developer@krafter.io>
# MIT License (see LICENSE file).

import os

from functools import cached_property
from pathlib import Path

from fastsort.logger import LogLevel, LogOutput, LogFormat
from pydantic import field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


def _find_project_path() -> str:
    """Find project root by looking for pyproject.toml in current dir and parents."""
    current = Path.cwd()

    for path in [current] + list(current.parents):
        if (path / "pyproject.toml").exists():
            return str(path)

    return str(current)


class BaseSettings(PydanticBaseSettings):
    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_prefix="",
        extra="ignore",
    )

    # Sort
    sort_parameter: str = "sort"
    sort_property_delimiter: str = ","
    sort_qualifier_delimiter: str = "_"
    sort_fallback: str = ""

    # Logging
    log_level: LogLevel = LogLevel.INFO
    log_output: LogOutput = LogOutput.CONSOLE
    log_format: LogFormat | str = LogFormat.TEXT_LIGHT
    log_file: str = ""

    @classmethod
    def from_env_file(cls, env_file: str):
        """Create Settings with custom env file path."""
        return cls(_env_file=env_file)

    @cached_property
    def project_path(self) -> str:
        return _find_project_path()

    @cached_property
    def log_path(self) -> str:
        if not self.log_file:
            return os.path.join(self.project_path, "logs", "fastsort.log")

        if os.path.isabs(self.log_file):
            return self.log_file

        return os.path.join(self.project_path, self.log_file)

    @field_validator("log_level", mode="before")
    def validate_log_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("log_format")
    def validate_log_format(cls, v):
        if isinstance(v, str) and v in [item.value for item in LogFormat]:
            return LogFormat(v)
        return v

    @field_validator("sort_parameter", "sort_property_delimiter", "sort_qualifier_delimiter")
    def validate_not_empty(cls, v, info):
        if v:
            return v
        raise ValueError(f"{info.field_name.upper()} must not be empty")


_settings: BaseSettings | None = None


def init_settings(env_file: str | None = None) -> BaseSettings:
    global _settings

    _settings = BaseSettings.from_env_file(env_file or ".env")
    _clear_cached_resolver()

    return _settings


def get_settings() -> BaseSettings:
    if _settings is None:
        return init_settings()

    return _settings


def reset_settings() -> None:
    global _settings

    _settings = None
    _clear_cached_resolver()


def _clear_cached_resolver() -> None:
    from fastsort.params.sort import get_sort_resolver

    get_sort_resolver.cache_clear()


__all__ = [
    "BaseSettings",
    "init_settings",
    "get_settings",
    "reset_settings",
]

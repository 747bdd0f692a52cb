# pyright: reportAny=false
"""Configuration models.

This module provides the PhinkConfig Pydantic model and its sections. All
models are frozen; a configuration is built once and shared by every
Repository that uses it.
"""

import os
from enum import StrEnum
from pathlib import Path
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from phink.config._defaults import DEFAULT_CONFIG, DEFAULT_GIT_ENV
from phink.config._loader import ENV_PREFIX, deep_merge, parse_env_vars, read_toml_file
from phink.exceptions import ConfigLoadError


class LogLevel(StrEnum):
    """Log level threshold values.

    Values are ordered from most verbose (debug) to least verbose (error).
    """

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    """Log output format values."""

    JSON = "json"
    TEXT = "text"


class LoggingConfig(BaseModel):
    """Logging configuration section.

    Attributes:
        level: Log level threshold. None defers to PHINK_LOG_LEVEL, then info.
        format: Log output format.
        file: Path to log file (empty routes records to the stdlib logger).
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    level: LogLevel | None = None
    format: LogFormat = LogFormat.JSON
    file: str = ""


class GitIdentity(BaseModel):
    """Author and committer identity passed to every git invocation.

    Attributes:
        name: Value for ``user.name``.
        email: Value for ``user.email``.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(min_length=1)
    email: str = Field(min_length=1)

    def as_git_options(self) -> list[str]:
        """Render the identity as ``-c`` options for the git command line."""
        return ["-c", f"user.name={self.name}", "-c", f"user.email={self.email}"]


class PhinkConfig(BaseModel):
    """Settings shared by every command a Repository runs.

    Attributes:
        git_executable: Name or path of the git binary.
        timeout_ms: Per-invocation timeout in milliseconds, or None to wait
            indefinitely.
        env: Extra environment variables for git processes.
        identity: Optional identity forced onto every invocation.
        options: Extra git configuration passed as ``-c key=value``.
        logging: Logging section.

    Example:
        >>> config = PhinkConfig.load()
        >>> config.git_executable
        'git'
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    git_executable: str = Field(default="git", min_length=1)
    timeout_ms: int | None = Field(default=None, ge=1)
    env: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_GIT_ENV))
    identity: GitIdentity | None = None
    options: dict[str, str] = Field(default_factory=dict)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def git_options(self) -> list[str]:
        """Global options placed between the executable and the subcommand."""
        args = self.identity.as_git_options() if self.identity is not None else []
        for key, value in self.options.items():
            args.extend(["-c", f"{key}={value}"])
        return args

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:  # pyright: ignore[reportExplicitAny]
        """Create configuration from a dictionary merged over the defaults.

        Args:
            data: Dictionary of configuration values.

        Returns:
            Configuration object.

        Raises:
            ConfigLoadError: If the merged values fail validation.
        """
        merged = deep_merge(DEFAULT_CONFIG, data)
        try:
            return cls.model_validate(merged)
        except ValidationError as e:
            msg = f"Invalid configuration: {e}"
            raise ConfigLoadError(msg) from e

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Load configuration from a single TOML file.

        Args:
            path: Path to the TOML config file.

        Returns:
            Configuration object from the file merged over the defaults.

        Raises:
            ConfigLoadError: If the file is missing, or cannot be parsed or
                validated.
        """
        data = read_toml_file(path)
        try:
            return cls.from_dict(data)
        except ConfigLoadError as e:
            raise ConfigLoadError(str(e), path=path) from e.__cause__

    @classmethod
    def load(cls, path: Path | None = None, *, include_env: bool = True) -> Self:
        """Load merged configuration from all sources.

        Sources are merged in precedence order: defaults, then the TOML file,
        then PHINK_* environment variables. When ``path`` is None the file
        named by PHINK_CONFIG_FILE is used, if set.

        Args:
            path: Optional TOML file. It must exist when given explicitly.
            include_env: Include environment variables as a source.

        Returns:
            Merged configuration object.

        Raises:
            ConfigLoadError: If the config file is missing or cannot be
                parsed, or the merged values fail validation.
        """
        if path is None:
            env_path = os.environ.get(f"{ENV_PREFIX}CONFIG_FILE")
            if env_path:
                path = Path(env_path)

        merged: dict[str, Any] = {}  # pyright: ignore[reportExplicitAny]
        if path is not None:
            merged = deep_merge(merged, read_toml_file(path))
        if include_env:
            merged = deep_merge(merged, parse_env_vars())

        try:
            return cls.from_dict(merged)
        except ConfigLoadError as e:
            raise ConfigLoadError(str(e), path=path) from e.__cause__

"""Phink configuration.

This module provides the public API for configuration management:
loading from TOML and the environment, and typed access to values.

Example:
    >>> from phink.config import PhinkConfig
    >>> config = PhinkConfig.load()
    >>> config.git_executable
    'git'
"""

from phink.exceptions import ConfigLoadError

from ._defaults import DEFAULT_CONFIG
from ._loader import (
    deep_merge,
    parse_env_vars,
    parse_string_value,
    read_toml_file,
    set_nested_key,
)
from ._models import GitIdentity, LogFormat, LoggingConfig, LogLevel, PhinkConfig

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigLoadError",
    "GitIdentity",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "PhinkConfig",
    "deep_merge",
    "parse_env_vars",
    "parse_string_value",
    "read_toml_file",
    "set_nested_key",
]

"""Logging utilities for phink.

This module provides standalone structlog logger factories. Each logger is
self-contained and does not modify global structlog configuration. Without
a log file, records are handed to the stdlib ``phink`` logger so the host
application decides where they go.
"""

import functools
import logging
from os import getenv
from pathlib import Path
from typing import TYPE_CHECKING, Literal, cast

import structlog

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

LogFormatType = Literal["json", "text"]

STDLIB_LOGGER_NAME = "phink"

logging.getLogger(STDLIB_LOGGER_NAME).addHandler(logging.NullHandler())


def _get_log_level() -> int:
    """Get the log level from environment variables.

    Checks PHINK_DEBUG first (sets DEBUG if present), then PHINK_LOG_LEVEL.
    Defaults to INFO if neither is set.

    Returns:
        The logging level as an integer.
    """
    if getenv("PHINK_DEBUG", None):
        return logging.DEBUG

    log_levels = logging.getLevelNamesMapping()
    return log_levels.get(getenv("PHINK_LOG_LEVEL", "info").upper(), logging.INFO)


def _log_level_from_string(level: str, *, respect_env: bool = False) -> int:
    """Convert a log level string to a logging level integer.

    Args:
        level: Log level string (debug, info, warning, error).
        respect_env: If True, PHINK_DEBUG overrides to DEBUG level.

    Returns:
        The logging level as an integer.
    """
    if respect_env and getenv("PHINK_DEBUG", None):
        return logging.DEBUG

    log_levels = logging.getLevelNamesMapping()
    return log_levels.get(level.upper(), logging.INFO)


@functools.cache
def create_logger(
    *,
    level: str | None = None,
    log_format: LogFormatType = "json",
    log_file: str = "",
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create a structlog logger for git command activity.

    The log level is determined by (in order of precedence):
    1. PHINK_DEBUG environment variable (if set, enables DEBUG level)
    2. The ``level`` parameter (if provided)
    3. PHINK_LOG_LEVEL environment variable
    4. Default: INFO

    Loggers are cached per argument combination, so repositories sharing a
    configuration share one file handle.

    Args:
        level: Optional log level string (debug, info, warning, error).
        log_format: Output format, either "json" or "text".
        log_file: Path to a log file. Empty routes records to the stdlib
            ``phink`` logger.

    Returns:
        A configured FilteringBoundLogger instance.
    """
    effective_level = (
        _log_level_from_string(level, respect_env=True)
        if level is not None
        else _get_log_level()
    )

    raw_logger: object
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        raw_logger = structlog.WriteLoggerFactory(file=log_path.open("a"))()
    else:
        raw_logger = logging.getLogger(STDLIB_LOGGER_NAME)

    processors: list[structlog.typing.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_format == "json":
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Text format: "timestamp [level] event key=value ..."
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    wrapper_class = structlog.make_filtering_bound_logger(effective_level)

    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            raw_logger,
            processors=processors,
            wrapper_class=wrapper_class,
            context_class=dict,
        ),
    )

# ruff: noqa: TC003  # Path needed at runtime for signatures
"""Phink exceptions.

Every failure surfaced to callers is a PhinkError. The ``kind`` attribute
tags the failure so callers can branch on it without matching on classes:

- ``invalid_state``: the filesystem or command is in a state that forbids
  the operation (missing working directory, non-empty clone target, fluent
  setter called after execution).
- ``invalid_argument``: a required command parameter is empty or malformed.
- ``command_failed``: the git process exited non-zero or could not run.
"""

from collections.abc import Sequence
from enum import StrEnum
from pathlib import Path
from typing import ClassVar


class ErrorKind(StrEnum):
    """Failure categories carried by PhinkError."""

    INVALID_STATE = "invalid_state"
    INVALID_ARGUMENT = "invalid_argument"
    COMMAND_FAILED = "command_failed"


class PhinkError(Exception):
    """Base exception for phink errors.

    Attributes:
        kind: The failure category.
    """

    kind: ClassVar[ErrorKind]


class InvalidStateError(PhinkError):
    """Raised when the repository or command state forbids an operation.

    Attributes:
        path: The directory involved, if any.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_STATE

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        """Initialize with error message and path context.

        Args:
            message: Human-readable error message.
            path: The directory involved, if any.
        """
        super().__init__(message)
        self.path: Path | None = path


class InvalidArgumentError(PhinkError, ValueError):
    """Raised when a command parameter is missing, empty or malformed.

    Attributes:
        argument: Name of the offending parameter.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_ARGUMENT

    def __init__(self, message: str, *, argument: str | None = None) -> None:
        """Initialize with error message and argument context.

        Args:
            message: Human-readable error message.
            argument: Name of the offending parameter.
        """
        super().__init__(message)
        self.argument: str | None = argument


class CommandFailedError(PhinkError):
    """Raised when a git invocation does not complete successfully.

    Attributes:
        argv: The full argument vector that was run.
        exit_code: Process exit code, or None if the process never finished.
        stderr: Captured standard error.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.COMMAND_FAILED

    def __init__(
        self,
        message: str,
        *,
        argv: Sequence[str] = (),
        exit_code: int | None = None,
        stderr: str = "",
    ) -> None:
        """Initialize with error message and process context.

        Args:
            message: Human-readable error message.
            argv: The full argument vector that was run.
            exit_code: Process exit code, or None if the process never finished.
            stderr: Captured standard error.
        """
        super().__init__(message)
        self.argv: tuple[str, ...] = tuple(argv)
        self.exit_code: int | None = exit_code
        self.stderr: str = stderr


class ConfigLoadError(PhinkError):
    """Raised when configuration cannot be loaded, parsed or validated.

    Attributes:
        path: Path to the configuration file, if any.
        line: Line number of a TOML syntax error.
        column: Column number of a TOML syntax error.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_ARGUMENT

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column

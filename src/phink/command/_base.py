"""Base command abstraction.

This module provides the abstract Command class shared by every git
operation. It uses the Template Method pattern: subclasses contribute their
arguments and interpret the process result, while the base class owns
invocation, the executed flag and exit status handling.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Final

from phink.exceptions import CommandFailedError, InvalidArgumentError, InvalidStateError
from phink.process import ProcessResult

if TYPE_CHECKING:
    from phink.repository import Repository

_STDERR_EXCERPT_CHARS: Final = 2000


def require_text(value: str, *, argument: str) -> str:
    """Validate that a string parameter is not empty or blank.

    Args:
        value: The value to validate.
        argument: Parameter name used in the error.

    Returns:
        The value, unchanged.

    Raises:
        InvalidArgumentError: If the value is empty or only whitespace.
    """
    if not isinstance(value, str) or not value.strip():
        msg = f"{argument} must be a non-empty string"
        raise InvalidArgumentError(msg, argument=argument)
    return value


class Command[ResultT](ABC):
    """Abstract base class for a deferred git operation.

    A command is inert until execute() is called. Fluent setters return the
    same instance so configuration can be chained in any order. Once the
    command has been executed, setters raise InvalidStateError; execute()
    itself may be called again and re-runs the operation.

    Type Parameters:
        ResultT: The value returned by execute(). Mutating commands return
            themselves; query commands return structured data.

    Attributes:
        repository: The repository the command runs against.
        executed: Whether execute() has invoked git at least once.
    """

    __slots__: Final = ("_executed", "_repository")
    _repository: "Repository"
    _executed: bool

    def __init__(self, repository: "Repository") -> None:
        self._repository = repository
        self._executed = False

    @property
    def repository(self) -> "Repository":
        return self._repository

    @property
    def executed(self) -> bool:
        return self._executed

    # =========================================================================
    # Template Method hooks
    # =========================================================================

    @abstractmethod
    def _build_args(self) -> list[str]:
        """Return the git arguments, starting with the subcommand.

        Raises:
            InvalidArgumentError: If the configuration is incomplete.
        """

    @abstractmethod
    def _interpret(self, result: ProcessResult) -> ResultT:
        """Turn a successful process result into the command's return value."""

    def _working_directory(self) -> Path:
        """Directory git runs in. Defaults to the repository's directory."""
        return self._repository.cwd

    def _prepare(self) -> None:
        """Filesystem preparation run just before git is invoked."""

    # =========================================================================
    # Execution
    # =========================================================================

    def _ensure_configurable(self) -> None:
        """Fail fast when a setter is called on an executed command.

        Raises:
            InvalidStateError: If the command has already been executed.
        """
        if self._executed:
            msg = (
                f"{type(self).__name__} has already been executed; "
                "create a new command to change its options"
            )
            raise InvalidStateError(msg, path=self._repository.cwd)

    def _run(self) -> ProcessResult:
        """Invoke git and translate failures.

        Returns:
            The successful process result.

        Raises:
            InvalidArgumentError: If the configuration is incomplete.
            CommandFailedError: If git exits non-zero or cannot be run.
        """
        args = self._build_args()
        self._prepare()
        result = self._repository.run_git(args, cwd=self._working_directory())
        self._executed = True

        if result.ok:
            return result

        stderr = result.stderr.strip()
        if result.exit_code is None:
            msg = f"git {args[0]} could not be run: {result.error or 'unknown error'}"
        else:
            msg = f"git {args[0]} failed with exit code {result.exit_code}"
        if stderr:
            msg = f"{msg}: {stderr[:_STDERR_EXCERPT_CHARS]}"
        raise CommandFailedError(
            msg,
            argv=result.argv,
            exit_code=result.exit_code,
            stderr=result.stderr,
        )

    def execute(self) -> ResultT:
        """Run the command.

        Blocks until git exits. Nothing is retried.

        Returns:
            The command's result (see the class's type parameter).

        Raises:
            InvalidArgumentError: If the configuration is incomplete.
            CommandFailedError: If git exits non-zero or cannot be run.
        """
        return self._interpret(self._run())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(cwd={str(self._repository.cwd)!r})"

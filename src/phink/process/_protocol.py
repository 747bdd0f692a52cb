# ruff: noqa: TC003  # Path needed at runtime for Protocol method signatures
"""Process invoker protocol.

This module defines a runtime-checkable Protocol for running external
commands. The real SubprocessInvoker and the FakeInvoker used in tests both
satisfy it, so a Repository can be driven without spawning git.
"""

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from phink.process._models import ProcessResult


@runtime_checkable
class ProcessInvoker(Protocol):
    """Protocol for running one external command to completion.

    Example:
        >>> def git_version(invoker: ProcessInvoker) -> str:
        ...     return invoker.run(Path.cwd(), ["git", "--version"]).stdout
    """

    def run(
        self,
        cwd: Path,
        argv: Sequence[str],
        *,
        env: Mapping[str, str] | None = None,
        timeout_ms: int | None = None,
    ) -> ProcessResult:
        """Run a command and capture its output.

        Implementations must not raise for a non-zero exit status.

        Args:
            cwd: Working directory for the process.
            argv: Executable followed by its arguments.
            env: Extra environment variables layered over the current
                environment.
            timeout_ms: Optional timeout in milliseconds.

        Returns:
            ProcessResult describing the outcome.
        """
        ...

# ruff: noqa: TC003  # Path needed at runtime for dataclass fields
"""Process execution models."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ProcessResult:
    """Outcome of one external process invocation.

    A non-zero exit is a normal result here; interpreting it is the
    caller's job.

    Attributes:
        argv: The argument vector that was run.
        exit_code: Process exit code, or None if the process never finished.
        stdout: Standard output from the process.
        stderr: Standard error from the process.
        error: Error message if the process could not run (timeout,
            executable not found, unusable working directory).
        timed_out: Whether the process was killed by the timeout.
        command_not_found: Whether the executable could not be found.
        stdout_truncated: Whether stdout was cut to the invoker's size limit.
    """

    argv: tuple[str, ...]
    exit_code: int | None = None
    stdout: str = ""
    stderr: str = ""
    error: str | None = None
    timed_out: bool = False
    command_not_found: bool = False
    stdout_truncated: bool = False

    @property
    def ok(self) -> bool:
        """Whether the process ran and exited with status 0."""
        return self.exit_code == 0


@dataclass(frozen=True, slots=True)
class Invocation:
    """A recorded call to a process invoker.

    Attributes:
        cwd: Working directory the process was started in.
        argv: The argument vector.
        env: Extra environment variables passed for the call.
        timeout_ms: Timeout passed for the call.
    """

    cwd: Path
    argv: tuple[str, ...]
    env: dict[str, str] = field(default_factory=dict)
    timeout_ms: int | None = None

    @property
    def subcommand(self) -> str | None:
        """The git subcommand, skipping the executable and global options."""
        return git_subcommand(self.argv)


def git_subcommand(argv: tuple[str, ...] | list[str]) -> str | None:
    """Find the git subcommand in an argument vector.

    Args:
        argv: Full argument vector, starting with the executable.

    Returns:
        The first positional argument after the executable, skipping
        ``-c key=value`` pairs and other global options, or None.

    Example:
        >>> git_subcommand(["git", "-c", "user.name=CI", "status", "-s"])
        'status'
    """
    tokens = iter(argv[1:])
    for token in tokens:
        if token in ("-c", "-C"):
            _ = next(tokens, None)
        elif not token.startswith("-"):
            return token
    return None

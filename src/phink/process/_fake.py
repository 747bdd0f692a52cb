# ruff: noqa: TC003  # Path needed at runtime for method signatures
"""Fake process invoker for testing.

This module provides a FakeInvoker that satisfies ProcessInvoker without
spawning processes. It records every call and replays scripted results per
git subcommand.
"""

from collections import deque
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Self

from phink.process._models import Invocation, ProcessResult, git_subcommand


@dataclass(slots=True)
class FakeInvoker:
    """Fake process invoker for testing.

    Results are scripted per git subcommand. Scripted results for one
    subcommand are consumed in order; the last one keeps being replayed.
    Unscripted subcommands succeed with empty output.

    Example:
        >>> fake = FakeInvoker()
        >>> _ = fake.script("status", stdout="?? new.txt\\n")
        >>> repo = Repository(tmp_path, invoker=fake)
        >>> repo.get_unstaged_changes()
        ['new.txt']
        >>> fake.subcommands()
        ['status']
    """

    calls: list[Invocation] = field(default_factory=list)
    _scripted: dict[str, deque[ProcessResult]] = field(default_factory=dict)

    def script(
        self,
        subcommand: str,
        *,
        exit_code: int | None = 0,
        stdout: str = "",
        stderr: str = "",
        error: str | None = None,
        stdout_truncated: bool = False,
    ) -> Self:
        """Queue a result for the next call of ``subcommand``.

        Args:
            subcommand: Git subcommand the result answers (e.g. "status").
            exit_code: Exit code to report, or None for a launch failure.
            stdout: Standard output to report.
            stderr: Standard error to report.
            error: Launch error message to report.
            stdout_truncated: Report stdout as cut to a size limit.

        Returns:
            Self, so scripts can be chained.
        """
        self._scripted.setdefault(subcommand, deque()).append(
            ProcessResult(
                argv=(),
                exit_code=exit_code,
                stdout=stdout,
                stderr=stderr,
                error=error,
                stdout_truncated=stdout_truncated,
            )
        )
        return self

    def run(
        self,
        cwd: Path,
        argv: Sequence[str],
        *,
        env: Mapping[str, str] | None = None,
        timeout_ms: int | None = None,
    ) -> ProcessResult:
        """Record the call and return the scripted result."""
        args = tuple(argv)
        self.calls.append(
            Invocation(cwd=cwd, argv=args, env=dict(env or {}), timeout_ms=timeout_ms)
        )

        queue = self._scripted.get(git_subcommand(args) or "")
        if not queue:
            return ProcessResult(argv=args, exit_code=0)

        scripted = queue[0] if len(queue) == 1 else queue.popleft()
        return replace(scripted, argv=args)

    def subcommands(self) -> list[str]:
        """Git subcommands of all recorded calls, in call order."""
        return [call.subcommand or "" for call in self.calls]

    def reset(self) -> None:
        """Forget recorded calls and scripted results."""
        self.calls.clear()
        self._scripted.clear()

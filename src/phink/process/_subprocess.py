"""Subprocess-backed process invoker.

Runs commands with subprocess.run, capturing output, enforcing an optional
timeout and reporting launch failures as results instead of exceptions.
"""

import os
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path

from phink.process._models import ProcessResult

# Maximum output size in bytes kept in a result
MAX_OUTPUT_BYTES: int = 10 * 1024 * 1024


def truncate_output(output: str, max_bytes: int = MAX_OUTPUT_BYTES) -> str:
    """Truncate output to max bytes, preserving valid UTF-8.

    Args:
        output: The string to truncate.
        max_bytes: Maximum size in bytes.

    Returns:
        Truncated string with indicator if truncated.
    """
    if not output:
        return output

    encoded = output.encode("utf-8")
    if len(encoded) <= max_bytes:
        return output

    # 'ignore' drops a multi-byte sequence cut at the boundary
    truncated = encoded[:max_bytes].decode("utf-8", errors="ignore")
    return truncated + "\n... [output truncated]"


class SubprocessInvoker:
    """Process invoker that spawns real processes.

    Example:
        >>> invoker = SubprocessInvoker()
        >>> result = invoker.run(Path.cwd(), ["git", "--version"])
        >>> result.ok
        True
    """

    __slots__ = ("_max_output_bytes",)

    def __init__(self, *, max_output_bytes: int = MAX_OUTPUT_BYTES) -> None:
        self._max_output_bytes = max_output_bytes

    def run(
        self,
        cwd: Path,
        argv: Sequence[str],
        *,
        env: Mapping[str, str] | None = None,
        timeout_ms: int | None = None,
    ) -> ProcessResult:
        """Run a command to completion.

        Args:
            cwd: Working directory for the process.
            argv: Executable followed by its arguments.
            env: Extra environment variables layered over os.environ.
            timeout_ms: Optional timeout in milliseconds.

        Returns:
            ProcessResult with the exit code and decoded output, or with
            ``error`` set when the process could not be run. Output over the
            size limit is truncated and ``stdout_truncated`` is set.
        """
        args = tuple(argv)
        timeout_seconds = timeout_ms / 1000.0 if timeout_ms is not None else None

        try:
            completed = subprocess.run(  # noqa: S603
                args,
                cwd=str(cwd),
                env={**os.environ, **(env or {})},
                stdin=subprocess.DEVNULL,
                capture_output=True,
                timeout=timeout_seconds,
                check=False,
            )
        except subprocess.TimeoutExpired:
            return ProcessResult(
                argv=args,
                error=f"Command timed out after {timeout_seconds}s",
                timed_out=True,
            )
        except FileNotFoundError as e:
            # Raised for a missing executable and for a missing cwd alike
            return ProcessResult(
                argv=args,
                error=str(e),
                command_not_found=Path(cwd).is_dir(),
            )
        except OSError as e:
            return ProcessResult(argv=args, error=str(e))

        stdout = completed.stdout.decode("utf-8", errors="replace")
        return ProcessResult(
            argv=args,
            exit_code=completed.returncode,
            stdout=truncate_output(stdout, self._max_output_bytes),
            stdout_truncated=len(stdout.encode("utf-8")) > self._max_output_bytes,
            stderr=truncate_output(
                completed.stderr.decode("utf-8", errors="replace"),
                self._max_output_bytes,
            ),
        )

"""git status."""

from typing import Final, override

from phink.command._base import Command
from phink.exceptions import CommandFailedError, InvalidStateError
from phink.process import ProcessResult
from phink.status import ChangeSet, parse_porcelain

STATUS_ARGS: Final = ("status", "--porcelain=v1", "--untracked-files=all")


def _complete_stdout(result: ProcessResult) -> str:
    """Return stdout, refusing output that was cut short.

    Raises:
        CommandFailedError: If the invoker truncated stdout.
    """
    if result.stdout_truncated:
        msg = "git status output exceeded the invoker's size limit; paths would be lost"
        raise CommandFailedError(
            msg,
            argv=result.argv,
            exit_code=result.exit_code,
            stderr=result.stderr,
        )
    return result.stdout


class StatusCommand(Command[ChangeSet]):
    """Query the working tree state.

    Untracked files are listed individually (not collapsed into their
    directory) so every new file shows up as its own unstaged path. The
    working directory must itself hold git metadata; a plain directory
    inside another repository is rejected rather than reporting the outer
    repository's changes.
    """

    __slots__ = ()

    @override
    def _prepare(self) -> None:
        cwd = self._repository.cwd
        if not self._repository.exists(cwd):
            msg = f"Not a git repository: {cwd}"
            raise InvalidStateError(msg, path=cwd)

    @override
    def _build_args(self) -> list[str]:
        return list(STATUS_ARGS)

    @override
    def _interpret(self, result: ProcessResult) -> ChangeSet:
        return parse_porcelain(_complete_stdout(result))

    def execute_raw(self) -> str:
        """Run the query and return git's porcelain text unparsed."""
        return _complete_stdout(self._run())

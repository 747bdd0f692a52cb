# ruff: noqa: TC003  # Path needed at runtime for method signatures
"""Repository handle bound to one working directory.

This module provides the Repository class, the entry point for every git
operation. A Repository keeps no state about the working tree: each query
runs git again, because the directory can change out of band between calls.
"""

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from dulwich.errors import NotGitRepository
from dulwich.repo import Repo

from phink._logging import create_logger
from phink.command import (
    AddCommand,
    CheckoutCommand,
    CloneCommand,
    CommitCommand,
    InitCommand,
    PullCommand,
    StatusCommand,
)
from phink.config import PhinkConfig
from phink.exceptions import InvalidStateError
from phink.process import ProcessInvoker, ProcessResult, SubprocessInvoker
from phink.status import ChangeSet

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


class Repository:
    """A git working directory and the commands that operate on it.

    Commands are created fresh by the factory methods and hold a reference
    back to the repository for its directory, configuration and process
    invoker. Commands sharing one Repository must not run concurrently;
    separate Repository instances for separate directories may.

    Attributes:
        cwd: The absolute, resolved working directory.
        config: Settings applied to every git invocation.

    Example:
        >>> repo = Repository("/tmp/project", allow_missing=True)
        >>> repo.init().execute()
        >>> Repository.exists(repo.cwd)
        True
        >>> repo.is_dirty()
        False
    """

    __slots__ = ("_config", "_cwd", "_invoker", "_logger")

    def __init__(
        self,
        path: Path | str,
        *,
        allow_missing: bool = False,
        config: PhinkConfig | None = None,
        invoker: ProcessInvoker | None = None,
    ) -> None:
        """Bind to a working directory.

        The directory is never created here; init() and clone_existing()
        create it when they run.

        Args:
            path: The working directory.
            allow_missing: Accept a directory that does not exist yet.
            config: Settings for git invocations. Loaded from the
                environment when None.
            invoker: Process invoker. Defaults to SubprocessInvoker.

        Raises:
            InvalidStateError: If the directory does not exist and
                allow_missing is False.
        """
        self._cwd = Path(path).expanduser().resolve()
        if not allow_missing and not self._cwd.is_dir():
            msg = f"Working directory does not exist: {self._cwd}"
            raise InvalidStateError(msg, path=self._cwd)

        self._config = config if config is not None else PhinkConfig.load()
        self._invoker: ProcessInvoker = (
            invoker if invoker is not None else SubprocessInvoker()
        )
        level = self._config.logging.level
        self._logger: FilteringBoundLogger = create_logger(
            level=level.value if level is not None else None,
            log_format=self._config.logging.format.value,
            log_file=self._config.logging.file,
        ).bind(cwd=str(self._cwd))

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def cwd(self) -> Path:
        return self._cwd

    @property
    def config(self) -> PhinkConfig:
        return self._config

    @property
    def directory_exists(self) -> bool:
        """Whether the working directory currently exists (checked each time)."""
        return self._cwd.is_dir()

    @staticmethod
    def exists(path: Path | str) -> bool:
        """Check whether a directory holds an initialized git repository.

        Only ``path`` itself is inspected; parent directories are not
        searched, so a plain directory inside another repository is not
        reported as a repository.

        Args:
            path: The directory to check.

        Returns:
            True if ``path`` contains git metadata.
        """
        directory = Path(path)
        if not directory.is_dir():
            return False
        try:
            repo = Repo(str(directory))
        except NotGitRepository:
            return False
        repo.close()
        return True

    # =========================================================================
    # Command factories
    # =========================================================================

    def init(self) -> InitCommand:
        return InitCommand(self)

    def clone_existing(self, source_url: Path | str) -> CloneCommand:
        """Clone ``source_url`` into the working directory.

        Args:
            source_url: URL or local path of the repository to clone.

        Returns:
            The executed CloneCommand.

        Raises:
            InvalidArgumentError: If source_url is empty.
            InvalidStateError: If the working directory exists and is not
                empty. Git is not invoked in that case.
            CommandFailedError: If git clone fails.
        """
        command = CloneCommand(self, str(source_url))
        if self._cwd.exists() and (
            not self._cwd.is_dir() or any(self._cwd.iterdir())
        ):
            msg = f"Cannot clone into non-empty directory: {self._cwd}"
            raise InvalidStateError(msg, path=self._cwd)
        return command.execute()

    def add(self) -> AddCommand:
        return AddCommand(self)

    def commit(
        self,
        message: str,
        *,
        allow_empty: bool = False,
        author: str | None = None,
    ) -> CommitCommand:
        """Commit the staged changes.

        The commit runs immediately. After it succeeds nothing is staged.

        Args:
            message: Commit message.
            allow_empty: Permit a commit that records no changes.
            author: Author override in ``Name <email>`` form.

        Returns:
            The executed CommitCommand.

        Raises:
            InvalidArgumentError: If message is empty or blank, or author is
                malformed. Git is not invoked in that case.
            CommandFailedError: If git commit fails.
        """
        command = CommitCommand(self, message)
        if allow_empty:
            _ = command.allow_empty()
        if author is not None:
            _ = command.author(author)
        return command.execute()

    def checkout(self) -> CheckoutCommand:
        return CheckoutCommand(self)

    def pull(self) -> PullCommand:
        return PullCommand(self)

    def status(self) -> StatusCommand:
        return StatusCommand(self)

    # =========================================================================
    # Status queries
    # =========================================================================

    def get_changes(self) -> ChangeSet:
        """Run git status and return staged and unstaged paths."""
        return self.status().execute()

    def is_dirty(self) -> bool:
        """Whether anything is staged or changed relative to the last commit.

        Untracked files count as changes.
        """
        return not self.get_changes().is_clean

    def get_staged_changes(self) -> list[str]:
        """Sorted paths with changes recorded in the index."""
        return list(self.get_changes().staged)

    def get_unstaged_changes(self) -> list[str]:
        """Sorted paths changed in the working tree, untracked files included."""
        return list(self.get_changes().unstaged)

    # =========================================================================
    # Process execution
    # =========================================================================

    def run_git(self, args: Sequence[str], *, cwd: Path | None = None) -> ProcessResult:
        """Run git with the configured executable, options and environment.

        This is the single point where commands reach the process invoker.
        A non-zero exit is returned, not raised; commands interpret it.
        GIT_CEILING_DIRECTORIES is set to the parent of the working
        directory, so git never operates on an enclosing repository; the
        configured environment may override it.

        Args:
            args: Git arguments, starting with the subcommand.
            cwd: Directory to run in. Defaults to the working directory.

        Returns:
            The process result.
        """
        argv = [self._config.git_executable, *self._config.git_options(), *args]
        run_dir = cwd if cwd is not None else self._cwd
        # Stop repository discovery at the working directory itself
        env = {"GIT_CEILING_DIRECTORIES": str(self._cwd.parent), **self._config.env}

        log = self._logger.bind(args=list(args), run_dir=str(run_dir))
        log.debug("command_started")
        result = self._invoker.run(
            run_dir,
            argv,
            env=env,
            timeout_ms=self._config.timeout_ms,
        )

        if result.ok:
            log.debug("command_finished", exit_code=result.exit_code)
        else:
            log.warning(
                "command_failed",
                exit_code=result.exit_code,
                error=result.error,
                timed_out=result.timed_out,
                stderr=result.stderr.strip(),
            )
        return result

    def __repr__(self) -> str:
        return f"Repository({str(self._cwd)!r})"

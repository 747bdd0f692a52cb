"""git clone."""

from pathlib import Path
from typing import TYPE_CHECKING, Self, override

from phink.command._base import Command, require_text
from phink.exceptions import InvalidArgumentError
from phink.process import ProcessResult

if TYPE_CHECKING:
    from phink.repository import Repository


class CloneCommand(Command["CloneCommand"]):
    """Clone a source repository into the repository's working directory.

    The source URL is a constructor argument because cloning is usually a
    single call through ``Repository.clone_existing``, which also rejects
    non-empty targets before git is invoked.

    Git runs from the parent directory (created when missing) with the
    working directory as the explicit destination.
    """

    __slots__ = ("_branch", "_depth", "_source_url")

    def __init__(self, repository: "Repository", source_url: str) -> None:
        """Initialize the command.

        Args:
            repository: The repository whose directory receives the clone.
            source_url: URL or local path of the repository to clone.

        Raises:
            InvalidArgumentError: If source_url is empty.
        """
        super().__init__(repository)
        self._source_url = require_text(source_url, argument="source_url")
        self._branch: str | None = None
        self._depth: int | None = None

    @property
    def source_url(self) -> str:
        return self._source_url

    def branch(self, name: str) -> Self:
        """Check out ``name`` instead of the remote's HEAD."""
        self._ensure_configurable()
        self._branch = require_text(name, argument="branch")
        return self

    def depth(self, depth: int) -> Self:
        """Create a shallow clone with ``depth`` commits of history.

        Raises:
            InvalidArgumentError: If depth is not a positive integer.
        """
        self._ensure_configurable()
        if isinstance(depth, bool) or not isinstance(depth, int) or depth < 1:
            msg = f"depth must be a positive integer, got {depth!r}"
            raise InvalidArgumentError(msg, argument="depth")
        self._depth = depth
        return self

    @override
    def _working_directory(self) -> Path:
        return self._repository.cwd.parent

    @override
    def _prepare(self) -> None:
        self._repository.cwd.parent.mkdir(parents=True, exist_ok=True)

    @override
    def _build_args(self) -> list[str]:
        args = ["clone"]
        if self._branch is not None:
            args.extend(["--branch", self._branch])
        if self._depth is not None:
            args.extend(["--depth", str(self._depth)])
        args.extend(["--", self._source_url, str(self._repository.cwd)])
        return args

    @override
    def _interpret(self, result: ProcessResult) -> Self:
        return self

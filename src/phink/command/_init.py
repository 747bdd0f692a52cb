"""git init."""

from typing import TYPE_CHECKING, Self, override

from phink.command._base import Command, require_text
from phink.process import ProcessResult

if TYPE_CHECKING:
    from phink.repository import Repository


class InitCommand(Command["InitCommand"]):
    """Create the working directory if needed and initialize git metadata.

    Re-running against an existing repository is left to git, which
    reinitializes safely without touching history.

    Example:
        >>> repo = Repository(tmp_path / "project", allow_missing=True)
        >>> repo.init().initial_branch("main").execute()
    """

    __slots__ = ("_bare", "_initial_branch")

    def __init__(self, repository: "Repository") -> None:
        super().__init__(repository)
        self._bare = False
        self._initial_branch: str | None = None

    def initial_branch(self, name: str) -> Self:
        """Name the branch HEAD points to in the new repository."""
        self._ensure_configurable()
        self._initial_branch = require_text(name, argument="initial_branch")
        return self

    def bare(self) -> Self:
        """Create a bare repository (no working tree)."""
        self._ensure_configurable()
        self._bare = True
        return self

    @override
    def _prepare(self) -> None:
        self._repository.cwd.mkdir(parents=True, exist_ok=True)

    @override
    def _build_args(self) -> list[str]:
        args = ["init"]
        if self._bare:
            args.append("--bare")
        if self._initial_branch is not None:
            args.append(f"--initial-branch={self._initial_branch}")
        return args

    @override
    def _interpret(self, result: ProcessResult) -> Self:
        return self

"""git pull."""

from typing import TYPE_CHECKING, Final, Self, override

from phink.command._base import Command, require_text
from phink.exceptions import InvalidArgumentError
from phink.process import ProcessResult

if TYPE_CHECKING:
    from phink.repository import Repository

DEFAULT_REMOTE: Final = "origin"


class PullCommand(Command["PullCommand"]):
    """Fetch from a remote and integrate into the current branch.

    With no options git uses the branch's configured upstream. Giving only
    a branch pulls it from ``origin``.
    """

    __slots__ = ("_branch", "_ff_only", "_rebase", "_remote")

    def __init__(self, repository: "Repository") -> None:
        super().__init__(repository)
        self._remote: str | None = None
        self._branch: str | None = None
        self._rebase = False
        self._ff_only = False

    def remote(self, name: str) -> Self:
        self._ensure_configurable()
        self._remote = require_text(name, argument="remote")
        return self

    def branch(self, name: str) -> Self:
        self._ensure_configurable()
        self._branch = require_text(name, argument="branch")
        return self

    def rebase(self) -> Self:
        """Rebase local commits onto the fetched branch instead of merging.

        Raises:
            InvalidArgumentError: If fast_forward_only() was already chosen.
        """
        self._ensure_configurable()
        if self._ff_only:
            msg = "rebase() and fast_forward_only() are mutually exclusive"
            raise InvalidArgumentError(msg, argument="rebase")
        self._rebase = True
        return self

    def fast_forward_only(self) -> Self:
        """Refuse to pull unless the result is a fast-forward.

        Raises:
            InvalidArgumentError: If rebase() was already chosen.
        """
        self._ensure_configurable()
        if self._rebase:
            msg = "rebase() and fast_forward_only() are mutually exclusive"
            raise InvalidArgumentError(msg, argument="fast_forward_only")
        self._ff_only = True
        return self

    @override
    def _build_args(self) -> list[str]:
        args = ["pull"]
        if self._rebase:
            args.append("--rebase")
        if self._ff_only:
            args.append("--ff-only")
        if self._remote is not None or self._branch is not None:
            args.append(self._remote or DEFAULT_REMOTE)
        if self._branch is not None:
            args.append(self._branch)
        return args

    @override
    def _interpret(self, result: ProcessResult) -> Self:
        return self

"""git checkout."""

from typing import TYPE_CHECKING, Self, override

from phink.command._base import Command, require_text
from phink.exceptions import InvalidArgumentError
from phink.process import ProcessResult

if TYPE_CHECKING:
    from phink.repository import Repository


class CheckoutCommand(Command["CheckoutCommand"]):
    """Switch branches or restore working tree files.

    With no options this runs a bare ``git checkout``, which reports the
    state of the current branch. ``branch()`` switches to a branch,
    ``create()`` creates it first, and ``paths()`` restricts the checkout to
    the given files.

    Example:
        >>> repo.checkout().branch("feature").create().execute()
    """

    __slots__ = ("_branch", "_create", "_paths")

    def __init__(self, repository: "Repository") -> None:
        super().__init__(repository)
        self._branch: str | None = None
        self._create = False
        self._paths: list[str] = []

    def branch(self, name: str) -> Self:
        self._ensure_configurable()
        self._branch = require_text(name, argument="branch")
        return self

    def create(self) -> Self:
        """Create the branch before switching to it (``-b``)."""
        self._ensure_configurable()
        self._create = True
        return self

    def paths(self, *paths: str) -> Self:
        """Restore only these paths; repeated calls add more."""
        self._ensure_configurable()
        if not paths:
            msg = "paths() requires at least one path"
            raise InvalidArgumentError(msg, argument="paths")
        self._paths.extend(require_text(path, argument="paths") for path in paths)
        return self

    @override
    def _build_args(self) -> list[str]:
        args = ["checkout"]
        if self._create:
            if self._branch is None:
                msg = "create() requires a branch name; call branch() as well"
                raise InvalidArgumentError(msg, argument="branch")
            args.extend(["-b", self._branch])
        elif self._branch is not None:
            args.append(self._branch)
        if self._paths:
            args.extend(["--", *self._paths])
        return args

    @override
    def _interpret(self, result: ProcessResult) -> Self:
        return self

"""git commit."""

import re
from typing import TYPE_CHECKING, Final, Self, override

from phink.command._base import Command, require_text
from phink.exceptions import InvalidArgumentError
from phink.process import ProcessResult

if TYPE_CHECKING:
    from phink.repository import Repository

# "Name <email>", the form git accepts for --author without a lookup
_AUTHOR_PATTERN: Final = re.compile(r"^[^<>]+ <[^<>]*>$")


class CommitCommand(Command["CommitCommand"]):
    """Record the currently staged changes as a new commit.

    The message is taken eagerly because it is the one required argument.
    After a successful execute() the index matches HEAD, so the repository
    reports no staged changes.
    """

    __slots__ = ("_allow_empty", "_author", "_message")

    def __init__(self, repository: "Repository", message: str) -> None:
        """Initialize the command.

        Args:
            repository: The repository to commit in.
            message: Commit message.

        Raises:
            InvalidArgumentError: If message is empty or blank.
        """
        super().__init__(repository)
        self._message = require_text(message, argument="message")
        self._allow_empty = False
        self._author: str | None = None

    @property
    def message(self) -> str:
        return self._message

    def allow_empty(self) -> Self:
        """Permit a commit that records no changes."""
        self._ensure_configurable()
        self._allow_empty = True
        return self

    def author(self, author: str) -> Self:
        """Override the commit author.

        Args:
            author: Author in ``Name <email>`` form.

        Raises:
            InvalidArgumentError: If author is not in ``Name <email>`` form.
        """
        self._ensure_configurable()
        if not _AUTHOR_PATTERN.match(require_text(author, argument="author")):
            msg = f"author must look like 'Name <email>', got {author!r}"
            raise InvalidArgumentError(msg, argument="author")
        self._author = author
        return self

    @override
    def _build_args(self) -> list[str]:
        args = ["commit", "-m", self._message]
        if self._allow_empty:
            args.append("--allow-empty")
        if self._author is not None:
            args.append(f"--author={self._author}")
        return args

    @override
    def _interpret(self, result: ProcessResult) -> Self:
        return self

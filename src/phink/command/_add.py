"""git add."""

from typing import TYPE_CHECKING, Self, override

from phink.command._base import Command, require_text
from phink.exceptions import InvalidArgumentError
from phink.process import ProcessResult

if TYPE_CHECKING:
    from phink.repository import Repository


class AddCommand(Command["AddCommand"]):
    """Stage files matching one or more path patterns.

    Patterns accumulate: each call to file_pattern() adds a pattern, and all
    distinct patterns are staged together by a single ``git add`` in the
    order they were first given. The pattern "." stages every change in the
    working directory.

    Example:
        >>> repo.add().file_pattern("src").file_pattern("README.md").execute()
    """

    __slots__ = ("_patterns",)

    def __init__(self, repository: "Repository") -> None:
        super().__init__(repository)
        self._patterns: dict[str, None] = {}

    @property
    def patterns(self) -> tuple[str, ...]:
        """Patterns configured so far, in first-seen order."""
        return tuple(self._patterns)

    def file_pattern(self, pattern: str) -> Self:
        """Add a path or glob to stage.

        Args:
            pattern: Path or pathspec relative to the working directory.

        Returns:
            Self, for chaining.

        Raises:
            InvalidArgumentError: If the pattern is empty.
            InvalidStateError: If the command was already executed.
        """
        self._ensure_configurable()
        self._patterns[require_text(pattern, argument="file_pattern")] = None
        return self

    @override
    def _build_args(self) -> list[str]:
        if not self._patterns:
            msg = "No file pattern given; call file_pattern() before execute()"
            raise InvalidArgumentError(msg, argument="file_pattern")
        return ["add", "--", *self._patterns]

    @override
    def _interpret(self, result: ProcessResult) -> Self:
        return self

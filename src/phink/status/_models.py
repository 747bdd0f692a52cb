"""Status models.

This module defines the structures produced by parsing
``git status --porcelain`` output.
"""

from dataclasses import dataclass, field
from typing import Final, Self

# Index/worktree pairs git reports for unmerged paths
UNMERGED_STATES: Final = frozenset({"DD", "AU", "UD", "UA", "DU", "AA", "UU"})


@dataclass(frozen=True, slots=True)
class StatusEntry:
    """One parsed line of porcelain status output.

    Attributes:
        index: Index (staging area) indicator, " " when unchanged.
        worktree: Working tree indicator, " " when unchanged.
        path: Repository-relative path, the destination for renames and copies.
        original_path: Source path of a rename or copy, None otherwise.
    """

    index: str
    worktree: str
    path: str
    original_path: str | None = None

    @property
    def code(self) -> str:
        """The two-character XY status code."""
        return self.index + self.worktree

    @property
    def is_untracked(self) -> bool:
        return self.code == "??"

    @property
    def is_ignored(self) -> bool:
        return self.code == "!!"

    @property
    def is_unmerged(self) -> bool:
        return self.code in UNMERGED_STATES

    @property
    def is_staged(self) -> bool:
        """Whether the entry has a change recorded in the index.

        Unmerged entries are never staged: they cannot be committed until the
        conflict is resolved.
        """
        if self.is_untracked or self.is_ignored or self.is_unmerged:
            return False
        return self.index != " "

    @property
    def is_unstaged(self) -> bool:
        """Whether the entry has a change in the working tree not yet staged.

        Untracked and unmerged entries count as unstaged.
        """
        if self.is_ignored:
            return False
        if self.is_untracked or self.is_unmerged:
            return True
        return self.worktree != " "


@dataclass(frozen=True, slots=True)
class ChangeSet:
    """Staged and unstaged paths of a working directory.

    Both sequences are sorted lexicographically and free of duplicates. A
    path modified both in the index and in the working tree appears in both.

    Attributes:
        staged: Paths with changes recorded in the index.
        unstaged: Paths with working tree changes, untracked files included.
        entries: Parsed status lines in the order git reported them.
    """

    staged: tuple[str, ...] = ()
    unstaged: tuple[str, ...] = ()
    entries: tuple[StatusEntry, ...] = field(default=(), compare=False)

    @property
    def is_clean(self) -> bool:
        """True when nothing is staged and nothing is unstaged."""
        return not self.staged and not self.unstaged

    @property
    def untracked(self) -> tuple[str, ...]:
        """Sorted untracked paths, a subset of ``unstaged``."""
        return tuple(sorted({e.path for e in self.entries if e.is_untracked}))

    @property
    def unmerged(self) -> tuple[str, ...]:
        """Sorted paths with unresolved merge conflicts."""
        return tuple(sorted({e.path for e in self.entries if e.is_unmerged}))

    @classmethod
    def from_entries(cls, entries: tuple[StatusEntry, ...]) -> Self:
        """Classify entries into sorted, de-duplicated staged/unstaged paths."""
        staged = sorted({e.path for e in entries if e.is_staged})
        unstaged = sorted({e.path for e in entries if e.is_unstaged})
        return cls(staged=tuple(staged), unstaged=tuple(unstaged), entries=entries)

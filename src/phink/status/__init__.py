"""Working tree status for phink.

Functions:
    parse_porcelain: Parse ``git status --porcelain=v1`` text into a ChangeSet.
    parse_status_line: Parse a single status line.
    unquote_path: Decode a C-quoted path as printed by git.

Models:
    ChangeSet: Sorted staged and unstaged paths.
    StatusEntry: One parsed status line.
"""

from phink.status._models import UNMERGED_STATES, ChangeSet, StatusEntry
from phink.status._parser import parse_porcelain, parse_status_line, unquote_path

__all__ = [
    "UNMERGED_STATES",
    "ChangeSet",
    "StatusEntry",
    "parse_porcelain",
    "parse_status_line",
    "unquote_path",
]

"""Git commands for phink.

Each command is a deferred operation: it is created by a Repository,
configured through chainable setters and run with execute().

Classes:
    Command: Abstract base class with the execute() template.
    InitCommand: git init.
    CloneCommand: git clone.
    AddCommand: git add.
    CommitCommand: git commit.
    CheckoutCommand: git checkout.
    PullCommand: git pull.
    StatusCommand: git status, parsed into a ChangeSet.

Example:
    >>> repo.add().file_pattern(".").execute()
    >>> repo.commit("Add files")
"""

from phink.command._add import AddCommand
from phink.command._base import Command, require_text
from phink.command._checkout import CheckoutCommand
from phink.command._clone import CloneCommand
from phink.command._commit import CommitCommand
from phink.command._init import InitCommand
from phink.command._pull import DEFAULT_REMOTE, PullCommand
from phink.command._status import STATUS_ARGS, StatusCommand

__all__ = [
    "DEFAULT_REMOTE",
    "STATUS_ARGS",
    "AddCommand",
    "CheckoutCommand",
    "CloneCommand",
    "Command",
    "CommitCommand",
    "InitCommand",
    "PullCommand",
    "StatusCommand",
    "require_text",
]

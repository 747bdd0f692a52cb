"""Phink: fluent, typed git commands.

Phink drives the git binary through command objects that are configured
with chainable setters and run with execute(). Working tree status is
parsed into sorted staged and unstaged path lists.

Classes:
    Repository: A git working directory and its command factories.
    PhinkConfig: Settings applied to every git invocation.

Models:
    ChangeSet: Staged and unstaged paths.
    StatusEntry: One parsed status line.

Exceptions:
    PhinkError: Base class; ``kind`` tags the failure category.
    InvalidStateError, InvalidArgumentError, CommandFailedError.

Example:
    >>> from phink import Repository
    >>> repo = Repository("/tmp/project", allow_missing=True)
    >>> repo.init().execute()
    >>> repo.add().file_pattern(".").execute()
    >>> repo.commit("Initial commit")
    >>> repo.is_dirty()
    False
"""

from phink._logging import create_logger
from phink.command import (
    AddCommand,
    CheckoutCommand,
    CloneCommand,
    Command,
    CommitCommand,
    InitCommand,
    PullCommand,
    StatusCommand,
)
from phink.config import GitIdentity, LoggingConfig, PhinkConfig
from phink.exceptions import (
    CommandFailedError,
    ConfigLoadError,
    ErrorKind,
    InvalidArgumentError,
    InvalidStateError,
    PhinkError,
)
from phink.process import FakeInvoker, ProcessInvoker, ProcessResult, SubprocessInvoker
from phink.repository import Repository
from phink.status import ChangeSet, StatusEntry, parse_porcelain

__all__ = [
    "AddCommand",
    "ChangeSet",
    "CheckoutCommand",
    "CloneCommand",
    "Command",
    "CommandFailedError",
    "CommitCommand",
    "ConfigLoadError",
    "ErrorKind",
    "FakeInvoker",
    "GitIdentity",
    "InitCommand",
    "InvalidArgumentError",
    "InvalidStateError",
    "LoggingConfig",
    "PhinkConfig",
    "PhinkError",
    "ProcessInvoker",
    "ProcessResult",
    "PullCommand",
    "Repository",
    "StatusCommand",
    "StatusEntry",
    "SubprocessInvoker",
    "create_logger",
    "parse_porcelain",
]

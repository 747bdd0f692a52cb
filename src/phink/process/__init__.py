"""Process execution for phink.

This package runs the git binary. Commands never spawn processes directly;
they go through a ProcessInvoker so tests can substitute a fake.

Classes:
    ProcessInvoker: Runtime-checkable protocol for running a command.
    SubprocessInvoker: Invoker backed by subprocess.run.
    FakeInvoker: Recording invoker with scripted results, for tests.

Models:
    ProcessResult: Exit code and captured output of one run.
    Invocation: A call recorded by FakeInvoker.
"""

from phink.process._fake import FakeInvoker
from phink.process._models import Invocation, ProcessResult, git_subcommand
from phink.process._protocol import ProcessInvoker
from phink.process._subprocess import SubprocessInvoker, truncate_output

__all__ = [
    "FakeInvoker",
    "Invocation",
    "ProcessInvoker",
    "ProcessResult",
    "SubprocessInvoker",
    "git_subcommand",
    "truncate_output",
]

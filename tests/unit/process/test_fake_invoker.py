"""Tests for phink.process._fake and the process models."""

from pathlib import Path

import pytest

from phink.process import (
    FakeInvoker,
    Invocation,
    ProcessInvoker,
    ProcessResult,
    git_subcommand,
)


class TestProcessResult:
    def test_defaults(self) -> None:
        result = ProcessResult(argv=("git", "status"))
        assert result.exit_code is None
        assert result.stdout == ""
        assert result.stderr == ""
        assert result.error is None
        assert result.timed_out is False
        assert result.command_not_found is False
        assert result.stdout_truncated is False
        assert result.ok is False

    def test_ok_only_for_zero_exit(self) -> None:
        assert ProcessResult(argv=(), exit_code=0).ok is True
        assert ProcessResult(argv=(), exit_code=1).ok is False

    def test_frozen(self) -> None:
        result = ProcessResult(argv=())
        with pytest.raises(AttributeError):
            result.exit_code = 0  # pyright: ignore[reportAttributeAccessIssue]


class TestGitSubcommand:
    @pytest.mark.parametrize(
        ("argv", "expected"),
        [
            (["git", "status"], "status"),
            (["git", "-c", "user.name=CI", "-c", "user.email=ci@x", "add", "."], "add"),
            (["git", "-C", "/tmp", "--no-pager", "log"], "log"),
            (["/usr/bin/git"], None),
            (["git", "--version"], None),
            ([], None),
        ],
    )
    def test_finds_subcommand(self, argv: list[str], expected: str | None) -> None:
        assert git_subcommand(argv) == expected

    def test_invocation_property(self) -> None:
        invocation = Invocation(cwd=Path("/repo"), argv=("git", "-c", "a=b", "pull"))
        assert invocation.subcommand == "pull"


class TestFakeInvoker:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(FakeInvoker(), ProcessInvoker)

    def test_unscripted_calls_succeed(self) -> None:
        result = FakeInvoker().run(Path("/repo"), ["git", "status"])
        assert result.ok is True
        assert result.stdout == ""
        assert result.argv == ("git", "status")

    def test_records_calls(self) -> None:
        fake = FakeInvoker()
        _ = fake.run(Path("/repo"), ["git", "add", "."], env={"A": "1"}, timeout_ms=50)

        assert fake.calls == [
            Invocation(
                cwd=Path("/repo"),
                argv=("git", "add", "."),
                env={"A": "1"},
                timeout_ms=50,
            )
        ]
        assert fake.subcommands() == ["add"]

    def test_scripted_results_consumed_in_order_last_replayed(self) -> None:
        fake = (
            FakeInvoker()
            .script("status", stdout="first")
            .script("status", stdout="second")
        )

        outputs = [fake.run(Path("/r"), ["git", "status"]).stdout for _ in range(3)]

        assert outputs == ["first", "second", "second"]

    def test_scripts_are_per_subcommand(self) -> None:
        fake = FakeInvoker().script("commit", exit_code=1, stderr="nothing to commit")

        assert fake.run(Path("/r"), ["git", "add", "."]).ok is True
        failed = fake.run(Path("/r"), ["git", "-c", "x=y", "commit", "-m", "m"])
        assert failed.exit_code == 1
        assert failed.stderr == "nothing to commit"

    def test_scripted_launch_error(self) -> None:
        fake = FakeInvoker().script("clone", exit_code=None, error="not found")
        result = fake.run(Path("/r"), ["git", "clone", "x"])
        assert result.exit_code is None
        assert result.error == "not found"

    def test_scripted_truncation_is_replayed(self) -> None:
        fake = FakeInvoker().script("status", stdout="?? a", stdout_truncated=True)
        result = fake.run(Path("/r"), ["git", "status"])
        assert result.stdout_truncated is True
        assert result.argv == ("git", "status")

    def test_reset(self) -> None:
        fake = FakeInvoker().script("status", stdout="?? a\n")
        _ = fake.run(Path("/r"), ["git", "status"])

        fake.reset()

        assert fake.calls == []
        assert fake.run(Path("/r"), ["git", "status"]).stdout == ""

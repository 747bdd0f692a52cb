"""Shared test fixtures for phink tests."""

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from dulwich.repo import Repo

from phink import FakeInvoker, GitIdentity, PhinkConfig, Repository, create_logger


@pytest.fixture(autouse=True)
def _isolate_phink_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep PHINK_* variables from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.startswith("PHINK_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def _fresh_loggers() -> Iterator[None]:
    """Drop cached loggers so level and output changes take effect per test."""
    create_logger.cache_clear()
    yield
    create_logger.cache_clear()


@pytest.fixture
def phink_config(tmp_path: Path) -> PhinkConfig:
    """Configuration isolated from the user's and the system's git config."""
    global_config = tmp_path / "gitconfig"
    global_config.touch()
    return PhinkConfig(
        identity=GitIdentity(name="Test User", email="test@example.com"),
        options={"commit.gpgsign": "false", "init.defaultBranch": "main"},
        env={
            "GIT_TERMINAL_PROMPT": "0",
            "GIT_CONFIG_GLOBAL": str(global_config),
            "GIT_CONFIG_NOSYSTEM": "1",
        },
    )


@pytest.fixture
def fake_invoker() -> FakeInvoker:
    return FakeInvoker()


@pytest.fixture
def fake_repo(tmp_path: Path, phink_config: PhinkConfig, fake_invoker: FakeInvoker) -> Repository:
    """Repository over an initialized directory, driven by a FakeInvoker."""
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    Repo.init(str(work_dir)).close()
    return Repository(work_dir, config=phink_config, invoker=fake_invoker)

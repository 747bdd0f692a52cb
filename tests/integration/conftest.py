import shutil
from collections.abc import Callable
from pathlib import Path

import pytest

from phink import PhinkConfig, Repository


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.integration)
            if shutil.which("git") is None:
                item.add_marker(pytest.mark.skip(reason="git executable not found"))


type RepoFactory = Callable[[str], Repository]


@pytest.fixture
def make_repo(tmp_path: Path, phink_config: PhinkConfig) -> RepoFactory:
    """Build a Repository for a not-yet-existing directory under tmp_path."""

    def factory(name: str) -> Repository:
        return Repository(tmp_path / name, allow_missing=True, config=phink_config)

    return factory


@pytest.fixture
def new_repo(make_repo: RepoFactory) -> Repository:
    """An initialized, empty repository on branch main."""
    repo = make_repo("project")
    _ = repo.init().execute()
    return repo


type CommitFile = Callable[[Repository, str, str], None]


def _commit_file(repo: Repository, name: str, content: str) -> None:
    path = repo.cwd / name
    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text(content)
    _ = repo.add().file_pattern(name).execute()
    _ = repo.commit(f"Add {name}")


@pytest.fixture
def commit_file() -> CommitFile:
    """Write a file, stage it and commit it."""
    return _commit_file

from collections.abc import Iterator
from pathlib import Path

import pytest
from git import Repo


@pytest.fixture(autouse=True)
def _isolated_git(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep git away from user config and from repos above the temp dir."""
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(tmp_path / "gitconfig"))
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path.parent))
    for role in ("AUTHOR", "COMMITTER"):
        monkeypatch.setenv(f"GIT_{role}_NAME", "Test User")
        monkeypatch.setenv(f"GIT_{role}_EMAIL", "test@example.com")


@pytest.fixture
def repo(tmp_path: Path) -> Iterator[Repo]:
    """A repo named `my-repo` with a single commit and a clean worktree."""
    path = tmp_path / "my-repo"
    path.mkdir()
    with Repo.init(path) as repo:
        (path / "tracked.txt").write_text("one\n")
        repo.index.add(["tracked.txt"])
        repo.index.commit("initial")
        yield repo


@pytest.fixture
def repo_dir(repo: Repo) -> Path:
    """The working tree of `repo`."""
    assert repo.working_tree_dir is not None
    return Path(repo.working_tree_dir)

"""Test configuration and fixtures."""

from pathlib import Path
from typing import Callable, Iterator

import pytest
from git import Actor, Repo


@pytest.fixture
def test_repo(tmp_path: Path) -> Path:
    """Create a repository with a few branches, main checked out.

    Branches, newest commit first: feature/long-running-refactor, feature/x, main
    """
    local_path = tmp_path / "local"
    local_path.mkdir()
    repo = Repo.init(local_path)

    author = Actor("Test User", "test@example.com")
    repo.config_writer().set_value("user", "name", author.name).release()
    repo.config_writer().set_value("user", "email", author.email).release()

    readme = local_path / "README.md"
    readme.write_text("# Test Repository")
    repo.index.add(["README.md"])
    repo.index.commit(
        "Initial commit",
        author=author,
        committer=author,
        author_date="2024-01-01T10:00:00",
        commit_date="2024-01-01T10:00:00",
    )

    # Ensure the default branch is called main, whatever init.defaultBranch says
    if "main" not in repo.heads:
        repo.active_branch.rename("main")
    main_branch = repo.heads.main

    def create_branch(name: str, date: str) -> None:
        """Create a branch with one commit of its own."""
        main_branch.checkout()
        branch = repo.create_head(name)
        branch.checkout()
        test_file = local_path / f"{name.replace('/', '_')}.txt"
        test_file.write_text(f"{name} content")
        repo.index.add([test_file.name])
        repo.index.commit(f"Add {name}", author=author, committer=author, author_date=date, commit_date=date)

    create_branch("feature/x", "2024-01-02T10:00:00")
    create_branch("feature/long-running-refactor", "2024-01-03T10:00:00")

    main_branch.checkout()
    return local_path


@pytest.fixture
def empty_repo(tmp_path: Path) -> Path:
    """Create a repository without any commits, hence without branches."""
    path = tmp_path / "empty"
    path.mkdir()
    Repo.init(path)
    return path


@pytest.fixture
def answers() -> Callable[..., Callable[[str], str]]:
    """Build a fake line reader that replays the given answers, then hits EOF."""

    def make(*lines: str) -> Callable[[str], str]:
        remaining: Iterator[str] = iter(lines)

        def read(prompt: str) -> str:
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        return read

    return make


@pytest.fixture
def branch_listing() -> str:
    """Two-branch `git branch -v` listing with main checked out."""
    return "* main 1a2b3c4d Initial commit\n  feature/x a1b2c3d4 WIP"

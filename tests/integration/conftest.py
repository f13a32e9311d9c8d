"""Shared fixtures for integration tests that run the real git binary."""

import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest


def run_git(repo: Path, *args: str) -> str:
    """Run git in ``repo`` and return its stdout, failing the test on error."""
    result = subprocess.run(
        ["git", *args],
        cwd=repo,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


def init_git_repo(repo: Path, branch: str) -> None:
    """Initialize a repository with one commit on ``branch``."""
    run_git(repo, "init", "-b", branch)
    run_git(repo, "config", "user.name", "Test User")
    run_git(repo, "config", "user.email", "test@example.com")
    run_git(repo, "config", "commit.gpgsign", "false")
    run_git(repo, "config", "tag.gpgsign", "false")
    (repo / "README.md").write_text("# Test\n", encoding="utf-8")
    run_git(repo, "add", "README.md")
    run_git(repo, "commit", "-m", "Initial commit")


def commit_file(repo: Path, name: str, content: str) -> str:
    """Commit a file and return the new HEAD sha."""
    (repo / name).write_text(content, encoding="utf-8")
    run_git(repo, "add", name)
    run_git(repo, "commit", "-m", f"Add {name}")
    return run_git(repo, "rev-parse", "HEAD").strip()


def add_bare_remote(repo: Path, remote_dir: Path, name: str) -> None:
    """Create a bare repository at ``remote_dir`` and register it as ``name``."""
    remote_dir.mkdir()
    run_git(remote_dir, "init", "--bare")
    run_git(repo, "remote", "add", name, str(remote_dir))


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """A fresh repository with a single commit on main."""
    repo = tmp_path / "repo"
    repo.mkdir()
    init_git_repo(repo, "main")
    return repo


@pytest.fixture(name="git")
def git_fixture() -> Callable[..., str]:
    """The run_git helper, for tests that need to prepare repository state."""
    return run_git


@pytest.fixture(name="commit")
def commit_fixture() -> Callable[[Path, str, str], str]:
    return commit_file


@pytest.fixture(name="bare_remote")
def bare_remote_fixture() -> Callable[[Path, Path, str], None]:
    return add_bare_remote

"""Fixtures for integration tests that run the real git executable."""

import subprocess
from pathlib import Path

import pytest

from gittag.config import GitTagConfig
from gittag.gateway.tag_ops.real import RealGitTagOps
from gittag.manager import TagManager


def run_git(cwd: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args], cwd=cwd, capture_output=True, text=True, check=True
    )
    return result.stdout


def init_git_repo(repo: Path) -> None:
    """Create a repository with one commit so tags have something to point at."""
    run_git(repo, "init", "-b", "main")
    run_git(repo, "config", "user.email", "test@example.com")
    run_git(repo, "config", "user.name", "Test User")
    run_git(repo, "config", "tag.gpgSign", "false")
    (repo / "README.md").write_text("# Test\n", encoding="utf-8")
    run_git(repo, "add", "README.md")
    run_git(repo, "commit", "-m", "Initial commit")


@pytest.fixture
def remote_repo(tmp_path: Path) -> Path:
    remote = tmp_path / "remote.git"
    subprocess.run(
        ["git", "init", "--bare", str(remote)], capture_output=True, text=True, check=True
    )
    return remote


@pytest.fixture
def local_repo(tmp_path: Path, remote_repo: Path) -> Path:
    repo = tmp_path / "repo"
    repo.mkdir()
    init_git_repo(repo)
    run_git(repo, "remote", "add", "origin", str(remote_repo))
    return repo


@pytest.fixture
def manager(local_repo: Path) -> TagManager:
    return TagManager(RealGitTagOps(), local_repo, GitTagConfig())

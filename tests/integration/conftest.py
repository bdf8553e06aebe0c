"""Helpers and fixtures for tests that run a real git."""

import os
import subprocess
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_git_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the user's and the system's git configuration out of the tests."""
    global_config = tmp_path / "gitconfig"
    global_config.write_text("", encoding="utf-8")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(global_config))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")


def init_git_repo(repo: Path, branch: str) -> None:
    """Initialize a repository on `branch` with one commit."""
    subprocess.run(["git", "init", "--quiet", repo], check=True)
    subprocess.run(["git", "symbolic-ref", "HEAD", f"refs/heads/{branch}"], cwd=repo, check=True)
    subprocess.run(["git", "config", "user.name", "Test User"], cwd=repo, check=True)
    subprocess.run(["git", "config", "user.email", "test@example.com"], cwd=repo, check=True)
    commit_file(repo, "README.md", "# Test\n", "Initial commit", timestamp=1_700_000_000)


def commit_file(repo: Path, name: str, content: str, message: str, *, timestamp: int) -> str:
    """Commit one file on the current branch with a fixed commit time.

    Returns:
        The new commit's object id
    """
    (repo / name).write_text(content, encoding="utf-8")
    subprocess.run(["git", "add", name], cwd=repo, check=True)
    date = f"@{timestamp} +0000"
    env = {**os.environ, "GIT_AUTHOR_DATE": date, "GIT_COMMITTER_DATE": date}
    subprocess.run(["git", "commit", "--quiet", "-m", message], cwd=repo, check=True, env=env)
    return git_output(repo, "rev-parse", "HEAD")


def create_branch_with_commit(repo: Path, branch: str, *, base: str, timestamp: int) -> str:
    """Create `branch` from `base` with one commit of its own, then return to `base`."""
    subprocess.run(["git", "checkout", "--quiet", "-b", branch, base], cwd=repo, check=True)
    sha = commit_file(
        repo, f"{branch}.txt", f"{branch}\n", f"Work on {branch}", timestamp=timestamp
    )
    subprocess.run(["git", "checkout", "--quiet", base], cwd=repo, check=True)
    return sha


def git_output(repo: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args], cwd=repo, capture_output=True, text=True, check=True
    )
    return result.stdout.strip()

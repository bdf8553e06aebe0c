"""Tests for FakeGitRepoOps."""

from pathlib import Path

import pytest

from git_select_branch.gateway.git.repo_ops.fake import FakeGitRepoOps
from git_select_branch.subprocess_utils import GitCommandError


def test_discovers_root_from_subdirectory() -> None:
    fake = FakeGitRepoOps(repository_roots={Path("/repo")})

    assert fake.discover_repository_root(Path("/repo/a/b")) == Path("/repo")


def test_unknown_path_is_none() -> None:
    fake = FakeGitRepoOps(repository_roots={Path("/repo")})

    assert fake.discover_repository_root(Path("/elsewhere")) is None


def test_broken_root_raises_git_error() -> None:
    fake = FakeGitRepoOps(broken_roots={Path("/repo"): "fatal: bad config line 1"})

    with pytest.raises(GitCommandError, match="bad config line 1"):
        fake.discover_repository_root(Path("/repo/sub"))

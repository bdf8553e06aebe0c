"""Integration tests for RealGitBranchOps against a real repository."""

import subprocess
from pathlib import Path

import pytest

from git_select_branch.gateway.git.abc import BranchKind, BranchRef
from git_select_branch.gateway.git.branch_ops.real import RealGitBranchOps
from git_select_branch.subprocess_utils import GitCommandError
from tests.integration.conftest import (
    commit_file,
    create_branch_with_commit,
    git_output,
    init_git_repo,
)


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    repo = tmp_path / "repo"
    repo.mkdir()
    init_git_repo(repo, "main")
    return repo


def test_get_current_branch(repo: Path) -> None:
    assert RealGitBranchOps().get_current_branch(repo) == "main"


def test_get_current_branch_detached(repo: Path) -> None:
    subprocess.run(["git", "checkout", "--quiet", "--detach"], cwd=repo, check=True)

    assert RealGitBranchOps().get_current_branch(repo) is None


def test_get_current_branch_unborn(tmp_path: Path) -> None:
    repo = tmp_path / "empty"
    subprocess.run(["git", "init", "--quiet", repo], check=True)

    assert RealGitBranchOps().get_current_branch(repo) is None


def test_list_branch_refs_local_only(repo: Path) -> None:
    sha = create_branch_with_commit(repo, "feature", base="main", timestamp=1_700_000_100)
    subprocess.run(["git", "update-ref", "refs/remotes/origin/feature", sha], cwd=repo, check=True)

    refs = RealGitBranchOps().list_branch_refs(repo, include_remote=False)

    assert sorted(ref.refname for ref in refs) == ["refs/heads/feature", "refs/heads/main"]
    assert all(ref.kind is BranchKind.LOCAL for ref in refs)


def test_list_branch_refs_skips_symbolic_remote_head(repo: Path) -> None:
    sha = git_output(repo, "rev-parse", "HEAD")
    subprocess.run(["git", "update-ref", "refs/remotes/origin/main", sha], cwd=repo, check=True)
    subprocess.run(
        ["git", "symbolic-ref", "refs/remotes/origin/HEAD", "refs/remotes/origin/main"],
        cwd=repo,
        check=True,
    )

    refs = RealGitBranchOps().list_branch_refs(repo, include_remote=True)

    assert BranchRef(refname="refs/remotes/origin/main", kind=BranchKind.REMOTE) in refs
    assert all(ref.refname != "refs/remotes/origin/HEAD" for ref in refs)


def test_read_tip_commit(repo: Path) -> None:
    commit_file(repo, "a.txt", "a\n", "Subject line\n\nBody text", timestamp=1_700_000_500)

    tip = RealGitBranchOps().read_tip_commit(repo, "refs/heads/main")

    assert tip is not None
    assert tip.commit_time.seconds == 1_700_000_500
    assert tip.commit_time.offset_minutes == 0
    assert tip.author_name == "Test User"
    assert tip.message is not None
    assert tip.message.startswith("Subject line")
    assert "Body text" in tip.message


def test_read_tip_commit_of_non_commit_ref(repo: Path) -> None:
    blob = subprocess.run(
        ["git", "hash-object", "-w", "--stdin"],
        cwd=repo,
        input="blob\n",
        capture_output=True,
        text=True,
        check=True,
    ).stdout.strip()
    subprocess.run(["git", "update-ref", "refs/remotes/origin/weird", blob], cwd=repo, check=True)

    assert RealGitBranchOps().read_tip_commit(repo, "refs/remotes/origin/weird") is None


def test_resolve_object_missing_ref(repo: Path) -> None:
    with pytest.raises(GitCommandError, match="resolve reference 'refs/heads/nope'"):
        RealGitBranchOps().resolve_object(repo, "refs/heads/nope")


def test_checkout_local_branch(repo: Path) -> None:
    create_branch_with_commit(repo, "feature", base="main", timestamp=1_700_000_100)
    ops = RealGitBranchOps()

    oid = ops.resolve_object(repo, "refs/heads/feature")
    ops.checkout_tree(repo, oid)
    ops.set_head(repo, "refs/heads/feature")

    assert ops.get_current_branch(repo) == "feature"
    assert (repo / "feature.txt").read_text(encoding="utf-8") == "feature\n"
    assert git_output(repo, "status", "--porcelain") == ""


def test_checkout_remote_branch_detaches_head(repo: Path) -> None:
    sha = create_branch_with_commit(repo, "topic", base="main", timestamp=1_700_000_100)
    subprocess.run(["git", "update-ref", "refs/remotes/origin/topic", sha], cwd=repo, check=True)
    subprocess.run(["git", "branch", "--quiet", "-D", "topic"], cwd=repo, check=True)
    ops = RealGitBranchOps()

    oid = ops.resolve_object(repo, "refs/remotes/origin/topic")
    ops.checkout_tree(repo, oid)
    ops.set_head(repo, "refs/remotes/origin/topic")

    assert ops.get_current_branch(repo) is None
    assert git_output(repo, "rev-parse", "HEAD") == sha
    assert (repo / "topic.txt").exists()


def test_checkout_tree_refuses_to_overwrite_local_changes(repo: Path) -> None:
    commit_file(repo, "shared.txt", "main\n", "Add shared", timestamp=1_700_000_010)
    subprocess.run(["git", "checkout", "--quiet", "-b", "other"], cwd=repo, check=True)
    commit_file(repo, "shared.txt", "other\n", "Change shared", timestamp=1_700_000_020)
    subprocess.run(["git", "checkout", "--quiet", "main"], cwd=repo, check=True)
    (repo / "shared.txt").write_text("dirty\n", encoding="utf-8")
    ops = RealGitBranchOps()

    oid = ops.resolve_object(repo, "refs/heads/other")
    with pytest.raises(GitCommandError):
        ops.checkout_tree(repo, oid)

    assert ops.get_current_branch(repo) == "main"
    assert (repo / "shared.txt").read_text(encoding="utf-8") == "dirty\n"


def test_get_current_branch_ignores_tag_with_same_name(repo: Path) -> None:
    subprocess.run(["git", "tag", "main"], cwd=repo, check=True)

    assert RealGitBranchOps().get_current_branch(repo) == "main"

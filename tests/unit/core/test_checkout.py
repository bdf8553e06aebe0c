"""Tests for checkout_branch."""

from pathlib import Path

import pytest

from git_select_branch.core.checkout import checkout_branch
from git_select_branch.core.errors import CheckoutError
from git_select_branch.core.types import BranchChoice
from git_select_branch.gateway.git.abc import BranchKind
from git_select_branch.gateway.git.branch_ops.fake import FakeGitBranchOps
from git_select_branch.gateway.git.fake import FakeGit
from tests.fakes.branches import make_record

REPO = Path("/repo")


def test_local_branch_checkout_runs_all_steps() -> None:
    branch_ops = FakeGitBranchOps(
        current_branches={REPO: "main"},
        object_ids={"refs/heads/feature": "abc123"},
    )
    choice = BranchChoice(record=make_record("feature", 1))

    checkout_branch(FakeGit(branch=branch_ops), REPO, choice)

    assert branch_ops.resolved_refs == ["refs/heads/feature"]
    assert branch_ops.checked_out_trees == [(REPO, "abc123")]
    assert branch_ops.head_updates == [(REPO, "refs/heads/feature")]
    assert branch_ops.get_current_branch(REPO) == "feature"


def test_remote_branch_checkout_uses_remote_ref() -> None:
    branch_ops = FakeGitBranchOps(
        current_branches={REPO: "main"},
        object_ids={"refs/remotes/origin/d": "def456"},
    )
    choice = BranchChoice(record=make_record("origin/d", 1, kind=BranchKind.REMOTE))

    checkout_branch(FakeGit(branch=branch_ops), REPO, choice)

    assert branch_ops.head_updates == [(REPO, "refs/remotes/origin/d")]
    assert branch_ops.get_current_branch(REPO) is None


def test_resolve_failure_stops_before_touching_tree() -> None:
    branch_ops = FakeGitBranchOps(current_branches={REPO: "main"})
    choice = BranchChoice(record=make_record("gone", 1))

    with pytest.raises(CheckoutError) as exc_info:
        checkout_branch(FakeGit(branch=branch_ops), REPO, choice)

    assert exc_info.value.refname == "refs/heads/gone"
    assert branch_ops.checked_out_trees == []
    assert branch_ops.head_updates == []


def test_tree_failure_leaves_head_alone() -> None:
    branch_ops = FakeGitBranchOps(
        current_branches={REPO: "main"},
        object_ids={"refs/heads/feature": "abc123"},
        checkout_tree_failures={"abc123": "error: Entry 'a.txt' not uptodate. Cannot merge."},
    )
    choice = BranchChoice(record=make_record("feature", 1))

    with pytest.raises(CheckoutError) as exc_info:
        checkout_branch(FakeGit(branch=branch_ops), REPO, choice)

    message = str(exc_info.value)
    assert message.startswith("checkout: could not check out 'refs/heads/feature'")
    assert "not uptodate" in message
    assert branch_ops.head_updates == []
    assert branch_ops.get_current_branch(REPO) == "main"


def test_head_failure_is_checkout_error() -> None:
    branch_ops = FakeGitBranchOps(
        object_ids={"refs/heads/feature": "abc123"},
        set_head_failures={"refs/heads/feature": "fatal: cannot lock ref"},
    )
    choice = BranchChoice(record=make_record("feature", 1))

    with pytest.raises(CheckoutError, match="cannot lock ref"):
        checkout_branch(FakeGit(branch=branch_ops), REPO, choice)

    assert branch_ops.checked_out_trees == [(REPO, "abc123")]

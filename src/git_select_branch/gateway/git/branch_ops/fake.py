"""Fake Git branch operations for testing."""

from __future__ import annotations

from pathlib import Path

from git_select_branch.gateway.git.abc import BranchKind, BranchRef, TipCommit
from git_select_branch.gateway.git.branch_ops.abc import GitBranchOps
from git_select_branch.subprocess_utils import GitCommandError


class FakeGitBranchOps(GitBranchOps):
    """In-memory fake implementation of Git branch operations.

    State Management:
    -----------------
    This fake maintains mutable state to simulate git's stateful behavior.
    set_head() updates the current branch so later queries observe the switch.

    Mutation Tracking:
    -----------------
    This fake tracks mutations for test assertions via read-only properties:
    - resolved_refs: References resolved via resolve_object()
    - checked_out_trees: Object ids materialized via checkout_tree()
    - head_updates: References HEAD was pointed at via set_head()
    """

    def __init__(
        self,
        *,
        current_branches: dict[Path, str | None] | None = None,
        branch_refs: dict[Path, list[BranchRef]] | None = None,
        tip_commits: dict[str, TipCommit] | None = None,
        object_ids: dict[str, str] | None = None,
        checkout_tree_failures: dict[str, str] | None = None,
        set_head_failures: dict[str, str] | None = None,
    ) -> None:
        """Create FakeGitBranchOps with pre-configured state.

        Args:
            current_branches: Mapping of repo_root -> current branch (None = detached)
            branch_refs: Mapping of repo_root -> listed refs, local and remote, in order
            tip_commits: Mapping of refname -> tip commit. Refs missing here do not
                peel to a commit.
            object_ids: Mapping of refname -> object id. Refs missing here fail to resolve.
            checkout_tree_failures: Mapping of object id -> error message for checkout_tree
            set_head_failures: Mapping of refname -> error message for set_head
        """
        self._current_branches = current_branches if current_branches is not None else {}
        self._branch_refs = branch_refs if branch_refs is not None else {}
        self._tip_commits = tip_commits if tip_commits is not None else {}
        self._object_ids = object_ids if object_ids is not None else {}
        self._checkout_tree_failures = (
            checkout_tree_failures if checkout_tree_failures is not None else {}
        )
        self._set_head_failures = set_head_failures if set_head_failures is not None else {}

        # Mutation tracking
        self._resolved_refs: list[str] = []
        self._checked_out_trees: list[tuple[Path, str]] = []
        self._head_updates: list[tuple[Path, str]] = []

    # ============================================================================
    # Query Operations
    # ============================================================================

    def get_current_branch(self, repo_root: Path) -> str | None:
        """Return the configured current branch for repo_root."""
        return self._current_branches.get(repo_root)

    def list_branch_refs(self, repo_root: Path, *, include_remote: bool) -> list[BranchRef]:
        """Return configured refs, dropping remote ones unless requested."""
        refs = self._branch_refs.get(repo_root, [])
        if include_remote:
            return list(refs)
        return [ref for ref in refs if ref.kind is BranchKind.LOCAL]

    def read_tip_commit(self, repo_root: Path, refname: str) -> TipCommit | None:
        """Return the configured tip commit, or None if refname has none."""
        return self._tip_commits.get(refname)

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    def resolve_object(self, repo_root: Path, refname: str) -> str:
        """Return the configured object id, raising like the real gateway otherwise."""
        self._resolved_refs.append(refname)
        if refname not in self._object_ids:
            raise GitCommandError(
                operation_context=f"resolve reference '{refname}'",
                cmd=["git", "rev-parse", "--verify", refname],
                returncode=128,
                stderr="fatal: Needed a single revision",
            )
        return self._object_ids[refname]

    def checkout_tree(self, repo_root: Path, object_id: str) -> None:
        """Record the checkout, or raise the configured failure."""
        if object_id in self._checkout_tree_failures:
            raise GitCommandError(
                operation_context=f"update working tree to '{object_id}'",
                cmd=["git", "read-tree", "-m", "-u", "HEAD", object_id],
                returncode=128,
                stderr=self._checkout_tree_failures[object_id],
            )
        self._checked_out_trees.append((repo_root, object_id))

    def set_head(self, repo_root: Path, refname: str) -> None:
        """Record the HEAD update and move the current branch."""
        if refname in self._set_head_failures:
            raise GitCommandError(
                operation_context=f"set HEAD to '{refname}'",
                cmd=["git", "symbolic-ref", "HEAD", refname],
                returncode=128,
                stderr=self._set_head_failures[refname],
            )
        self._head_updates.append((repo_root, refname))
        prefix = BranchKind.LOCAL.ref_prefix
        if refname.startswith(prefix):
            self._current_branches[repo_root] = refname[len(prefix) :]
        else:
            self._current_branches[repo_root] = None

    # ============================================================================
    # Mutation Tracking Properties
    # ============================================================================

    @property
    def resolved_refs(self) -> list[str]:
        """Read-only access to resolve_object calls for test assertions."""
        return list(self._resolved_refs)

    @property
    def checked_out_trees(self) -> list[tuple[Path, str]]:
        """Read-only access to checkout_tree calls for test assertions."""
        return list(self._checked_out_trees)

    @property
    def head_updates(self) -> list[tuple[Path, str]]:
        """Read-only access to set_head calls for test assertions."""
        return list(self._head_updates)

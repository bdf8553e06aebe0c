"""Abstract base class for Git branch operations.

This sub-gateway holds both the queries the branch catalog is built from and
the three mutations a checkout is made of.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from git_select_branch.gateway.git.abc import BranchRef, TipCommit


class GitBranchOps(ABC):
    """Abstract interface for Git branch operations.

    All implementations (real and fake) must implement this interface.
    """

    # ============================================================================
    # Query Operations
    # ============================================================================

    @abstractmethod
    def get_current_branch(self, repo_root: Path) -> str | None:
        """Get the currently checked-out branch.

        Args:
            repo_root: Path to the repository root

        Returns:
            Branch name, or None when HEAD is detached or unborn
        """
        ...

    @abstractmethod
    def list_branch_refs(self, repo_root: Path, *, include_remote: bool) -> list[BranchRef]:
        """List branch references in the repository.

        Symbolic references (such as refs/remotes/origin/HEAD) are not listed.

        Args:
            repo_root: Path to the repository root
            include_remote: Also list remote-tracking branches under refs/remotes/

        Returns:
            Raw branch handles, in no particular order
        """
        ...

    @abstractmethod
    def read_tip_commit(self, repo_root: Path, refname: str) -> TipCommit | None:
        """Resolve a reference to the commit at its tip.

        Args:
            repo_root: Path to the repository root
            refname: Fully-qualified reference name

        Returns:
            Tip commit metadata, or None if the reference does not peel to a commit
        """
        ...

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    @abstractmethod
    def resolve_object(self, repo_root: Path, refname: str) -> str:
        """Resolve a reference to the object id it names.

        Args:
            repo_root: Path to the repository root
            refname: Fully-qualified reference name

        Returns:
            Full object id

        Raises:
            GitCommandError: If the reference cannot be resolved
        """
        ...

    @abstractmethod
    def checkout_tree(self, repo_root: Path, object_id: str) -> None:
        """Update the index and working tree to match the tree of an object.

        Local modifications that would be overwritten make this fail without
        touching the working tree.

        Args:
            repo_root: Path to the repository root
            object_id: Commit (or tree-ish) to materialize

        Raises:
            GitCommandError: If the working tree cannot be updated
        """
        ...

    @abstractmethod
    def set_head(self, repo_root: Path, refname: str) -> None:
        """Point HEAD at a reference.

        A reference under refs/heads/ makes HEAD symbolic. Any other reference
        detaches HEAD at the commit it resolves to.

        Args:
            repo_root: Path to the repository root
            refname: Fully-qualified reference name

        Raises:
            GitCommandError: If HEAD cannot be updated
        """
        ...

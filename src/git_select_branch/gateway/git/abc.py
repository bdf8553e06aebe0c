"""High-level git operations interface.

This module provides a clean abstraction over git subprocess calls, making the
branch selection pipeline testable without a real repository.

Architecture:
- Git: Abstract base class grouping the sub-gateways
- RealGit: Production implementation using subprocess
- FakeGit: In-memory implementation for tests
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from git_select_branch.gateway.git.branch_ops.abc import GitBranchOps
    from git_select_branch.gateway.git.config_ops.abc import GitConfigOps
    from git_select_branch.gateway.git.repo_ops.abc import GitRepoOps


class BranchKind(Enum):
    """Namespace a branch reference lives in."""

    LOCAL = "local"
    REMOTE = "remote"

    @property
    def ref_prefix(self) -> str:
        """Fully-qualified reference prefix, e.g. 'refs/heads/'."""
        if self is BranchKind.LOCAL:
            return "refs/heads/"
        return "refs/remotes/"


@dataclass(frozen=True)
class BranchRef:
    """Raw branch handle as listed by the repository.

    Attributes:
        refname: Fully-qualified reference, e.g. 'refs/remotes/origin/main'
        kind: Whether the reference is a local or remote-tracking branch
    """

    refname: str
    kind: BranchKind


@dataclass(frozen=True)
class CommitTime:
    """Commit timestamp as recorded by git.

    Attributes:
        seconds: Seconds since the Unix epoch
        offset_minutes: Committer timezone offset from UTC in minutes
    """

    seconds: int
    offset_minutes: int = 0


@dataclass(frozen=True)
class TipCommit:
    """Metadata of the commit a branch points to."""

    commit_time: CommitTime
    message: str | None
    author_name: str | None


# ============================================================================
# Abstract Interface
# ============================================================================


class Git(ABC):
    """Abstract interface for git operations.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    @property
    @abstractmethod
    def repo(self) -> GitRepoOps:
        """Access repository location operations subgateway."""
        ...

    @property
    @abstractmethod
    def branch(self) -> GitBranchOps:
        """Access branch operations subgateway."""
        ...

    @property
    @abstractmethod
    def config(self) -> GitConfigOps:
        """Access configuration operations subgateway."""
        ...

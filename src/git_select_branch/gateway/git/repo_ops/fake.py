"""Fake implementation of git repository operations for testing."""

from pathlib import Path

from git_select_branch.gateway.git.repo_ops.abc import GitRepoOps
from git_select_branch.subprocess_utils import GitCommandError


class FakeGitRepoOps(GitRepoOps):
    """In-memory fake that knows a fixed set of repository roots.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(
        self,
        *,
        repository_roots: set[Path] | None = None,
        broken_roots: dict[Path, str] | None = None,
    ) -> None:
        """Create FakeGitRepoOps.

        Args:
            repository_roots: Working tree roots that exist. A cwd at or below
                one of them discovers it.
            broken_roots: Mapping of root -> git error message for repositories
                git finds but cannot open
        """
        self._repository_roots = repository_roots if repository_roots is not None else set()
        self._broken_roots = broken_roots if broken_roots is not None else {}

    def discover_repository_root(self, cwd: Path) -> Path | None:
        """Walk up from cwd until a configured root is found."""
        for candidate in [cwd, *cwd.parents]:
            if candidate in self._broken_roots:
                raise GitCommandError(
                    operation_context="find repository root",
                    cmd=["git", "rev-parse", "--show-toplevel"],
                    returncode=128,
                    stderr=self._broken_roots[candidate],
                )
            if candidate in self._repository_roots:
                return candidate
        return None

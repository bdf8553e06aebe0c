"""Real implementation of git repository operations."""

import subprocess
from pathlib import Path

from git_select_branch.gateway.git.repo_ops.abc import GitRepoOps
from git_select_branch.subprocess_utils import GitCommandError

# Reported by git when neither cwd nor any parent holds a repository.
_NOT_A_REPOSITORY = "not a git repository"


class RealGitRepoOps(GitRepoOps):
    """Real implementation of Git repository operations using subprocess."""

    def discover_repository_root(self, cwd: Path) -> Path | None:
        """Find the repository root with git rev-parse --show-toplevel."""
        cmd = ["git", "rev-parse", "--show-toplevel"]
        try:
            result = subprocess.run(
                cmd,
                cwd=cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError:
            # cwd was removed out from under us, or git is not installed
            return None
        if result.returncode != 0:
            stderr = result.stderr.strip()
            if _NOT_A_REPOSITORY in stderr.lower():
                return None
            raise GitCommandError(
                operation_context="find repository root",
                cmd=cmd,
                returncode=result.returncode,
                stderr=stderr,
            )
        toplevel = result.stdout.strip()
        if not toplevel:
            return None
        return Path(toplevel)

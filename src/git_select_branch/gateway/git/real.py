"""Production implementation of git operations using subprocess."""

from git_select_branch.gateway.git.abc import Git
from git_select_branch.gateway.git.branch_ops.abc import GitBranchOps
from git_select_branch.gateway.git.branch_ops.real import RealGitBranchOps
from git_select_branch.gateway.git.config_ops.abc import GitConfigOps
from git_select_branch.gateway.git.config_ops.real import RealGitConfigOps
from git_select_branch.gateway.git.repo_ops.abc import GitRepoOps
from git_select_branch.gateway.git.repo_ops.real import RealGitRepoOps


class RealGit(Git):
    """Production implementation of Git composed of subprocess-backed sub-gateways."""

    def __init__(self) -> None:
        self._repo = RealGitRepoOps()
        self._branch = RealGitBranchOps()
        self._config = RealGitConfigOps()

    @property
    def repo(self) -> GitRepoOps:
        """Access repository location operations subgateway."""
        return self._repo

    @property
    def branch(self) -> GitBranchOps:
        """Access branch operations subgateway."""
        return self._branch

    @property
    def config(self) -> GitConfigOps:
        """Access configuration operations subgateway."""
        return self._config

"""Fake git operations for testing.

FakeGit is an in-memory implementation that accepts pre-configured
sub-gateway fakes in its constructor. Construct instances directly with
keyword arguments.
"""

from __future__ import annotations

from git_select_branch.gateway.git.abc import Git
from git_select_branch.gateway.git.branch_ops.abc import GitBranchOps
from git_select_branch.gateway.git.branch_ops.fake import FakeGitBranchOps
from git_select_branch.gateway.git.config_ops.abc import GitConfigOps
from git_select_branch.gateway.git.config_ops.fake import FakeGitConfigOps
from git_select_branch.gateway.git.repo_ops.abc import GitRepoOps
from git_select_branch.gateway.git.repo_ops.fake import FakeGitRepoOps


class FakeGit(Git):
    """In-memory fake implementation of git operations.

    Sub-gateways not passed in are empty fakes: no repositories, no branches
    and no configuration. Tests keep a reference to the sub-gateway fakes they
    construct to assert on mutation tracking.

    Examples:
    ---------
        branch_ops = FakeGitBranchOps(current_branches={repo: "main"})
        git = FakeGit(
            repo=FakeGitRepoOps(repository_roots={repo}),
            branch=branch_ops,
        )
        ...
        assert branch_ops.head_updates == [(repo, "refs/heads/feature")]
    """

    def __init__(
        self,
        *,
        repo: FakeGitRepoOps | None = None,
        branch: FakeGitBranchOps | None = None,
        config: FakeGitConfigOps | None = None,
    ) -> None:
        self._repo = repo if repo is not None else FakeGitRepoOps()
        self._branch = branch if branch is not None else FakeGitBranchOps()
        self._config = config if config is not None else FakeGitConfigOps()

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

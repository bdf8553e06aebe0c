"""Switch the working tree to a chosen branch."""

import logging
from pathlib import Path

from git_select_branch.core.errors import CheckoutError
from git_select_branch.core.types import BranchChoice
from git_select_branch.gateway.git.abc import Git
from git_select_branch.subprocess_utils import GitCommandError

logger = logging.getLogger(__name__)


def checkout_branch(git: Git, repo_root: Path, choice: BranchChoice) -> None:
    """Check out the branch behind a BranchChoice.

    Resolves refs/heads/<name> (local) or refs/remotes/<name> (remote),
    updates the working tree to it, then points HEAD at the reference. The
    first failing step aborts the checkout; earlier steps are not rolled back.

    Args:
        git: Repository gateway
        repo_root: Repository to check out in
        choice: The picked option; never the current branch sentinel

    Raises:
        CheckoutError: If any step fails, naming the reference and git's error
    """
    refname = choice.record.refname
    try:
        object_id = git.branch.resolve_object(repo_root, refname)
        logger.debug("%s resolved to %s", refname, object_id)
        git.branch.checkout_tree(repo_root, object_id)
        git.branch.set_head(repo_root, refname)
    except GitCommandError as e:
        raise CheckoutError(refname, e) from e
    logger.debug("checked out %s", refname)

"""Gather branch records from the repository."""

import logging
from pathlib import Path

from git_select_branch.core.config import Configuration
from git_select_branch.core.errors import RepositoryError
from git_select_branch.core.types import BranchRecord
from git_select_branch.gateway.git.abc import BranchRef, Git
from git_select_branch.subprocess_utils import GitCommandError

logger = logging.getLogger(__name__)


def derive_shorthand(ref: BranchRef) -> str | None:
    """Strip the namespace prefix from a branch reference.

    Returns:
        'main' for refs/heads/main, 'origin/main' for refs/remotes/origin/main,
        or None when the reference is outside its kind's namespace or the
        remaining name is empty
    """
    prefix = ref.kind.ref_prefix
    if not ref.refname.startswith(prefix):
        return None
    shorthand = ref.refname[len(prefix) :]
    if not shorthand:
        return None
    return shorthand


def build_catalog(git: Git, repo_root: Path, config: Configuration) -> list[BranchRecord]:
    """Build a record for every branch whose tip resolves to a commit.

    Branches whose name or tip cannot be resolved are dropped; a single broken
    reference never aborts the listing.

    Args:
        git: Repository gateway
        repo_root: Repository to list branches of
        config: Decides whether remote-tracking branches are included

    Returns:
        Branch records in the order the repository listed them

    Raises:
        RepositoryError: If the branch listing itself fails
    """
    try:
        refs = git.branch.list_branch_refs(
            repo_root, include_remote=config.show_remote_branches
        )
    except GitCommandError as e:
        raise RepositoryError(str(e)) from e

    records: list[BranchRecord] = []
    for ref in refs:
        shorthand = derive_shorthand(ref)
        if shorthand is None:
            logger.debug("skipping %s: no shorthand name", ref.refname)
            continue

        tip = git.branch.read_tip_commit(repo_root, ref.refname)
        if tip is None:
            logger.debug("skipping %s: tip is not a commit", ref.refname)
            continue

        records.append(
            BranchRecord(
                shorthand=shorthand,
                kind=ref.kind,
                commit_time=tip.commit_time,
                commit_message=tip.message,
                commit_author_name=tip.author_name,
            )
        )

    logger.debug("catalog has %d of %d listed branches", len(records), len(refs))
    return records

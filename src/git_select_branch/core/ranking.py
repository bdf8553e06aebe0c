"""Pure ranking logic for the branch catalog."""

import logging

from git_select_branch.core.types import BranchRecord

logger = logging.getLogger(__name__)


def rank_branches(records: list[BranchRecord], limit: int | None) -> list[BranchRecord]:
    """Order branches by tip commit time, most recent first, and keep the first `limit`.

    Commit times compare by seconds, then by timezone offset. The sort is
    stable: branches with equal commit times keep their input order.

    Args:
        records: Branch records in catalog order
        limit: Number of branches to keep, or None to keep all

    Returns:
        Ranked list of records. Original list is not modified.
    """
    ranked = sorted(
        records,
        key=lambda record: (record.commit_time.seconds, record.commit_time.offset_minutes),
        reverse=True,
    )
    if limit is not None:
        ranked = ranked[:limit]
    logger.debug("ranked %d branches (limit=%s)", len(ranked), limit)
    return ranked

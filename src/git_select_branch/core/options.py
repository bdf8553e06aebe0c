"""Turn ranked branches into the positional list shown in the picker."""

from git_select_branch.core.types import (
    NO_BRANCH_LABEL,
    BranchChoice,
    BranchOption,
    BranchRecord,
    CurrentBranchSentinel,
)


def assemble_options(ranked: list[BranchRecord], current_branch: str | None) -> list[BranchOption]:
    """Pin the current branch at index 0 and list the other ranked branches after it.

    Index 0 is always a CurrentBranchSentinel: the current branch's name, or
    NO_BRANCH_LABEL when HEAD is detached or unborn. The current branch is
    left out of the tail so it never appears twice.

    Args:
        ranked: Branches in ranking order
        current_branch: Shorthand of the checked-out branch, if any

    Returns:
        Options in display order
    """
    sentinel = CurrentBranchSentinel(
        label=current_branch if current_branch is not None else NO_BRANCH_LABEL
    )
    tail: list[BranchOption] = [
        BranchChoice(record=record) for record in ranked if record.shorthand != current_branch
    ]
    return [sentinel, *tail]

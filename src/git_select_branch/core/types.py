"""Value types flowing through the branch selection pipeline."""

from __future__ import annotations

from dataclasses import dataclass

from git_select_branch.gateway.git.abc import BranchKind, CommitTime

NO_BRANCH_LABEL = "<no branch>"


@dataclass(frozen=True)
class BranchRecord:
    """A branch whose tip resolved to a commit.

    Attributes:
        shorthand: Display name, e.g. 'main' or 'origin/feature-x'
        kind: Local or remote-tracking
        commit_time: Committer time of the tip commit
        commit_message: Full message of the tip commit, if any
        commit_author_name: Author of the tip commit, if recorded
    """

    shorthand: str
    kind: BranchKind
    commit_time: CommitTime
    commit_message: str | None
    commit_author_name: str | None

    @property
    def refname(self) -> str:
        """Fully-qualified reference, e.g. 'refs/remotes/origin/feature-x'."""
        return f"{self.kind.ref_prefix}{self.shorthand}"

    @property
    def summary(self) -> str | None:
        """First line of the tip commit message."""
        if self.commit_message is None:
            return None
        first_line = self.commit_message.strip().splitlines()[:1]
        return first_line[0] if first_line else None


@dataclass(frozen=True)
class CurrentBranchSentinel:
    """The always-first option meaning "stay on the current branch"."""

    label: str


@dataclass(frozen=True)
class BranchChoice:
    """An option that checks out a branch."""

    record: BranchRecord

    @property
    def label(self) -> str:
        return self.record.shorthand


BranchOption = CurrentBranchSentinel | BranchChoice


# ============================================================================
# Selection outcomes
# ============================================================================


@dataclass(frozen=True)
class SelectionChosen:
    """The user picked the option at index."""

    index: int


@dataclass(frozen=True)
class SelectionNoneChosen:
    """The user dismissed the picker without picking anything."""


@dataclass(frozen=True)
class SelectionInterrupted:
    """The prompt was interrupted (Ctrl+C or SIGINT) while waiting for input."""


SelectionOutcome = SelectionChosen | SelectionNoneChosen | SelectionInterrupted

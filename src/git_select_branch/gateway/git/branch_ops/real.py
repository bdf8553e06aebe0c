"""Production implementation of Git branch operations using subprocess."""

import logging
import subprocess
from pathlib import Path

from git_select_branch.gateway.git.abc import BranchKind, BranchRef, CommitTime, TipCommit
from git_select_branch.gateway.git.branch_ops.abc import GitBranchOps
from git_select_branch.subprocess_utils import run_subprocess_with_context

logger = logging.getLogger(__name__)

# Unit separator: cannot appear in ref names, author names or dates.
_FIELD_SEP = "\x1f"


def parse_timezone_offset(offset: str) -> int:
    """Convert a git '+HHMM' / '-HHMM' offset into minutes east of UTC."""
    sign = -1 if offset.startswith("-") else 1
    digits = offset.lstrip("+-")
    if len(digits) != 4 or not digits.isdigit():
        return 0
    return sign * (int(digits[:2]) * 60 + int(digits[2:]))


class RealGitBranchOps(GitBranchOps):
    """Production implementation of branch operations using subprocess.

    All git operations execute actual git commands via subprocess.
    """

    # ============================================================================
    # Query Operations
    # ============================================================================

    def get_current_branch(self, repo_root: Path) -> str | None:
        """Get the currently checked-out branch.

        The name is HEAD's target with refs/heads/ stripped, so it matches the
        branch shorthand even when a tag has the same name.
        """
        result = subprocess.run(
            ["git", "symbolic-ref", "--quiet", "HEAD"],
            cwd=repo_root,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            # Detached HEAD
            return None

        refname = result.stdout.strip()
        prefix = BranchKind.LOCAL.ref_prefix
        if not refname.startswith(prefix) or refname == prefix:
            return None

        born = subprocess.run(
            ["git", "rev-parse", "--verify", "--quiet", refname],
            cwd=repo_root,
            capture_output=True,
            text=True,
            check=False,
        )
        if born.returncode != 0:
            # Unborn branch: no commits yet
            return None

        return refname[len(prefix) :]

    def list_branch_refs(self, repo_root: Path, *, include_remote: bool) -> list[BranchRef]:
        """List branch references via git for-each-ref."""
        patterns = ["refs/heads"]
        if include_remote:
            patterns.append("refs/remotes")

        result = run_subprocess_with_context(
            cmd=[
                "git",
                "for-each-ref",
                f"--format=%(refname){_FIELD_SEP}%(symref)",
                *patterns,
            ],
            operation_context="list branches",
            cwd=repo_root,
        )

        refs: list[BranchRef] = []
        for line in result.stdout.splitlines():
            if not line.strip():
                continue
            refname, _, symref = line.partition(_FIELD_SEP)
            if symref:
                # refs/remotes/<remote>/HEAD aliases another listed branch
                continue
            if refname.startswith(BranchKind.LOCAL.ref_prefix):
                refs.append(BranchRef(refname=refname, kind=BranchKind.LOCAL))
            elif refname.startswith(BranchKind.REMOTE.ref_prefix):
                refs.append(BranchRef(refname=refname, kind=BranchKind.REMOTE))
        return refs

    def read_tip_commit(self, repo_root: Path, refname: str) -> TipCommit | None:
        """Read committer time, author and message of the commit a reference peels to."""
        result = subprocess.run(
            [
                "git",
                "show",
                "--no-patch",
                "--no-color",
                f"--format=%ct{_FIELD_SEP}%ci{_FIELD_SEP}%an{_FIELD_SEP}%B",
                f"{refname}^{{commit}}",
                "--",
            ],
            cwd=repo_root,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            logger.debug("cannot peel %s to a commit: %s", refname, result.stderr.strip())
            return None

        fields = result.stdout.split(_FIELD_SEP, 3)
        if len(fields) != 4 or not fields[0].strip().lstrip("-").isdigit():
            logger.debug("unexpected commit format for %s: %r", refname, result.stdout)
            return None

        seconds, iso_date, author, message = fields
        offset = iso_date.strip().rsplit(" ", 1)[-1]
        message = message.rstrip("\n")
        return TipCommit(
            commit_time=CommitTime(
                seconds=int(seconds.strip()),
                offset_minutes=parse_timezone_offset(offset),
            ),
            message=message if message else None,
            author_name=author if author else None,
        )

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    def resolve_object(self, repo_root: Path, refname: str) -> str:
        """Resolve a reference with git rev-parse --verify."""
        result = run_subprocess_with_context(
            cmd=["git", "rev-parse", "--verify", refname],
            operation_context=f"resolve reference '{refname}'",
            cwd=repo_root,
        )
        return result.stdout.strip()

    def checkout_tree(self, repo_root: Path, object_id: str) -> None:
        """Two-way merge from HEAD into the target with git read-tree -m -u."""
        head = subprocess.run(
            ["git", "rev-parse", "--verify", "--quiet", "HEAD"],
            cwd=repo_root,
            capture_output=True,
            text=True,
            check=False,
        )
        if head.returncode == 0:
            cmd = ["git", "read-tree", "-m", "-u", "HEAD", object_id]
        else:
            # Unborn HEAD: nothing to merge from
            cmd = ["git", "read-tree", "-m", "-u", object_id]

        run_subprocess_with_context(
            cmd=cmd,
            operation_context=f"update working tree to '{object_id}'",
            cwd=repo_root,
        )

    def set_head(self, repo_root: Path, refname: str) -> None:
        """Point HEAD at a branch, or detach it for any other reference."""
        if refname.startswith(BranchKind.LOCAL.ref_prefix):
            run_subprocess_with_context(
                cmd=["git", "symbolic-ref", "HEAD", refname],
                operation_context=f"set HEAD to '{refname}'",
                cwd=repo_root,
            )
            return

        commit = run_subprocess_with_context(
            cmd=["git", "rev-parse", "--verify", f"{refname}^{{commit}}"],
            operation_context=f"resolve reference '{refname}'",
            cwd=repo_root,
        ).stdout.strip()
        run_subprocess_with_context(
            cmd=["git", "update-ref", "--no-deref", "HEAD", commit],
            operation_context=f"detach HEAD at '{refname}'",
            cwd=repo_root,
        )

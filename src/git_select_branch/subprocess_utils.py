"""Subprocess helpers that attach operation context to git failures."""

import logging
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


class GitCommandError(RuntimeError):
    """A git command exited non-zero.

    Attributes:
        operation_context: Human-readable description of what was attempted
        cmd: The command that was run
        returncode: Exit status of the command
        stderr: Captured standard error, stripped
    """

    def __init__(
        self,
        *,
        operation_context: str,
        cmd: Sequence[str],
        returncode: int,
        stderr: str,
    ) -> None:
        self.operation_context = operation_context
        self.cmd = list(cmd)
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr if stderr else f"exit status {returncode}"
        super().__init__(f"Failed to {operation_context}: {detail}")


def run_subprocess_with_context(
    *,
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path,
    check: bool = True,
    env: Mapping[str, str] | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run a command capturing text output, raising GitCommandError on failure.

    Args:
        cmd: Command and arguments
        operation_context: Description used in the error message, e.g. "list local branches"
        cwd: Working directory for the command
        check: Raise GitCommandError when the command exits non-zero
        env: Optional full environment for the child process

    Returns:
        The completed process with stdout and stderr as text

    Raises:
        GitCommandError: If check is True and the command fails
    """
    logger.debug("running %s (cwd=%s)", " ".join(cmd), cwd)
    result = subprocess.run(
        list(cmd),
        cwd=cwd,
        capture_output=True,
        text=True,
        check=False,
        env=dict(env) if env is not None else None,
    )
    if check and result.returncode != 0:
        raise GitCommandError(
            operation_context=operation_context,
            cmd=cmd,
            returncode=result.returncode,
            stderr=result.stderr.strip(),
        )
    return result

"""Application context with dependency injection."""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from git_select_branch.core.config import Configuration
from git_select_branch.gateway.git.abc import Git
from git_select_branch.gateway.git.real import RealGit
from git_select_branch.gateway.terminal.abc import Terminal
from git_select_branch.gateway.terminal.real import RealTerminal
from git_select_branch.tui.picker import Picker, create_picker


@dataclass(frozen=True)
class SelectBranchContext:
    """Immutable context holding all dependencies for one run.

    Created at the CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    git: Git
    terminal: Terminal
    picker_factory: Callable[[Configuration], Picker]
    cwd: Path  # Current working directory at CLI invocation

    @staticmethod
    def for_test(
        *,
        git: Git | None = None,
        terminal: Terminal | None = None,
        picker: Picker | None = None,
        cwd: Path | None = None,
    ) -> "SelectBranchContext":
        """Create a context from fakes, defaulting anything not given.

        Args:
            git: Git implementation (defaults to an empty FakeGit)
            terminal: Terminal (defaults to an interactive FakeTerminal)
            picker: Picker returned for every configuration (defaults to a
                FakePicker that dismisses)
            cwd: Working directory (defaults to /test/repo)

        Returns:
            SelectBranchContext wired with test doubles
        """
        from git_select_branch.gateway.git.fake import FakeGit
        from git_select_branch.gateway.terminal.fake import FakeTerminal
        from git_select_branch.tui.picker import FakePicker

        resolved_picker = picker if picker is not None else FakePicker()
        return SelectBranchContext(
            git=git if git is not None else FakeGit(),
            terminal=terminal if terminal is not None else FakeTerminal(is_interactive=True),
            picker_factory=lambda config: resolved_picker,
            cwd=cwd if cwd is not None else Path("/test/repo"),
        )


def create_context() -> SelectBranchContext:
    """Create production context with real implementations."""
    return SelectBranchContext(
        git=RealGit(),
        terminal=RealTerminal(),
        picker_factory=create_picker,
        cwd=Path.cwd(),
    )

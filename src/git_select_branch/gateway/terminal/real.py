"""Real terminal implementation using isatty() and rich's cursor control."""

import os
import sys

from rich.console import Console

from git_select_branch.gateway.terminal.abc import Terminal


class RealTerminal(Terminal):
    """Production implementation using sys.stdin.isatty() and os.isatty()."""

    def __init__(self) -> None:
        self._console = Console()

    def is_stdin_interactive(self) -> bool:
        """Check if stdin is connected to an interactive terminal.

        Returns:
            True if stdin is a TTY, False otherwise
        """
        return sys.stdin.isatty()

    def is_stdout_tty(self) -> bool:
        """Check if stdout is connected to a TTY.

        Returns:
            True if stdout is a TTY, False otherwise
        """
        return os.isatty(1)

    def show_cursor(self) -> None:
        """Emit the show-cursor control sequence when stdout is a terminal."""
        self._console.show_cursor(True)

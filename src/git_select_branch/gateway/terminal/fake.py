"""Fake Terminal implementation for testing.

FakeTerminal is an in-memory implementation that returns a configurable
interactive state and counts cursor restores, enabling fast and
deterministic tests.
"""

from git_select_branch.gateway.terminal.abc import Terminal


class FakeTerminal(Terminal):
    """In-memory fake implementation that returns configured state.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, *, is_interactive: bool, is_stdout_tty: bool | None = None) -> None:
        """Create FakeTerminal with configured TTY state.

        Args:
            is_interactive: Whether to report stdin as interactive (TTY)
            is_stdout_tty: Whether to report stdout as a TTY.
                If None, defaults to is_interactive.
        """
        self._is_interactive = is_interactive
        self._is_stdout_tty = is_stdout_tty if is_stdout_tty is not None else is_interactive
        self._show_cursor_calls = 0

    def is_stdin_interactive(self) -> bool:
        """Return the configured interactive state."""
        return self._is_interactive

    def is_stdout_tty(self) -> bool:
        """Return the configured stdout TTY state."""
        return self._is_stdout_tty

    def show_cursor(self) -> None:
        """Count the restore instead of writing to a terminal."""
        self._show_cursor_calls += 1

    @property
    def show_cursor_calls(self) -> int:
        """Number of times show_cursor() was called.

        This property is for test assertions only.
        """
        return self._show_cursor_calls

"""Terminal operations abstraction for testing.

This module provides an ABC for TTY detection and cursor cleanup so the
selection session can be tested without a real terminal.
"""

from abc import ABC, abstractmethod


class Terminal(ABC):
    """Abstract terminal operations for dependency injection."""

    @abstractmethod
    def is_stdin_interactive(self) -> bool:
        """Check if stdin is connected to an interactive terminal (TTY).

        Returns:
            True if stdin is a TTY, False otherwise
        """
        ...

    @abstractmethod
    def is_stdout_tty(self) -> bool:
        """Check if stdout is connected to a TTY.

        Returns:
            True if stdout is a TTY, False otherwise
        """
        ...

    @abstractmethod
    def show_cursor(self) -> None:
        """Make the terminal cursor visible again.

        Must be safe to call at any time, including from a signal handler and
        when the cursor is already visible.
        """
        ...

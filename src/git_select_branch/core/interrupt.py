"""Interruption handling for the interactive prompt.

The picker's terminal layer does not restore the cursor when the process is
interrupted, so the session installs one SIGINT handler for the time the
prompt is open. The handler restores the cursor and raises a flag that the
picker polls; it never unwinds the stack.
"""

import logging
import signal
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from types import FrameType

from git_select_branch.gateway.terminal.abc import Terminal

logger = logging.getLogger(__name__)


class InterruptFlag:
    """One-way flag raised when the session is interrupted."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def set(self) -> None:
        self._event.set()

    def is_set(self) -> bool:
        return self._event.is_set()


@contextmanager
def install_interrupt_handler(flag: InterruptFlag, terminal: Terminal) -> Iterator[None]:
    """Route SIGINT to `flag` for the duration of the block.

    The previous handler is restored on exit. Outside the main thread signal
    handlers cannot be installed, and the block runs without one.

    Args:
        flag: Flag to raise on SIGINT
        terminal: Terminal whose cursor is restored on SIGINT
    """

    def _handle_sigint(signum: int, frame: FrameType | None) -> None:
        terminal.show_cursor()
        flag.set()

    if threading.current_thread() is not threading.main_thread():
        logger.debug("not on the main thread; SIGINT handler not installed")
        yield
        return

    previous = signal.signal(signal.SIGINT, _handle_sigint)
    if previous is None:
        # Installed from outside Python; the closest we can restore is the default
        previous = signal.SIG_DFL
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)

"""Tests for the SIGINT handler installed around the prompt."""

import os
import signal
import threading

from git_select_branch.core.interrupt import InterruptFlag, install_interrupt_handler
from git_select_branch.gateway.terminal.fake import FakeTerminal


def test_flag_starts_clear() -> None:
    assert not InterruptFlag().is_set()


def test_flag_stays_set() -> None:
    flag = InterruptFlag()

    flag.set()
    flag.set()

    assert flag.is_set()


def test_sigint_sets_flag_and_restores_cursor() -> None:
    flag = InterruptFlag()
    terminal = FakeTerminal(is_interactive=True)

    with install_interrupt_handler(flag, terminal):
        os.kill(os.getpid(), signal.SIGINT)

    assert flag.is_set()
    assert terminal.show_cursor_calls == 1


def test_previous_handler_is_restored() -> None:
    before = signal.getsignal(signal.SIGINT)

    with install_interrupt_handler(InterruptFlag(), FakeTerminal(is_interactive=True)):
        assert signal.getsignal(signal.SIGINT) is not before

    assert signal.getsignal(signal.SIGINT) is before


def test_off_main_thread_runs_without_handler() -> None:
    before = signal.getsignal(signal.SIGINT)
    seen: list[object] = []

    def worker() -> None:
        with install_interrupt_handler(InterruptFlag(), FakeTerminal(is_interactive=True)):
            seen.append(signal.getsignal(signal.SIGINT))

    thread = threading.Thread(target=worker)
    thread.start()
    thread.join()

    assert seen == [before]

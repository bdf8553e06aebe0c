"""Tests for run_selection and option_to_item."""

import pytest

from git_select_branch.core.errors import PresentationError
from git_select_branch.core.interrupt import InterruptFlag
from git_select_branch.core.session import option_to_item, run_selection
from git_select_branch.core.types import (
    BranchChoice,
    BranchOption,
    CurrentBranchSentinel,
    SelectionChosen,
    SelectionInterrupted,
    SelectionNoneChosen,
)
from git_select_branch.gateway.terminal.fake import FakeTerminal
from git_select_branch.tui.picker import FakePicker
from git_select_branch.tui.types import PickerItem
from tests.fakes.branches import make_record


def _options() -> list[BranchOption]:
    return [
        CurrentBranchSentinel(label="main"),
        BranchChoice(record=make_record("feature", 2, message="Add feature", author="Ada")),
        BranchChoice(record=make_record("fix", 1)),
    ]


def test_pick_is_chosen_outcome() -> None:
    terminal = FakeTerminal(is_interactive=True)

    outcome = run_selection(
        _options(), FakePicker(pick_index=1), terminal=terminal, interrupt=InterruptFlag()
    )

    assert outcome == SelectionChosen(index=1)
    assert terminal.show_cursor_calls == 0


def test_picking_the_sentinel_is_still_a_choice() -> None:
    outcome = run_selection(
        _options(),
        FakePicker(pick_index=0),
        terminal=FakeTerminal(is_interactive=True),
        interrupt=InterruptFlag(),
    )

    assert outcome == SelectionChosen(index=0)


def test_dismiss_is_none_chosen() -> None:
    outcome = run_selection(
        _options(),
        FakePicker(),
        terminal=FakeTerminal(is_interactive=True),
        interrupt=InterruptFlag(),
    )

    assert outcome == SelectionNoneChosen()


def test_interrupt_restores_cursor() -> None:
    terminal = FakeTerminal(is_interactive=True)
    interrupt = InterruptFlag()

    outcome = run_selection(
        _options(), FakePicker(interrupt=True), terminal=terminal, interrupt=interrupt
    )

    assert outcome == SelectionInterrupted()
    assert interrupt.is_set()
    assert terminal.show_cursor_calls >= 1


def test_keyboard_interrupt_is_interrupted_outcome() -> None:
    terminal = FakeTerminal(is_interactive=True)

    outcome = run_selection(
        _options(),
        FakePicker(raises=KeyboardInterrupt()),
        terminal=terminal,
        interrupt=InterruptFlag(),
    )

    assert outcome == SelectionInterrupted()
    assert terminal.show_cursor_calls == 1


def test_io_error_is_presentation_error() -> None:
    with pytest.raises(PresentationError, match="terminal went away"):
        run_selection(
            _options(),
            FakePicker(raises=OSError("terminal went away")),
            terminal=FakeTerminal(is_interactive=True),
            interrupt=InterruptFlag(),
        )


@pytest.mark.parametrize(
    ("stdin_tty", "stdout_tty"),
    [(False, False), (False, True), (True, False)],
)
def test_requires_a_terminal(stdin_tty: bool, stdout_tty: bool) -> None:
    picker = FakePicker(pick_index=1)

    with pytest.raises(PresentationError):
        run_selection(
            _options(),
            picker,
            terminal=FakeTerminal(is_interactive=stdin_tty, is_stdout_tty=stdout_tty),
            interrupt=InterruptFlag(),
        )

    assert picker.presented == []


def test_picker_receives_labels_in_order() -> None:
    picker = FakePicker()

    run_selection(
        _options(), picker, terminal=FakeTerminal(is_interactive=True), interrupt=InterruptFlag()
    )

    assert [item.label for item in picker.presented[0]] == ["main", "feature", "fix"]


def test_option_to_item_describes_tip_commit() -> None:
    option = BranchChoice(record=make_record("feature", 1, message="Add x\n\nmore", author="Ada"))

    assert option_to_item(option) == PickerItem(label="feature", detail="Add x (Ada)")


def test_option_to_item_without_author() -> None:
    option = BranchChoice(record=make_record("feature", 1, message="Add x"))

    assert option_to_item(option) == PickerItem(label="feature", detail="Add x")


def test_option_to_item_sentinel_has_no_detail() -> None:
    assert option_to_item(CurrentBranchSentinel(label="main")) == PickerItem(label="main")


def test_unexpected_picker_failure_is_presentation_error() -> None:
    with pytest.raises(PresentationError, match="widget exploded"):
        run_selection(
            _options(),
            FakePicker(raises=RuntimeError("widget exploded")),
            terminal=FakeTerminal(is_interactive=True),
            interrupt=InterruptFlag(),
        )

"""Drive the interactive picker and classify how the prompt ended."""

import logging

from git_select_branch.core.errors import PresentationError
from git_select_branch.core.interrupt import InterruptFlag, install_interrupt_handler
from git_select_branch.core.types import (
    BranchChoice,
    BranchOption,
    SelectionChosen,
    SelectionInterrupted,
    SelectionNoneChosen,
    SelectionOutcome,
)
from git_select_branch.gateway.terminal.abc import Terminal
from git_select_branch.tui.picker import Picker
from git_select_branch.tui.types import PickerItem

logger = logging.getLogger(__name__)


def option_to_item(option: BranchOption) -> PickerItem:
    """Describe an option for the picker: the label plus tip commit summary and author."""
    if not isinstance(option, BranchChoice):
        return PickerItem(label=option.label)

    record = option.record
    parts = [part for part in (record.summary, record.commit_author_name) if part]
    if len(parts) == 2:
        detail = f"{parts[0]} ({parts[1]})"
    elif parts:
        detail = parts[0]
    else:
        detail = None
    return PickerItem(label=option.label, detail=detail)


def run_selection(
    options: list[BranchOption],
    picker: Picker,
    *,
    terminal: Terminal,
    interrupt: InterruptFlag,
) -> SelectionOutcome:
    """Present the options and report how the prompt ended.

    SIGINT is routed to `interrupt` while the picker runs. Whenever the flag
    was raised the cursor is restored before returning, however the picker
    returned.

    Args:
        options: Options in display order; index 0 is the current branch sentinel
        picker: Picker variant chosen by configuration
        terminal: Terminal used for the TTY check and cursor restore
        interrupt: Flag shared with the picker and the SIGINT handler

    Returns:
        SelectionChosen, SelectionNoneChosen or SelectionInterrupted

    Raises:
        PresentationError: If there is no terminal or the picker fails
    """
    if not (terminal.is_stdin_interactive() and terminal.is_stdout_tty()):
        raise PresentationError("an interactive terminal is required to pick a branch")

    items = [option_to_item(option) for option in options]
    try:
        with install_interrupt_handler(interrupt, terminal):
            index = picker.pick(items, interrupt)
    except KeyboardInterrupt:
        interrupt.set()
        index = None
    except Exception as e:
        raise PresentationError(str(e) or type(e).__name__) from e
    finally:
        if interrupt.is_set():
            terminal.show_cursor()

    if interrupt.is_set():
        outcome: SelectionOutcome = SelectionInterrupted()
    elif index is None:
        outcome = SelectionNoneChosen()
    else:
        outcome = SelectionChosen(index=index)
    logger.debug("selection outcome: %s", outcome)
    return outcome

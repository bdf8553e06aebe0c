"""Textual apps behind the interactive branch picker.

Both apps run inline below the shell prompt and exit with the index of the
picked item, or None when the user cancels. Ctrl+C is a key press inside a
Textual app rather than a signal, so it raises the interrupt flag itself;
an external SIGINT raises the same flag, which the apps poll.
"""

from collections.abc import Sequence

from rich.text import Text
from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Input, Label, OptionList
from textual.widgets.option_list import Option

from git_select_branch.core.config import Theme
from git_select_branch.core.interrupt import InterruptFlag
from git_select_branch.tui.filtering.logic import filter_option_indices
from git_select_branch.tui.types import PROMPT, PickerItem

INTERRUPT_POLL_SECONDS = 0.1


class BranchPickerApp(App[int | None]):
    """Shared behavior of the exact and fuzzy pickers.

    Displays the items in an OptionList with the first item highlighted.
    """

    ENABLE_COMMAND_PALETTE = False

    DEFAULT_CSS = """
    Screen {
        height: auto;
    }

    #prompt {
        padding: 0 1;
        text-style: bold;
        color: $accent;
    }

    #branches {
        height: auto;
        max-height: 16;
        border: none;
        padding: 0 1;
    }

    Screen.-simple #prompt {
        color: $text;
    }

    Screen.-simple #branches > .option-list--option-highlighted {
        background: $background;
        color: $text;
        text-style: bold reverse;
    }
    """

    BINDINGS = [
        Binding("escape", "dismiss_picker", "Cancel", priority=True),
        Binding("ctrl+c", "interrupt_picker", "Interrupt", show=False, priority=True),
    ]

    def __init__(
        self,
        items: Sequence[PickerItem],
        *,
        theme: Theme,
        interrupt: InterruptFlag,
    ) -> None:
        """Initialize the picker.

        Args:
            items: Items to choose from, in display order
            theme: COLORFUL shows each item's detail dimmed; SIMPLE shows labels only
            interrupt: Flag polled while the app runs and raised on Ctrl+C
        """
        super().__init__()
        self._items = list(items)
        self._picker_theme = theme
        self._interrupt = interrupt
        self._visible: list[int] = list(range(len(self._items)))

    def compose(self) -> ComposeResult:
        """Create the prompt and option list."""
        yield Label(PROMPT, id="prompt")
        yield OptionList(id="branches")

    def on_mount(self) -> None:
        """Populate the list and start polling for interruption."""
        if self._picker_theme is Theme.SIMPLE:
            self.screen.add_class("-simple")
        self._show_items(self._visible)
        self.set_interval(INTERRUPT_POLL_SECONDS, self._poll_interrupt)

    @property
    def visible_indices(self) -> list[int]:
        """Indices into the original items of the entries currently listed."""
        return list(self._visible)

    def _render_item(self, item: PickerItem) -> Text:
        if self._picker_theme is Theme.COLORFUL and item.detail:
            return Text.assemble(item.label, ("  " + item.detail, "dim"))
        return Text(item.label)

    def _show_items(self, indices: list[int]) -> None:
        self._visible = indices
        option_list = self.query_one("#branches", OptionList)
        option_list.clear_options()
        option_list.add_options(
            [Option(self._render_item(self._items[index]), id=str(index)) for index in indices]
        )
        if indices:
            option_list.highlighted = 0

    def _poll_interrupt(self) -> None:
        if self._interrupt.is_set():
            self.exit(None)

    def _pick_highlighted(self) -> None:
        option_list = self.query_one("#branches", OptionList)
        highlighted = option_list.highlighted
        if highlighted is None or highlighted >= len(self._visible):
            return
        self.exit(self._visible[highlighted])

    @on(OptionList.OptionSelected, "#branches")
    def _on_option_selected(self, event: OptionList.OptionSelected) -> None:
        if event.option.id is not None:
            self.exit(int(event.option.id))

    def action_dismiss_picker(self) -> None:
        """Close the picker without choosing anything."""
        self.exit(None)

    def action_interrupt_picker(self) -> None:
        """Treat Ctrl+C like SIGINT: raise the flag and close."""
        self._interrupt.set()
        self.exit(None)


class ExactBranchPickerApp(BranchPickerApp):
    """Plain list: arrows move, Enter picks, Escape or q cancels."""

    BINDINGS = [
        Binding("q", "dismiss_picker", "Cancel", show=False),
    ]

    def on_mount(self) -> None:
        """Populate the list and focus it."""
        super().on_mount()
        self.query_one("#branches", OptionList).focus()


class FuzzyBranchPickerApp(BranchPickerApp):
    """List with a filter input: typing narrows the list, arrows move, Enter picks."""

    DEFAULT_CSS = """
    #filter {
        border: none;
        height: 1;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("up", "cursor_up", "Up", show=False),
        Binding("down", "cursor_down", "Down", show=False),
    ]

    def compose(self) -> ComposeResult:
        """Create the prompt, filter input and option list."""
        yield Label(PROMPT, id="prompt")
        yield Input(placeholder="type to filter", id="filter")
        yield OptionList(id="branches")

    def on_mount(self) -> None:
        """Populate the list and focus the filter input."""
        super().on_mount()
        self.query_one("#filter", Input).focus()

    @on(Input.Changed, "#filter")
    def _on_filter_changed(self, event: Input.Changed) -> None:
        labels = [item.label for item in self._items]
        self._show_items(filter_option_indices(labels, event.value))

    @on(Input.Submitted, "#filter")
    def _on_filter_submitted(self, event: Input.Submitted) -> None:
        self._pick_highlighted()

    def action_cursor_up(self) -> None:
        """Move the highlight up while the filter input has focus."""
        self.query_one("#branches", OptionList).action_cursor_up()

    def action_cursor_down(self) -> None:
        """Move the highlight down while the filter input has focus."""
        self.query_one("#branches", OptionList).action_cursor_down()

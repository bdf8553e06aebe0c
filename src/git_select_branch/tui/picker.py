"""Picker abstraction for testability.

This module provides an ABC for presenting labeled items and returning the
user's pick, enabling session and CLI tests without starting the Textual
event loop.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from git_select_branch.core.config import Configuration, Theme
from git_select_branch.core.interrupt import InterruptFlag
from git_select_branch.tui.app import (
    BranchPickerApp,
    ExactBranchPickerApp,
    FuzzyBranchPickerApp,
)
from git_select_branch.tui.types import PickerItem


class Picker(ABC):
    """Abstract interface for the interactive selection widget."""

    @abstractmethod
    def pick(self, items: Sequence[PickerItem], interrupt: InterruptFlag) -> int | None:
        """Show items and wait for the user.

        Args:
            items: Items to choose from, in display order
            interrupt: Flag that closes the picker when raised; the picker
                raises it itself on Ctrl+C

        Returns:
            Index of the picked item, or None if nothing was picked
        """
        ...


class _TextualPicker(Picker):
    def __init__(self, theme: Theme) -> None:
        self._theme = theme

    @abstractmethod
    def create_app(self, items: Sequence[PickerItem], interrupt: InterruptFlag) -> BranchPickerApp:
        """Build the Textual app for this picker."""
        ...

    def pick(self, items: Sequence[PickerItem], interrupt: InterruptFlag) -> int | None:
        """Run the app inline and return its result."""
        app = self.create_app(items, interrupt)
        return app.run(inline=True)


class FuzzyPicker(_TextualPicker):
    """Production picker with a fuzzy filter input."""

    def create_app(self, items: Sequence[PickerItem], interrupt: InterruptFlag) -> BranchPickerApp:
        """Build a FuzzyBranchPickerApp."""
        return FuzzyBranchPickerApp(items, theme=self._theme, interrupt=interrupt)


class ExactPicker(_TextualPicker):
    """Production picker showing a plain list."""

    def create_app(self, items: Sequence[PickerItem], interrupt: InterruptFlag) -> BranchPickerApp:
        """Build an ExactBranchPickerApp."""
        return ExactBranchPickerApp(items, theme=self._theme, interrupt=interrupt)


def create_picker(config: Configuration) -> Picker:
    """Choose the picker variant for a configuration."""
    if config.fuzzy:
        return FuzzyPicker(config.theme)
    return ExactPicker(config.theme)


class FakePicker(Picker):
    """Test implementation that returns a scripted result without a terminal.

    Exactly one behavior is scripted per instance: pick an index, dismiss
    (the default), interrupt, or raise an error.
    """

    def __init__(
        self,
        *,
        pick_index: int | None = None,
        interrupt: bool = False,
        raises: BaseException | None = None,
    ) -> None:
        """Create FakePicker.

        Args:
            pick_index: Index to return; None means the user dismissed the picker
            interrupt: Raise the interrupt flag as SIGINT would, then return None
            raises: Exception to raise from pick()
        """
        self._pick_index = pick_index
        self._interrupt = interrupt
        self._raises = raises
        self._presented: list[list[PickerItem]] = []

    def pick(self, items: Sequence[PickerItem], interrupt: InterruptFlag) -> int | None:
        """Record the items and play back the scripted behavior."""
        self._presented.append(list(items))
        if self._raises is not None:
            raise self._raises
        if self._interrupt:
            interrupt.set()
            return None
        return self._pick_index

    @property
    def presented(self) -> list[list[PickerItem]]:
        """Items passed to each pick() call.

        This property is for test assertions only.
        """
        return list(self._presented)

"""Types shared by the picker and its Textual app."""

from dataclasses import dataclass

PROMPT = "Which branch would you like to switch to?"


@dataclass(frozen=True)
class PickerItem:
    """One line in the picker.

    Attributes:
        label: Text the user sees and filters on
        detail: Secondary text shown dimmed by the colorful theme, if any
    """

    label: str
    detail: str | None = None

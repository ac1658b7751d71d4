"""Modal dialogs: buttons, yes/no confirmation and masked input."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from termbus.tui.commandbar import _LineInput
from termbus.tui.styles import Style

Action = Callable[[], None]


def _box(width: int) -> Style:
    return Style(border=True, width=width)


@dataclass
class Button:
    """A labelled button with an optional action."""

    label: str
    action: Action | None = None


@dataclass
class Modal:
    """A dialog with a title, content and a row of buttons."""

    title: str = ""
    content: str = ""
    buttons: list[Button] = field(default_factory=list)
    active_idx: int = 0
    on_confirm: Action | None = None
    on_cancel: Action | None = None

    def view(self, width: int) -> str:
        """Render the dialog inside a border."""
        labels = [
            Style(bold=True).render(f"[{button.label}]") if i == self.active_idx else button.label
            for i, button in enumerate(self.buttons)
        ]
        footer = "  ".join(labels)
        body = f"{self.title}\n{self.content}"
        if footer:
            body += "\n" + footer
        return _box(width).render(body)

    def confirm(self) -> None:
        """Run the confirm callback, then the active button's action."""
        if self.on_confirm is not None:
            self.on_confirm()
        if 0 <= self.active_idx < len(self.buttons):
            action = self.buttons[self.active_idx].action
            if action is not None:
                action()

    def cancel(self) -> None:
        """Run the cancel callback."""
        if self.on_cancel is not None:
            self.on_cancel()

    def next(self) -> None:
        """Select the next button, wrapping around."""
        if self.buttons:
            self.active_idx = (self.active_idx + 1) % len(self.buttons)

    def prev(self) -> None:
        """Select the previous button, wrapping around."""
        if self.buttons:
            self.active_idx -= 1
            if self.active_idx < 0:
                self.active_idx = len(self.buttons) - 1


@dataclass
class ConfirmModal:
    """A yes/no question answered with enter or esc."""

    title: str = ""
    message: str = ""
    on_yes: Action | None = None
    on_no: Action | None = None
    active: bool = False

    def view(self, width: int) -> str:
        """Render the question inside a border."""
        return _box(width).render(f"{self.title}\n{self.message}")

    def handle_key(self, key: str) -> None:
        """Enter answers yes, esc answers no; only while active."""
        if not self.active:
            return
        if key == "enter" and self.on_yes is not None:
            self.on_yes()
        elif key == "esc" and self.on_no is not None:
            self.on_no()


class AuthModal:
    """A prompt for a secret, echoed as asterisks."""

    def __init__(
        self, title: str, prompt: str, on_submit: Callable[[str], None] | None = None
    ) -> None:
        self.title = title
        self.prompt = prompt
        self.on_submit = on_submit
        self._input = _LineInput(prompt="> ", placeholder=prompt, echo_char="*")

    def view(self, width: int) -> str:
        """Render the title and masked input inside a border."""
        return _box(width).render(f"{self.title}\n{self._input.view()}")

    def handle_key(self, key: str) -> None:
        """Edit the input; enter submits the value."""
        if key == "enter" and self.on_submit is not None:
            self.on_submit(self._input.value)
        self._input.handle_key(key)

    def value(self) -> str:
        """Return the entered text."""
        return self._input.value
"""The command bar: a single-line input with tab completion."""

from __future__ import annotations

from termbus.tui.completer import Completer
from termbus.tui.styles import MUTED, Style, visible_width


class _LineInput:
    """A single-line editable text field."""

    def __init__(self, prompt: str = "> ", placeholder: str = "", echo_char: str = "") -> None:
        self.prompt = prompt
        self.placeholder = placeholder
        self.echo_char = echo_char
        self.width = 0
        self._value = ""
        self._cursor = 0

    @property
    def value(self) -> str:
        return self._value

    def set_value(self, value: str) -> None:
        self._value = value
        self._cursor = len(value)

    def handle_key(self, key: str) -> None:
        before, after = self._value[: self._cursor], self._value[self._cursor :]
        if key == "backspace":
            if before:
                self._value = before[:-1] + after
                self._cursor -= 1
        elif key == "delete":
            self._value = before + after[1:]
        elif key == "left":
            self._cursor = max(self._cursor - 1, 0)
        elif key == "right":
            self._cursor = min(self._cursor + 1, len(self._value))
        elif key in ("home", "ctrl+a"):
            self._cursor = 0
        elif key in ("end", "ctrl+e"):
            self._cursor = len(self._value)
        elif key == "ctrl+u":
            self._value, self._cursor = after, 0
        elif key == "ctrl+k":
            self._value = before
        elif len(key) == 1 and key.isprintable():
            self._value = before + key + after
            self._cursor += 1

    def view(self) -> str:
        if not self._value and self.placeholder:
            return self.prompt + MUTED.render(self.placeholder)
        shown = self.echo_char * len(self._value) if self.echo_char else self._value
        if self.width > 0 and len(shown) > self.width:
            shown = shown[-self.width :]
        return self.prompt + shown


def _join_vertical(*blocks: str) -> str:
    lines = [line for block in blocks for line in block.split("\n")]
    widest = max(visible_width(line) for line in lines)
    return "\n".join(line + " " * (widest - visible_width(line)) for line in lines)


class CommandBar:
    """Command input that offers completions on tab and cycles them on shift+tab."""

    def __init__(self, completer: Completer | None = None) -> None:
        self._input = _LineInput(prompt=": ", placeholder=":command")
        self.width = 0
        self.completer: Completer | None = completer if completer is not None else Completer()
        self.options: list[str] = []
        self.option_index = 0

    def handle_key(self, key: str) -> None:
        """Process one key press."""
        if key == "tab" and self.completer is not None:
            self.options = self.completer.complete(self._input.value)
            self.option_index = 0
            if self.options:
                self._input.set_value(self.options[0])
        elif key == "shift+tab" and self.options:
            self.option_index = (self.option_index - 1) % len(self.options)
            self._input.set_value(self.options[self.option_index])
        self._input.handle_key(key)

    def view(self) -> str:
        """Render the bar, with the completion options above it when shown."""
        bar = Style(width=self.width).render(self._input.view())
        if not self.options:
            return bar
        return _join_vertical(MUTED.render("  ".join(self.options)), bar)

    def set_size(self, width: int) -> None:
        """Set the bar width."""
        self.width = width
        self._input.width = width - 4

    def set_placeholder(self, value: str) -> None:
        """Set the text shown when the input is empty."""
        self._input.placeholder = value

    def set_completer(self, completer: Completer | None) -> None:
        """Replace the completer; None turns completion off."""
        self.completer = completer

    def value(self) -> str:
        """Return the current input."""
        return self._input.value

    def reset(self) -> None:
        """Clear the input and the completion options."""
        self._input.set_value("")
        self.options = []
        self.option_index = 0

    def options_visible(self) -> bool:
        """Whether completion options are shown."""
        return bool(self.options)
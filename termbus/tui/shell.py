"""Shell pane: renders terminal output with scrollback and forwards keys."""

from __future__ import annotations

from typing import Protocol

from termbus.interfaces import EventBus
from termbus.tui.ansi import AnsiRenderer
from termbus.tui.enhancement import Enhancement
from termbus.tui.styles import Style

_KEY_BYTES = {
    "enter": "\r",
    "backspace": "\x7f",
    "tab": "\t",
    "space": " ",
    "esc": "\x1b",
    "up": "\x1b[A",
    "down": "\x1b[B",
    "right": "\x1b[C",
    "left": "\x1b[D",
    "ctrl+c": "\x03",
    "ctrl+d": "\x04",
}


class Terminal(Protocol):
    """What the shell pane needs from a connected terminal."""

    def write(self, data: bytes) -> object: ...

    def resize(self, rows: int, cols: int) -> object: ...


class ShellView:
    """A bordered pane showing shell output."""

    def __init__(self, title: str, event_bus: EventBus | None = None) -> None:
        self.title = title
        self.content = ""
        self.width = 0
        self.height = 0
        self.session = ""
        self.terminal: Terminal | None = None
        self.renderer = AnsiRenderer()
        self.event_bus = event_bus
        self.enhance = Enhancement()

    def view(self) -> str:
        """Render the title and the visible output inside a border."""
        content = self.content
        if self.height > 2:
            content = self.enhance.visible(self.height - 2)
        if not content:
            content = "(shell not connected)"
        box = Style(border=True, width=self.width, height=self.height)
        return box.render(f"{self.title}\n{content}")

    def _send(self, data: str) -> None:
        if self.terminal is None:
            return
        try:
            self.terminal.write(data.encode("utf-8"))
        except (OSError, ValueError):
            pass

    def handle_key(self, key: str) -> None:
        """Scroll, copy, paste, or forward the key to the terminal."""
        if key == "pgup":
            self.enhance.scroll_page(self.height - 2, -1)
        elif key == "pgdown":
            self.enhance.scroll_page(self.height - 2, 1)
        elif key == "ctrl+shift+c":
            self.enhance.copy(self.content)
        elif key == "ctrl+shift+v":
            self._send(self.enhance.paste())
        else:
            self._send(_KEY_BYTES.get(key, key))

    def bind(self, terminal: Terminal, session_id: str) -> None:
        """Attach a terminal for a session."""
        self.terminal = terminal
        self.session = session_id

    def append_output(self, output: str) -> None:
        """Render output, add it to the pane and announce it."""
        rendered = self.renderer.render(output)
        self.content += rendered
        self.enhance.append(rendered)
        if self.event_bus is not None:
            self.event_bus.publish("shell.output", self.session, output)

    def set_size(self, width: int, height: int) -> None:
        """Resize the pane and the attached terminal."""
        self.width = width
        self.height = height
        if self.terminal is None:
            return
        rows, cols = height - 2, width - 2
        try:
            self.terminal.resize(rows, cols)
        except (OSError, ValueError):
            pass
        if self.event_bus is not None:
            self.event_bus.publish("shell.resized", self.session, rows, cols)
"""Minimal ANSI interpretation for shell output: SGR attributes, clears and carriage returns."""

from __future__ import annotations

import re
from collections import deque
from dataclasses import dataclass

from termbus.tui.styles import Style

# A CSI sequence runs from ESC [ up to the first ASCII letter.
_TOKEN_RE = re.compile(r"\x1b\[([^A-Za-z]*)([A-Za-z])|(\r)|(\x1b)|([^\r\x1b]+)", re.S)
_INT_RE = re.compile(r"\s*([+-]?\d+)")


def _to_int(value: str) -> int:
    match = _INT_RE.match(value)
    return int(match.group(1)) if match else 0


def _to_byte(value: str) -> int:
    return min(255, max(0, _to_int(value)))


def _truncate_line(text: str) -> str:
    """Drop everything after the last newline."""
    return text[: text.rfind("\n") + 1]


@dataclass
class AnsiState:
    """Current rendering attributes."""

    bold: bool = False
    underline: bool = False
    reverse: bool = False
    foreground: str = ""
    background: str = ""


class AnsiRenderer:
    """Applies a small subset of ANSI control sequences to text output.

    Attributes set by SGR sequences persist across calls to render.
    """

    def __init__(self) -> None:
        self.state = AnsiState()

    def render(self, text: str) -> str:
        """Interpret control sequences in text and return it styled."""
        out = ""
        for match in _TOKEN_RE.finditer(text):
            final = match.group(2)
            if final:
                if final == "m":
                    self._apply_sgr(match.group(1))
                elif final in ("J", "H"):
                    out = ""
                elif final == "K":
                    out = _truncate_line(out)
            elif match.group(3):
                out = _truncate_line(out)
            else:
                out += match.group(0)
        return self._style().render(out)

    def reset(self) -> None:
        """Clear all attributes."""
        self.state = AnsiState()

    def _extended_color(self, parts: deque[str]) -> str | None:
        if len(parts) >= 2 and parts[0] == "5":
            parts.popleft()
            return parts.popleft()
        if len(parts) >= 4 and parts[0] == "2":
            parts.popleft()
            red, green, blue = (_to_byte(parts.popleft()) for _ in range(3))
            return f"#{red:02x}{green:02x}{blue:02x}"
        return None

    def _apply_sgr(self, seq: str) -> None:
        if seq == "":
            self.reset()
            return
        parts = deque(seq.split(";"))
        state = self.state
        while parts:
            part = parts.popleft()
            value = _to_int(part)
            if part == "0":
                self.reset()
                state = self.state
            elif part == "1":
                state.bold = True
            elif part == "4":
                state.underline = True
            elif part == "7":
                state.reverse = True
            elif part == "22":
                state.bold = False
            elif part == "24":
                state.underline = False
            elif part == "27":
                state.reverse = False
            elif part in {str(n) for n in range(30, 38)}:
                state.foreground = str(value - 30)
            elif part == "39":
                state.foreground = ""
            elif part in {str(n) for n in range(40, 48)}:
                state.background = str(value - 40)
            elif part == "49":
                state.background = ""
            elif part in {str(n) for n in range(90, 98)}:
                state.foreground = str(value - 90 + 8)
            elif part in {str(n) for n in range(100, 108)}:
                state.background = str(value - 100 + 8)
            elif part == "38":
                color = self._extended_color(parts)
                if color is not None:
                    state.foreground = color
            elif part == "48":
                color = self._extended_color(parts)
                if color is not None:
                    state.background = color

    def _style(self) -> Style:
        state = self.state
        return Style(
            bold=state.bold,
            underline=state.underline,
            reverse=state.reverse,
            foreground=state.foreground,
            background=state.background,
        )
"""Minimal terminal styling: colours, attributes, padding, size and borders."""

from __future__ import annotations

import dataclasses
import re
import unicodedata
from dataclasses import dataclass
from typing import Any

_ANSI_RE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")
_TOKEN_RE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]|.", re.S)

_NAMED_COLORS = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
}

_RESET = "\x1b[0m"


def strip_ansi(text: str) -> str:
    """Remove ANSI control sequences."""
    return _ANSI_RE.sub("", text)


def _char_width(ch: str) -> int:
    if unicodedata.combining(ch) or unicodedata.category(ch) in ("Mn", "Me", "Cf"):
        return 0
    if unicodedata.east_asian_width(ch) in ("W", "F"):
        return 2
    return 1


def visible_width(text: str) -> int:
    """Cell width of the widest line, ignoring control sequences."""
    return max(
        (sum(_char_width(ch) for ch in line) for line in strip_ansi(text).split("\n")),
        default=0,
    )


def _color_sgr(color: str, background: bool) -> str:
    base = 40 if background else 30
    extended = "48" if background else "38"
    name = color.strip().lower()
    if name in _NAMED_COLORS:
        return str(base + _NAMED_COLORS[name])
    if name.startswith("#") and len(name) == 7:
        try:
            red, green, blue = (int(name[i : i + 2], 16) for i in (1, 3, 5))
        except ValueError:
            return ""
        return f"{extended};2;{red};{green};{blue}"
    if name.isdigit():
        number = int(name)
        if number < 8:
            return str(base + number)
        if number < 16:
            return str(base + 60 + number - 8)
        if number < 256:
            return f"{extended};5;{number}"
    return ""


def _wrap(line: str, width: int) -> list[str]:
    if visible_width(line) <= width:
        return [line]
    rows: list[str] = []
    current: list[str] = []
    used = 0
    for token in _TOKEN_RE.findall(line):
        if token.startswith("\x1b[") and len(token) > 1:
            current.append(token)
            continue
        cells = _char_width(token)
        if used and used + cells > width:
            rows.append("".join(current))
            current, used = [], 0
        current.append(token)
        used += cells
    rows.append("".join(current))
    return rows


def _paint(text: str, codes: str) -> str:
    return f"\x1b[{codes}m{text}{_RESET}" if codes else text


@dataclass(frozen=True)
class Style:
    """An immutable set of rendering rules.

    ``padding`` is (vertical, horizontal); ``width`` and ``height`` are minimum
    sizes that include padding but not the border.
    """

    bold: bool = False
    underline: bool = False
    reverse: bool = False
    foreground: str = ""
    background: str = ""
    border: bool = False
    border_foreground: str = ""
    padding: tuple[int, int] = (0, 0)
    width: int = 0
    height: int = 0

    def replace(self, **kwargs: Any) -> Style:
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **kwargs)

    def _codes(self) -> str:
        codes = []
        if self.bold:
            codes.append("1")
        if self.underline:
            codes.append("4")
        if self.reverse:
            codes.append("7")
        if self.foreground:
            codes.append(_color_sgr(self.foreground, background=False))
        if self.background:
            codes.append(_color_sgr(self.background, background=True))
        return ";".join(code for code in codes if code)

    def render(self, text: str) -> str:
        """Apply the style to text and return the result."""
        vpad, hpad = (max(0, value) for value in self.padding)
        inner = self.width - 2 * hpad if self.width > 0 else 0

        lines: list[str] = []
        for line in text.split("\n"):
            lines.extend(_wrap(line, inner) if inner > 0 else [line])

        side = " " * hpad
        lines = [side + line + side for line in lines]
        block = max(self.width, max(visible_width(line) for line in lines))
        lines = [line + " " * (block - visible_width(line)) for line in lines]

        blank = " " * block
        lines = [blank] * vpad + lines + [blank] * vpad
        lines.extend([blank] * (self.height - len(lines)))

        codes = self._codes()
        lines = [_paint(line, codes) for line in lines]

        if self.border:
            edge = _color_sgr(self.border_foreground, False) if self.border_foreground else ""
            top = _paint("┌" + "─" * block + "┐", edge)
            bottom = _paint("└" + "─" * block + "┘", edge)
            bar = _paint("│", edge)
            lines = [top] + [bar + line + bar for line in lines] + [bottom]

        return "\n".join(lines)


BORDER = Style(border=True)
TITLE = Style(bold=True)
MUTED = Style(foreground="241")
ACTIVE = Style(bold=True, foreground="212")

EDITOR_CONTAINER_STYLE = Style(border=True, border_foreground="green")
EDITOR_HEADER_STYLE = Style(background="green", foreground="black", padding=(0, 1))
EDITOR_FOOTER_STYLE = Style(background="blue", foreground="white", padding=(0, 1))


def editor_container_style() -> Style:
    """Style of the editor frame."""
    return EDITOR_CONTAINER_STYLE


def editor_header_style() -> Style:
    """Style of the editor header bar."""
    return EDITOR_HEADER_STYLE


def editor_footer_style() -> Style:
    """Style of the editor footer bar."""
    return EDITOR_FOOTER_STYLE
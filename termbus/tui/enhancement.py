"""Scrollback, search and copy buffer for the shell view."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Enhancement:
    """Keeps output lines, a scroll offset from the bottom, and a copy buffer."""

    lines: list[str] = field(default_factory=list)
    scroll_offset: int = 0
    copy_buffer: str = ""

    def append(self, output: str) -> None:
        """Add output to the scrollback, split into lines."""
        if not output:
            return
        self.lines.extend(output.split("\n"))

    def scroll(self, delta: int) -> None:
        """Move the scroll offset, kept between 0 and the number of lines."""
        self.scroll_offset = min(max(self.scroll_offset + delta, 0), len(self.lines))

    def scroll_page(self, height: int, direction: int) -> None:
        """Scroll a full page; a negative direction scrolls back."""
        if height <= 0:
            return
        self.scroll(-height if direction < 0 else height)

    def visible(self, height: int) -> str:
        """Return the lines that fit in height at the current offset."""
        if height <= 0:
            return ""
        start = max(len(self.lines) - height - self.scroll_offset, 0)
        return "\n".join(self.lines[start : start + height])

    def search(self, query: str) -> list[str]:
        """Return the lines containing query."""
        if not query:
            return []
        return [line for line in self.lines if query in line]

    def copy(self, selection: str) -> None:
        """Store a selection in the copy buffer."""
        self.copy_buffer = selection

    def paste(self) -> str:
        """Return the copy buffer."""
        return self.copy_buffer
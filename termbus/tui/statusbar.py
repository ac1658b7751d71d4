"""Status line with text on the left and a clock on the right."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from termbus.tui.styles import visible_width


@dataclass
class StatusBar:
    """One line: left text, a gap, right text (the time when empty)."""

    left: str = ""
    right: str = ""
    width: int = 0
    clock: Callable[[], datetime] = field(default=datetime.now, repr=False, compare=False)

    def view(self) -> str:
        """Render the status line."""
        left = self.left or "Termbus"
        right = self.right or self.clock().strftime("%H:%M:%S")
        space = max(self.width - visible_width(left) - visible_width(right), 1)
        return left + " " * space + right

    def set_size(self, width: int) -> None:
        """Set the line width."""
        self.width = width
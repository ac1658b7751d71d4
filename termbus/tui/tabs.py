"""Session tab bar."""

from __future__ import annotations

from dataclasses import dataclass, field

from termbus.tui.styles import Style

_ACTIVE_STYLE = Style(bold=True)
_INACTIVE_STYLE = Style(foreground="241")
_WARN_STYLE = Style(foreground="203")


@dataclass
class Tab:
    """One tab: a session with a title and flags."""

    id: str = ""
    title: str = ""
    active: bool = False
    has_warn: bool = False


@dataclass
class TabBar:
    """A row of tabs, the active one in bold."""

    tabs: list[Tab] = field(default_factory=list)

    def view(self, width: int) -> str:
        """Render the tabs in a line of the given width."""
        labels = []
        for tab in self.tabs:
            label = tab.title
            if tab.has_warn:
                label = _WARN_STYLE.render(label)
            style = _ACTIVE_STYLE if tab.active else _INACTIVE_STYLE
            labels.append(style.render(label))
        return Style(width=width).render("  ".join(labels))

    def set_tabs(self, tabs: list[Tab]) -> None:
        """Replace the tabs shown."""
        self.tabs = list(tabs)
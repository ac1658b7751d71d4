"""Selectable list of SSH hosts."""

from __future__ import annotations

from termbus.models import SSHHostConfig
from termbus.tui.styles import ACTIVE, MUTED, TITLE, Style

_ITEM_HEIGHT = 3


def host_title(host: SSHHostConfig) -> str:
    """Title shown for a host."""
    return host.alias


def host_description(host: SSHHostConfig) -> str:
    """Second line shown for a host: user@hostname when known."""
    if not host.host_name:
        return host.host
    if not host.user:
        return host.host_name
    return f"{host.user}@{host.host_name}"


def host_filter_value(host: SSHHostConfig) -> str:
    """Text a filter matches against: the alias, else the host."""
    return host.alias or host.host


class HostList:
    """A paged list of hosts with a cursor."""

    def __init__(self, width: int, height: int, hosts: list[SSHHostConfig] | None = None) -> None:
        self.width = width
        self.height = height
        self.hosts = list(hosts or [])
        self.title = "Hosts"
        self.cursor = 0

    def _per_page(self) -> int:
        return max(1, (self.height - 2) // _ITEM_HEIGHT)

    def handle_key(self, key: str) -> None:
        """Move the cursor."""
        if not self.hosts:
            return
        last = len(self.hosts) - 1
        if key in ("up", "k"):
            self.cursor = max(self.cursor - 1, 0)
        elif key in ("down", "j"):
            self.cursor = min(self.cursor + 1, last)
        elif key in ("home", "g"):
            self.cursor = 0
        elif key in ("end", "G"):
            self.cursor = last
        elif key in ("pgup", "left"):
            self.cursor = max(self.cursor - self._per_page(), 0)
        elif key in ("pgdown", "right"):
            self.cursor = min(self.cursor + self._per_page(), last)

    def view(self) -> str:
        """Render the title and the page holding the cursor."""
        lines = [TITLE.render(self.title), ""]
        if not self.hosts:
            lines.append(MUTED.render("No items."))
        else:
            per_page = self._per_page()
            start = (self.cursor // per_page) * per_page
            for index, host in enumerate(self.hosts[start : start + per_page], start):
                chosen = index == self.cursor
                marker = "│ " if chosen else "  "
                title_style = ACTIVE if chosen else Style()
                lines.append(marker + title_style.render(host_title(host)))
                lines.append(marker + MUTED.render(host_description(host)))
                lines.append("")
        return Style(width=self.width, height=self.height).render("\n".join(lines))

    def selected(self) -> SSHHostConfig | None:
        """The host under the cursor, or None when the list is empty."""
        if 0 <= self.cursor < len(self.hosts):
            return self.hosts[self.cursor]
        return None

    def set_size(self, width: int, height: int) -> None:
        """Set the list size."""
        self.width = width
        self.height = height
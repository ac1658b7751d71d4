"""Form for creating or editing a port-forward tunnel."""

from __future__ import annotations

from termbus.interfaces import TunnelManager
from termbus.models import ForwardTunnel, ForwardType, TunnelStatus
from termbus.tui.styles import (
    ACTIVE,
    editor_container_style,
    editor_footer_style,
    editor_header_style,
)

CANCEL_EDIT = "cancel_edit"

_TUNNEL_TYPES = ("local", "remote", "dynamic")
_DESCRIPTIONS = {
    "local": "Local port forward (-L)",
    "remote": "Remote port forward (-R)",
    "dynamic": "Dynamic SOCKS5 proxy (-D)",
}


def tunnel_type_description(kind: str) -> str:
    """Human description of a tunnel type; empty for unknown types."""
    return _DESCRIPTIONS.get(kind, "")


class TunnelEditError(Exception):
    """Raised when the form holds an invalid tunnel."""


class TunnelEditModel:
    """Holds the inputs for a tunnel and the focused form step."""

    def __init__(self, tunnel_manager: TunnelManager, width: int, height: int) -> None:
        self.tunnel_manager = tunnel_manager
        self.tunnel = ForwardTunnel()
        self.selected = 0
        self.session_id = ""
        self.input_type = "local"
        self.input_local = "localhost:8080"
        self.input_remote = "localhost:80"
        self.step = 0
        self.width = width
        self.height = height

    def set_tunnel(self, tunnel: ForwardTunnel) -> None:
        """Load an existing tunnel into the form."""
        self.tunnel = tunnel
        self.input_type = getattr(tunnel.type, "value", str(tunnel.type))
        self.input_local = tunnel.local_addr
        self.input_remote = tunnel.remote_addr

    def validate(self) -> None:
        """Raise TunnelEditError when the inputs do not describe a tunnel."""
        if self.input_type not in _TUNNEL_TYPES:
            raise TunnelEditError(f"invalid tunnel type: {self.input_type}")
        if not self.input_local:
            raise TunnelEditError("local address is required")
        if not self.input_remote and self.input_type != "dynamic":
            raise TunnelEditError("remote address is required")

    def build_tunnel(self) -> ForwardTunnel:
        """Copy the inputs into the tunnel, marked stopped, and return it.

        Raises ValueError for a type that is not a forward type.
        """
        self.tunnel.type = ForwardType(self.input_type)
        self.tunnel.local_addr = self.input_local
        self.tunnel.remote_addr = self.input_remote
        self.tunnel.status = TunnelStatus.STOPPED
        return self.tunnel

    def set_size(self, width: int, height: int) -> None:
        """Set the view size."""
        self.width = width
        self.height = height

    def handle_key(self, key: str) -> str | None:
        """Process a key; return CANCEL_EDIT when the form is abandoned."""
        if key in ("up", "k"):
            if self.selected > 0:
                self.selected -= 1
        elif key in ("down", "j"):
            if self.selected < 3:
                self.selected += 1
        elif key == "enter":
            self.step += 1
        elif key == "tab":
            self.step = (self.step + 1) % 4
        elif key == "esc":
            return CANCEL_EDIT
        return None

    def _prefix(self, active: bool) -> str:
        return ACTIVE.render("> ") if active else "  "

    def view(self) -> str:
        """Render the form in a frame."""
        header = editor_header_style().replace(width=self.width - 2).render(
            "Create/Edit Tunnel"
        )
        parts = [header + "\n\n"]
        for index, kind in enumerate(_TUNNEL_TYPES):
            prefix = self._prefix(self.step == 0 and self.selected == index)
            if self.input_type == kind:
                parts.append(f"{prefix}[{kind}] {tunnel_type_description(kind)}\n")
            else:
                parts.append(f"{prefix}[ ] {kind}\n")

        parts.append("\n")
        parts.append(f"{self._prefix(self.step == 1)}Local Address: {self.input_local}\n")
        remote_prefix = self._prefix(self.step == 2)
        if self.input_type != "dynamic":
            parts.append(f"{remote_prefix}Remote Address: {self.input_remote}\n")
        else:
            parts.append(f"{remote_prefix}Remote Address: (auto SOCKS5)\n")

        parts.append("\n")
        parts.append(f"{self._prefix(self.step == 3)}[Save] Create Tunnel\n")

        footer = editor_footer_style().replace(width=self.width - 2).render(
            "↑↓: Select | Enter: Confirm | Tab: Next | Esc: Cancel"
        )
        container = editor_container_style().replace(width=self.width, height=self.height)
        return container.render("".join(parts) + footer)
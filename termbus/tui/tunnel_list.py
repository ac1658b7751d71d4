"""List of the tunnels of a session, with start, stop and delete."""

from __future__ import annotations

from termbus.interfaces import TunnelManager
from termbus.models import ForwardTunnel, TunnelStatus
from termbus.tui.styles import (
    ACTIVE,
    MUTED,
    editor_container_style,
    editor_footer_style,
    editor_header_style,
)

NEW_TUNNEL = "new_tunnel"


class TunnelListError(Exception):
    """Raised when tunnels cannot be listed or nothing is selected."""


class TunnelListModel:
    """Shows the tunnels of one session and acts on the selected one."""

    def __init__(self, tunnel_manager: TunnelManager, width: int, height: int) -> None:
        self.tunnel_manager = tunnel_manager
        self.tunnels: list[ForwardTunnel] = []
        self.selected = 0
        self.session_id = ""
        self.width = width
        self.height = height
        self.error: Exception | None = None

    def _clamp_selection(self) -> None:
        if self.tunnels and self.selected >= len(self.tunnels):
            self.selected = len(self.tunnels) - 1

    def refresh(self, session_id: str) -> None:
        """Reload the tunnels of a session."""
        self.session_id = session_id
        try:
            tunnels = self.tunnel_manager.list_tunnels(session_id)
        except Exception as exc:
            raise TunnelListError(f"failed to list tunnels: {exc}") from exc
        self.tunnels = list(tunnels)
        self._clamp_selection()

    def selected_tunnel(self) -> ForwardTunnel | None:
        """The tunnel under the cursor, or None."""
        if 0 <= self.selected < len(self.tunnels):
            return self.tunnels[self.selected]
        return None

    def _require_selected(self) -> ForwardTunnel:
        tunnel = self.selected_tunnel()
        if tunnel is None:
            raise TunnelListError("no tunnel selected")
        return tunnel

    def start_selected(self) -> None:
        """Start the selected tunnel."""
        self.tunnel_manager.start_tunnel(self._require_selected().id)

    def stop_selected(self) -> None:
        """Stop the selected tunnel."""
        self.tunnel_manager.stop_tunnel(self._require_selected().id)

    def delete_selected(self) -> None:
        """Delete the selected tunnel and drop it from the list."""
        tunnel = self._require_selected()
        self.tunnel_manager.delete_tunnel(tunnel.id)
        del self.tunnels[self.selected]
        self._clamp_selection()

    def set_size(self, width: int, height: int) -> None:
        """Set the view size."""
        self.width = width
        self.height = height

    def handle_key(self, key: str) -> str | None:
        """Process a key; return NEW_TUNNEL when a new tunnel is asked for."""
        if key in ("up", "k"):
            if self.selected > 0:
                self.selected -= 1
        elif key in ("down", "j"):
            if self.selected < len(self.tunnels) - 1:
                self.selected += 1
        elif key == "enter":
            tunnel = self.selected_tunnel()
            if tunnel is not None:
                try:
                    if tunnel.status == TunnelStatus.RUNNING:
                        self.tunnel_manager.stop_tunnel(tunnel.id)
                    else:
                        self.tunnel_manager.start_tunnel(tunnel.id)
                except Exception as exc:
                    self.error = exc
        elif key == "d":
            try:
                self.delete_selected()
            except Exception as exc:
                self.error = exc
        elif key == "n":
            return NEW_TUNNEL
        return None

    def view(self) -> str:
        """Render the tunnel table in a frame."""
        header = editor_header_style().replace(width=self.width - 2).render("Tunnels")
        parts = [header + "\n"]
        if not self.tunnels:
            parts.append(MUTED.render("  No tunnels. Press 'n' to create one.") + "\n")
        else:
            parts.append(f"  {'Type':<30} {'Status':<10} {'Local':<15} Remote\n")
            parts.append(MUTED.render("  " + "-" * 70) + "\n")
            for index, tunnel in enumerate(self.tunnels):
                prefix = ACTIVE.render("> ") if index == self.selected else "  "
                if tunnel.status == TunnelStatus.RUNNING:
                    status = ACTIVE.render("● Running")
                else:
                    status = MUTED.render("○ Stopped")
                kind = getattr(tunnel.type, "value", str(tunnel.type))
                parts.append(
                    f"{prefix}{kind:<30} {status:<10} {tunnel.local_addr:<15} {tunnel.remote_addr}\n"
                )
        footer = editor_footer_style().replace(width=self.width - 2).render(
            "↑↓: Navigate | Enter: Toggle | d: Delete | n: New | q: Quit"
        )
        container = editor_container_style().replace(width=self.width, height=self.height)
        return container.render("".join(parts) + footer)
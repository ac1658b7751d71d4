"""Core data types for sessions, windows, tunnels, files and agent plans."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Mapping


class SessionState(str, Enum):
    """Connection state of an SSH session."""

    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    RECONNECTING = "reconnecting"
    ERROR = "error"


class PaneType(str, Enum):
    """Kind of content a pane shows."""

    SHELL = "shell"
    SFTP = "sftp"
    LOG = "log"
    PLUGIN = "plugin"


class ForwardType(str, Enum):
    """Kind of port forward."""

    LOCAL = "local"
    REMOTE = "remote"
    DYNAMIC = "dynamic"
    X11 = "x11"


class TunnelStatus(str, Enum):
    """Run state of a tunnel."""

    STOPPED = "stopped"
    RUNNING = "running"
    ERROR = "error"


class RiskLevel(str, Enum):
    """Risk rating of an agent plan."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class StepStatus(str, Enum):
    """Progress of a single agent step."""

    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"
    SKIPPED = "skipped"


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _format_time(value: datetime) -> str:
    return value.isoformat()


def _parse_time(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise ValueError(f"invalid timestamp: {value!r}")
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    return datetime.fromisoformat(text)


@dataclass
class Pane:
    """A pane inside a window."""

    id: str = ""
    type: PaneType = PaneType.SHELL
    title: str = ""
    session_id: str = ""
    content: Any = field(default=None, repr=False, compare=False)
    active: bool = False


@dataclass
class Window:
    """A window holding panes for one session."""

    id: str = ""
    session_id: str = ""
    host_id: str = ""
    host_alias: str = ""
    panes: dict[str, Pane] = field(default_factory=dict)
    active_pane_id: str = ""
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)


@dataclass
class SSHHostConfig:
    """Settings for one SSH host."""

    host: str = ""
    host_name: str = ""
    user: str = ""
    port: int = 22
    identity_file: list[str] = field(default_factory=list)
    proxy_jump: str = ""
    proxy_command: str = ""
    forward_agent: bool = False
    forward_x11: bool = False
    connect_timeout: int = 30
    server_alive_interval: int = 60
    server_alive_count_max: int = 3
    strict_host_key_checking: str = "ask"
    user_known_hosts_file: str = ""
    alias: str = ""
    group: str = ""
    description: str = ""


@dataclass
class KeepaliveConfig:
    """Keepalive settings of a session."""

    enabled: bool = False
    interval: int = 0
    count_max: int = 0


@dataclass
class ReconnectConfig:
    """Reconnect settings of a session."""

    enabled: bool = False
    max_attempts: int = 0
    interval: int = 0


def _host_config_dict(cfg: SSHHostConfig) -> dict[str, Any]:
    return {
        "Host": cfg.host,
        "HostName": cfg.host_name,
        "User": cfg.user,
        "Port": cfg.port,
        "IdentityFile": list(cfg.identity_file),
        "ProxyJump": cfg.proxy_jump,
        "ProxyCommand": cfg.proxy_command,
        "ForwardAgent": cfg.forward_agent,
        "ForwardX11": cfg.forward_x11,
        "ConnectTimeout": cfg.connect_timeout,
        "ServerAliveInterval": cfg.server_alive_interval,
        "ServerAliveCountMax": cfg.server_alive_count_max,
        "StrictHostKeyChecking": cfg.strict_host_key_checking,
        "UserKnownHostsFile": cfg.user_known_hosts_file,
        "Alias": cfg.alias,
        "Group": cfg.group,
        "Description": cfg.description,
    }


def _pane_dict(pane: Pane) -> dict[str, Any]:
    return {
        "id": pane.id,
        "type": pane.type.value,
        "title": pane.title,
        "session_id": pane.session_id,
        "active": pane.active,
    }


def _window_dict(window: Window) -> dict[str, Any]:
    return {
        "id": window.id,
        "session_id": window.session_id,
        "host_id": window.host_id,
        "host_alias": window.host_alias,
        "panes": {key: _pane_dict(pane) for key, pane in window.panes.items()},
        "active_pane_id": window.active_pane_id,
        "created_at": _format_time(window.created_at),
        "updated_at": _format_time(window.updated_at),
    }


@dataclass
class Session:
    """An SSH session and its windows."""

    id: str = ""
    host_config: SSHHostConfig | None = None
    state: SessionState = SessionState.DISCONNECTED
    windows: dict[str, Window] = field(default_factory=dict)
    active_window_id: str = ""
    created_at: datetime = field(default_factory=_now)
    connected_at: datetime | None = None
    error_msg: str = ""
    keepalive_config: KeepaliveConfig | None = None
    reconnect_config: ReconnectConfig | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of the session."""
        keepalive = self.keepalive_config
        reconnect = self.reconnect_config
        return {
            "id": self.id,
            "host_config": None if self.host_config is None else _host_config_dict(self.host_config),
            "state": self.state.value,
            "windows": {key: _window_dict(w) for key, w in self.windows.items()},
            "active_window_id": self.active_window_id,
            "created_at": _format_time(self.created_at),
            "connected_at": None if self.connected_at is None else _format_time(self.connected_at),
            "error_msg": self.error_msg,
            "keepalive_config": None
            if keepalive is None
            else {
                "enabled": keepalive.enabled,
                "interval": keepalive.interval,
                "count_max": keepalive.count_max,
            },
            "reconnect_config": None
            if reconnect is None
            else {
                "enabled": reconnect.enabled,
                "max_attempts": reconnect.max_attempts,
                "interval": reconnect.interval,
            },
        }


@dataclass
class ForwardTunnel:
    """A port forward bound to a session."""

    id: str = ""
    session_id: str = ""
    type: ForwardType = ForwardType.LOCAL
    local_addr: str = ""
    remote_addr: str = ""
    status: TunnelStatus = TunnelStatus.STOPPED
    auto_start: bool = False
    created_at: datetime = field(default_factory=_now)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of the tunnel."""
        return {
            "id": self.id,
            "session_id": self.session_id,
            "type": self.type.value,
            "local_addr": self.local_addr,
            "remote_addr": self.remote_addr,
            "status": self.status.value,
            "auto_start": self.auto_start,
            "created_at": _format_time(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ForwardTunnel:
        """Build a tunnel from a mapping produced by to_dict."""
        try:
            kind = ForwardType(data.get("type", ForwardType.LOCAL.value))
            status = TunnelStatus(data.get("status", TunnelStatus.STOPPED.value))
        except ValueError as exc:
            raise ValueError(f"invalid tunnel data: {exc}") from exc
        created = data.get("created_at")
        return cls(
            id=str(data.get("id", "")),
            session_id=str(data.get("session_id", "")),
            type=kind,
            local_addr=str(data.get("local_addr", "")),
            remote_addr=str(data.get("remote_addr", "")),
            status=status,
            auto_start=bool(data.get("auto_start", False)),
            created_at=_parse_time(created) if created else _now(),
        )


@dataclass
class FileInfo:
    """A remote file entry."""

    name: str = ""
    size: int = 0
    mode: Any = None
    mod_time: datetime = field(default_factory=_now)
    is_dir: bool = False
    path: str = ""
    symlink: str = ""


@dataclass
class AgentStep:
    """One step of an agent plan."""

    id: int = 0
    description: str = ""
    status: StepStatus = StepStatus.PENDING
    result: str = ""
    error: str = ""


@dataclass
class AgentPlan:
    """A plan the agent proposes for a task."""

    task: str = ""
    description: str = ""
    steps: list[AgentStep] = field(default_factory=list)
    risk_level: RiskLevel = RiskLevel.LOW
    risk_tips: list[str] = field(default_factory=list)
"""Contracts between the terminal front end and its managers, plus an event bus."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable

from termbus.models import FileInfo, ForwardTunnel, Session, SSHHostConfig

ProgressCallback = Callable[[float], None]


@dataclass
class HostConfig:
    """Connection settings resolved for one host."""

    host: str = ""
    host_name: str = ""
    user: str = ""
    port: int = 22
    identity_file: str = ""
    proxy_jump: str = ""
    proxy_command: str = ""
    password: str = ""


@dataclass
class PluginInfo:
    """Summary of a loaded plugin."""

    id: str = ""
    name: str = ""
    version: str = ""
    description: str = ""
    enabled: bool = False


@dataclass
class Field:
    """A structured log field."""

    key: str
    value: Any = None


class EventBus:
    """Synchronous in-process publish/subscribe bus."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[Callable[..., Any]]] = {}
        self._lock = threading.Lock()

    def subscribe(self, topic: str, handler: Callable[..., Any]) -> None:
        """Register a handler for a topic."""
        with self._lock:
            self._handlers.setdefault(topic, []).append(handler)

    def unsubscribe(self, topic: str, handler: Callable[..., Any]) -> None:
        """Remove one registration of a handler; unknown handlers are ignored."""
        with self._lock:
            handlers = self._handlers.get(topic)
            if not handlers:
                return
            try:
                handlers.remove(handler)
            except ValueError:
                return
            if not handlers:
                del self._handlers[topic]

    def publish(self, topic: str, *args: Any) -> None:
        """Call every handler of a topic with the given arguments."""
        with self._lock:
            handlers = list(self._handlers.get(topic, ()))
        for handler in handlers:
            handler(*args)


class SessionManager(ABC):
    """Creates, connects and tracks SSH sessions."""

    @abstractmethod
    def create_session(self, host_config: SSHHostConfig) -> Session: ...

    @abstractmethod
    def connect_session(self, session_id: str) -> None: ...

    @abstractmethod
    def disconnect_session(self, session_id: str) -> None: ...

    @abstractmethod
    def delete_session(self, session_id: str) -> None: ...

    @abstractmethod
    def get_session(self, session_id: str) -> Session: ...

    @abstractmethod
    def list_sessions(self) -> list[Session]: ...

    @abstractmethod
    def set_active_session(self, session_id: str) -> None: ...

    @abstractmethod
    def get_active_session(self) -> Session: ...

    @abstractmethod
    def get_ssh_client(self, session_id: str) -> Any: ...


class SFTPManager(ABC):
    """File operations on the remote side of a session."""

    @abstractmethod
    def list_dir(self, session_id: str, path: str) -> list[FileInfo]: ...

    @abstractmethod
    def download(
        self,
        session_id: str,
        remote_path: str,
        local_path: str,
        progress: ProgressCallback | None = None,
    ) -> None: ...

    @abstractmethod
    def upload(
        self,
        session_id: str,
        local_path: str,
        remote_path: str,
        progress: ProgressCallback | None = None,
    ) -> None: ...

    @abstractmethod
    def delete(self, session_id: str, path: str) -> None: ...

    @abstractmethod
    def rename(self, session_id: str, old_path: str, new_path: str) -> None: ...

    @abstractmethod
    def mkdir(self, session_id: str, path: str) -> None: ...

    @abstractmethod
    def read_file(self, session_id: str, path: str) -> str: ...

    @abstractmethod
    def write_file(self, session_id: str, path: str, content: str) -> None: ...


class TunnelManager(ABC):
    """Creates and runs port forwards."""

    @abstractmethod
    def create_tunnel(self, session_id: str, tunnel: ForwardTunnel) -> None: ...

    @abstractmethod
    def start_tunnel(self, tunnel_id: str) -> None: ...

    @abstractmethod
    def stop_tunnel(self, tunnel_id: str) -> None: ...

    @abstractmethod
    def delete_tunnel(self, tunnel_id: str) -> None: ...

    @abstractmethod
    def list_tunnels(self, session_id: str) -> list[ForwardTunnel]: ...

    @abstractmethod
    def get_tunnel(self, tunnel_id: str) -> ForwardTunnel: ...
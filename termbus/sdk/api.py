"""Plugin base classes and the adapter that exposes a plugin to the host."""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence, TextIO

from termbus.pluginrpc import rpc
from termbus.pluginrpc.protocol import ExecuteResponse, InfoResponse, ManifestResponse
from termbus.pluginrpc.rpc import ServiceImpl


class Plugin(ABC):
    """What every plugin offers: identity, lifecycle, commands and permissions."""

    name: str
    version: str
    description: str
    author: str

    @abstractmethod
    def init(self, config: Mapping[str, str] | None) -> None: ...

    @abstractmethod
    def execute(
        self,
        cmd: str,
        args: Sequence[str],
        stdin: TextIO | None,
        stdout: TextIO,
        stderr: TextIO,
    ) -> int: ...

    @abstractmethod
    def stop(self) -> None: ...

    @abstractmethod
    def permissions(self) -> list[str]: ...

    @abstractmethod
    def commands(self) -> list[str]: ...


@dataclass
class BasePlugin(Plugin):
    """A plugin with identity fields and do-nothing defaults."""

    name: str = ""
    version: str = ""
    description: str = ""
    author: str = ""
    config: dict[str, str] = field(default_factory=dict)
    stopped: bool = field(default=False, repr=False)

    def init(self, config: Mapping[str, str] | None) -> None:
        """Keep the configuration handed over by the host."""
        self.config = dict(config or {})
        self.stopped = False

    def stop(self) -> None:
        """Mark the plugin as stopped; the base plugin holds no resources."""
        self.stopped = True

    def execute(
        self,
        cmd: str,
        args: Sequence[str],
        stdin: TextIO | None,
        stdout: TextIO,
        stderr: TextIO,
    ) -> int:
        """Run a command; the base plugin does nothing and succeeds."""
        return 0

    def permissions(self) -> list[str]:
        """Permissions the plugin needs; none by default."""
        return []

    def commands(self) -> list[str]:
        """Commands the plugin provides; none by default."""
        return []


class PluginAdapter(ServiceImpl):
    """Presents a Plugin as the service the RPC layer expects."""

    def __init__(self, plugin: Plugin) -> None:
        self.plugin = plugin

    def init(self, session_id: str, config: dict[str, str]) -> None:
        self.plugin.init(config)

    def execute(self, command: str, args: list[str], env: dict[str, str]) -> ExecuteResponse:
        # Plugin output is not forwarded to the host.
        stdout = io.StringIO()
        stderr = io.StringIO()
        try:
            code = self.plugin.execute(command, list(args or []), None, stdout, stderr)
        except Exception as exc:
            return ExecuteResponse(exit_code=1, error=str(exc))
        return ExecuteResponse(exit_code=code)

    def stop(self, force: bool) -> None:
        self.plugin.stop()

    def info(self) -> InfoResponse:
        return InfoResponse(
            name=self.plugin.name,
            version=self.plugin.version,
            description=self.plugin.description,
            author=self.plugin.author,
        )

    def manifest(self) -> ManifestResponse:
        return ManifestResponse(
            name=self.plugin.name,
            version=self.plugin.version,
            description=self.plugin.description,
            author=self.plugin.author,
            permissions=list(self.plugin.permissions()),
            commands=list(self.plugin.commands()),
        )


def serve(plugin: Plugin, stdin: TextIO | None = None, stdout: TextIO | None = None) -> Any:
    """Serve a plugin to the host until the input ends."""
    return rpc.serve(PluginAdapter(plugin), stdin, stdout)
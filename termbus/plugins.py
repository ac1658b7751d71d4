"""Bundled plugins and a command that serves one of them."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Sequence, TextIO

from termbus.pluginrpc.rpc import PluginRPCError
from termbus.sdk.api import BasePlugin, serve


@dataclass
class DockerPlugin(BasePlugin):
    """Docker container management."""

    name: str = "docker"
    version: str = "1.0.0"
    description: str = "Docker container management"
    author: str = "termbus"

    def permissions(self) -> list[str]:
        return ["ssh.execute", "system.exec"]

    def commands(self) -> list[str]:
        return ["docker.ps", "docker.logs", "docker.exec", "docker.images"]


@dataclass
class KubernetesPlugin(BasePlugin):
    """Kubernetes cluster management."""

    name: str = "kubernetes"
    version: str = "1.0.0"
    description: str = "Kubernetes cluster management"
    author: str = "termbus"

    def permissions(self) -> list[str]:
        return ["ssh.execute", "system.network"]

    def commands(self) -> list[str]:
        return ["k8s.pods", "k8s.deploy", "k8s.logs", "k8s.exec"]


@dataclass
class MySQLPlugin(BasePlugin):
    """MySQL database management."""

    name: str = "mysql"
    version: str = "1.0.0"
    description: str = "MySQL database management"
    author: str = "termbus"

    def permissions(self) -> list[str]:
        return ["system.network"]

    def commands(self) -> list[str]:
        return ["mysql.query", "mysql.schema", "mysql.tables"]


@dataclass
class RedisPlugin(BasePlugin):
    """Redis database management."""

    name: str = "redis"
    version: str = "1.0.0"
    description: str = "Redis database management"
    author: str = "termbus"

    def permissions(self) -> list[str]:
        return ["system.network"]

    def commands(self) -> list[str]:
        return ["redis.get", "redis.set", "redis.del", "redis.keys", "redis.info"]


@dataclass
class AdvancedPlugin(BasePlugin):
    """Advanced plugin example."""

    name: str = "advanced"
    version: str = "0.1.0"
    description: str = "Advanced plugin example"
    author: str = "termbus"

    def permissions(self) -> list[str]:
        return ["system.network"]

    def commands(self) -> list[str]:
        return ["advanced"]


@dataclass
class HelloPlugin(BasePlugin):
    """A simple hello world plugin."""

    name: str = "hello"
    version: str = "1.0.0"
    description: str = "A simple hello world plugin"
    author: str = "termbus"

    def execute(
        self,
        cmd: str,
        args: Sequence[str],
        stdin: TextIO | None,
        stdout: TextIO,
        stderr: TextIO,
    ) -> int:
        stdout.write("Hello from Termbus Plugin!\n")
        stdout.write(f"Command: {cmd}, Args: [{' '.join(args or [])}]\n")
        return 0

    def permissions(self) -> list[str]:
        return ["ssh.execute"]

    def commands(self) -> list[str]:
        return ["hello"]


_PLUGINS: dict[str, type[BasePlugin]] = {
    "docker": DockerPlugin,
    "kubernetes": KubernetesPlugin,
    "mysql": MySQLPlugin,
    "redis": RedisPlugin,
    "advanced": AdvancedPlugin,
    "hello": HelloPlugin,
}


def create_plugin(name: str) -> BasePlugin:
    """Return a new instance of the bundled plugin with this name."""
    try:
        return _PLUGINS[name]()
    except KeyError:
        raise ValueError(f"unknown plugin: {name}") from None


def main(argv: Sequence[str] | None = None) -> int:
    """Serve the bundled plugin named by the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(f"usage: termbus-plugin <{'|'.join(_PLUGINS)}>", file=sys.stderr)
        return 2
    try:
        plugin = create_plugin(args[0])
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    try:
        serve(plugin)
    except PluginRPCError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0
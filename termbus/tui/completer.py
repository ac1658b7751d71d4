"""Command, path and host completion for the command bar."""

from __future__ import annotations

import glob
import os
from dataclasses import dataclass, field


@dataclass
class Command:
    """A command that can be completed."""

    name: str
    aliases: list[str] = field(default_factory=list)
    description: str = ""
    args: list[str] = field(default_factory=list)


class Completer:
    """Completes command names, paths and host names."""

    def __init__(self) -> None:
        self.commands: dict[str, Command] = {}
        self.history: list[str] = []
        self.hosts: list[str] = []
        self._last: list[str] = []

    def add_command(self, command: Command | None) -> None:
        """Register a command under its name and aliases."""
        if command is None or not command.name:
            return
        self.commands[command.name] = command
        for alias in command.aliases:
            self.commands[alias] = command

    def add_history(self, command: str) -> None:
        """Record a command line."""
        if command:
            self.history.append(command)

    def set_hosts(self, hosts: list[str]) -> None:
        """Set the host names offered for completion."""
        self.hosts = list(hosts)

    def complete(self, text: str) -> list[str]:
        """Return completions for the input and remember them."""
        parts = text.split()
        if not parts:
            self._last = []
        elif len(parts) == 1 and parts[0].startswith(":"):
            self._last = self._match_command(parts[0][1:], ":")
        elif len(parts) == 1:
            self._last = self._match_command(parts[0], "")
        else:
            arg = parts[-1]
            if arg.startswith(("~", "/")) or os.sep in arg:
                self._last = self._match_path(arg)
            elif self.hosts:
                self._last = self._match_hosts(arg.removeprefix("@"))
            else:
                self._last = []
        return list(self._last)

    def last(self) -> list[str]:
        """Return the most recent completion list."""
        return list(self._last)

    def _match_command(self, prefix: str, lead: str) -> list[str]:
        return sorted(lead + name for name in self.commands if name.startswith(prefix))

    def _match_hosts(self, prefix: str) -> list[str]:
        return ["@" + host for host in self.hosts if host.startswith(prefix)]

    def _match_path(self, prefix: str) -> list[str]:
        return sorted(glob.glob(prefix.removeprefix("~") + "*"))
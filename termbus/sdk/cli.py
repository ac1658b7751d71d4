"""Command-line tooling for plugin authors: validate, build and sign."""

from __future__ import annotations

import os
import sys
from collections import deque
from typing import Sequence


class CliError(Exception):
    """Raised for bad arguments or a failed action."""


class PluginCli:
    """Parses tool arguments and runs the chosen action."""

    def __init__(self) -> None:
        self.plugin_path = ""
        self.action = ""

    def parse(self, args: Sequence[str]) -> list[str]:
        """Read -plugin and -action flags; return the arguments after the flags."""
        tokens = deque(args)
        while tokens:
            token = tokens[0]
            if len(token) < 2 or not token.startswith("-"):
                break
            tokens.popleft()
            if token == "--":
                break
            body = token[2:] if token.startswith("--") else token[1:]
            if not body or body.startswith(("-", "=")):
                raise CliError(f"bad flag syntax: {token}")
            name, sep, value = body.partition("=")
            if name in ("h", "help"):
                raise CliError("flag: help requested")
            if name not in ("plugin", "action"):
                raise CliError(f"flag provided but not defined: -{name}")
            if not sep:
                if not tokens:
                    raise CliError(f"flag needs an argument: -{name}")
                value = tokens.popleft()
            if name == "plugin":
                self.plugin_path = value
            else:
                self.action = value
        return list(tokens)

    def run(self) -> None:
        """Run the selected action."""
        actions = {"validate": self.validate, "build": self.build, "sign": self.sign}
        action = actions.get(self.action)
        if action is None:
            raise CliError(f"unknown action: {self.action}")
        action()

    def _require_path(self) -> None:
        if not self.plugin_path:
            raise CliError("plugin path required")

    def validate(self) -> None:
        """Check that the plugin path exists."""
        self._require_path()
        os.stat(self.plugin_path)

    def build(self) -> None:
        """Build step; only checks that a plugin path was given."""
        self._require_path()

    def sign(self) -> None:
        """Sign step; only checks that a plugin path was given."""
        self._require_path()


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point; returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    cli = PluginCli()
    try:
        cli.parse(args)
        cli.run()
    except (CliError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0
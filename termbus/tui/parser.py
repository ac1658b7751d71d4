"""Command-line parsing with alias expansion for the command bar."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field


@dataclass
class ParsedCommand:
    """A command name with its positional arguments and flags."""

    name: str
    args: list[str] = field(default_factory=list)
    flags: dict[str, str] = field(default_factory=dict)


class Parser:
    """Splits command lines into name, arguments and flags."""

    def __init__(self) -> None:
        self._aliases: dict[str, str] = {}

    def add_alias(self, alias: str, command: str) -> None:
        """Register an alias; empty aliases or expansions are ignored."""
        if not alias or not command:
            return
        self._aliases[alias] = command

    def parse(self, text: str) -> ParsedCommand | None:
        """Parse a line; return None when it holds no command."""
        line = text.strip()
        if line.startswith(":"):
            line = line[1:]
        parts = line.split()
        if not parts:
            return None
        expansion = self._aliases.get(parts[0])
        if expansion is not None:
            parts = expansion.split() + parts[1:]
            if not parts:
                return None

        result = ParsedCommand(name=parts[0])
        tokens = deque(parts[1:])
        while tokens:
            part = tokens.popleft()
            if part.startswith("--"):
                key, sep, value = part[2:].partition("=")
                result.flags[key] = value if sep else "true"
            elif part.startswith("-") and len(part) > 1:
                flag = part[1:]
                if tokens and not tokens[0].startswith("-"):
                    result.flags[flag] = tokens.popleft()
                else:
                    result.flags[flag] = "true"
            else:
                result.args.append(part)
        return result
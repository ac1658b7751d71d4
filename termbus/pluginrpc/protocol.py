"""Messages exchanged between the host and a plugin, and their JSON encoding."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Mapping, TypeVar


@dataclass
class InitRequest:
    """Asks a plugin to initialise for a session."""

    session_id: str = ""
    config: dict[str, str] = field(default_factory=dict)


@dataclass
class InitResponse:
    """Outcome of initialisation."""

    success: bool = False
    error: str = ""


@dataclass
class ExecuteRequest:
    """Asks a plugin to run a command."""

    command: str = ""
    args: list[str] = field(default_factory=list)
    env: dict[str, str] = field(default_factory=dict)


@dataclass
class ExecuteResponse:
    """Outcome of a command."""

    exit_code: int = 0
    stdout: str = ""
    stderr: str = ""
    error: str = ""


@dataclass
class StopRequest:
    """Asks a plugin to stop."""

    force: bool = False


@dataclass
class StopResponse:
    """Outcome of a stop request."""

    success: bool = False
    error: str = ""


@dataclass
class InfoResponse:
    """Identity of a plugin."""

    name: str = ""
    version: str = ""
    description: str = ""
    author: str = ""


@dataclass
class ManifestResponse:
    """Identity, permissions and commands of a plugin."""

    name: str = ""
    version: str = ""
    description: str = ""
    author: str = ""
    permissions: list[str] = field(default_factory=list)
    commands: list[str] = field(default_factory=list)
    config_schema: dict[str, str] = field(default_factory=dict)


_MESSAGE_TYPES = (
    InitRequest,
    InitResponse,
    ExecuteRequest,
    ExecuteResponse,
    StopRequest,
    StopResponse,
    InfoResponse,
    ManifestResponse,
)

M = TypeVar("M")


def encode_message(message: Any) -> bytes:
    """Encode a protocol message as compact JSON with sorted keys."""
    if type(message) not in _MESSAGE_TYPES:
        raise TypeError(f"not a plugin message: {message!r}")
    return json.dumps(
        asdict(message), sort_keys=True, separators=(",", ":"), ensure_ascii=False
    ).encode("utf-8")


def decode_message(cls: type[M], data: bytes | str | Mapping[str, Any]) -> M:
    """Decode JSON text or a mapping into a message of the given type.

    Unknown keys are ignored; missing or null keys take their defaults.
    """
    if cls not in _MESSAGE_TYPES:
        raise TypeError(f"not a plugin message type: {cls!r}")
    if isinstance(data, Mapping):
        payload: Any = data
    else:
        if isinstance(data, (bytes, bytearray)):
            data = data.decode("utf-8")
        payload = json.loads(data)
    if not isinstance(payload, Mapping):
        raise ValueError("message must be a JSON object")
    names = {f.name for f in fields(cls)}
    values = {key: value for key, value in payload.items() if key in names and value is not None}
    return cls(**values)
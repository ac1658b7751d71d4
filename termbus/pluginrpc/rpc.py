"""Request dispatch between the host and a plugin over line-delimited JSON."""

from __future__ import annotations

import json
import os
import sys
from abc import ABC, abstractmethod
from dataclasses import asdict
from typing import Any, Callable, Mapping, TextIO, TypeVar

from termbus.pluginrpc.protocol import (
    ExecuteRequest,
    ExecuteResponse,
    InfoResponse,
    InitRequest,
    InitResponse,
    ManifestResponse,
    StopRequest,
    StopResponse,
    decode_message,
)

PROTOCOL_VERSION = 1
MAGIC_COOKIE_KEY = "TERMBUS_PLUGIN"
MAGIC_COOKIE_VALUE = "1"

Transport = Callable[[str, dict], Mapping[str, Any]]
M = TypeVar("M")


class PluginRPCError(Exception):
    """Raised when a plugin call cannot be carried out."""


class ServiceImpl(ABC):
    """Behaviour a plugin provides to the host."""

    @abstractmethod
    def init(self, session_id: str, config: dict[str, str]) -> None: ...

    @abstractmethod
    def execute(self, command: str, args: list[str], env: dict[str, str]) -> ExecuteResponse: ...

    @abstractmethod
    def stop(self, force: bool) -> None: ...

    @abstractmethod
    def info(self) -> InfoResponse: ...

    @abstractmethod
    def manifest(self) -> ManifestResponse: ...


class Service:
    """Server side: turns requests into calls on a ServiceImpl."""

    def __init__(self, impl: ServiceImpl) -> None:
        self.impl = impl

    def init(self, request: InitRequest) -> InitResponse:
        try:
            self.impl.init(request.session_id, request.config)
        except Exception as exc:
            return InitResponse(success=False, error=str(exc))
        return InitResponse(success=True)

    def execute(self, request: ExecuteRequest) -> ExecuteResponse:
        try:
            result = self.impl.execute(request.command, request.args, request.env)
        except Exception as exc:
            return ExecuteResponse(error=str(exc))
        return result if result is not None else ExecuteResponse()

    def stop(self, request: StopRequest) -> StopResponse:
        try:
            self.impl.stop(request.force)
        except Exception as exc:
            return StopResponse(success=False, error=str(exc))
        return StopResponse(success=True)

    def info(self) -> InfoResponse:
        return self.impl.info()

    def manifest(self) -> ManifestResponse:
        return self.impl.manifest()

    def dispatch(self, method: str, payload: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Run a named call with a mapping payload and return the response as a mapping."""
        params = payload if payload is not None else {}
        if method == "Plugin.Init":
            response: Any = self.init(decode_message(InitRequest, params))
        elif method == "Plugin.Execute":
            response = self.execute(decode_message(ExecuteRequest, params))
        elif method == "Plugin.Stop":
            response = self.stop(decode_message(StopRequest, params))
        elif method == "Plugin.Info":
            response = self.info()
        elif method == "Plugin.Manifest":
            response = self.manifest()
        else:
            raise PluginRPCError(f"unknown method: {method}")
        return asdict(response)


class Client:
    """Host side: calls a plugin through a transport callable."""

    def __init__(self, call: Transport) -> None:
        self._call = call

    def _request(self, method: str, params: dict, cls: type[M]) -> M:
        reply = self._call(method, params)
        return decode_message(cls, reply if reply is not None else {})

    def init(self, request: InitRequest) -> InitResponse:
        return self._request("Plugin.Init", asdict(request), InitResponse)

    def execute(self, request: ExecuteRequest) -> ExecuteResponse:
        return self._request("Plugin.Execute", asdict(request), ExecuteResponse)

    def stop(self, request: StopRequest) -> StopResponse:
        return self._request("Plugin.Stop", asdict(request), StopResponse)

    def info(self) -> InfoResponse:
        return self._request("Plugin.Info", {}, InfoResponse)

    def manifest(self) -> ManifestResponse:
        return self._request("Plugin.Manifest", {}, ManifestResponse)


def _handle_line(service: Service, line: str) -> dict[str, Any]:
    try:
        message = json.loads(line)
    except ValueError as exc:
        return {"id": None, "result": None, "error": f"invalid request: {exc}"}
    if not isinstance(message, dict):
        return {"id": None, "result": None, "error": "invalid request: expected a JSON object"}
    request_id = message.get("id")
    try:
        result = service.dispatch(message.get("method", ""), message.get("params"))
    except Exception as exc:
        return {"id": request_id, "result": None, "error": str(exc)}
    return {"id": request_id, "result": result, "error": None}


def serve(impl: ServiceImpl, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Answer requests, one JSON object per line, until the input ends.

    The host must set the plugin handshake cookie in the environment.
    """
    if os.environ.get(MAGIC_COOKIE_KEY) != MAGIC_COOKIE_VALUE:
        raise PluginRPCError(
            "this program is a plugin and must be launched by the host application"
        )
    source = stdin if stdin is not None else sys.stdin
    sink = stdout if stdout is not None else sys.stdout
    service = Service(impl)
    for raw in source:
        line = raw.strip()
        if not line:
            continue
        sink.write(json.dumps(_handle_line(service, line)) + "\n")
        sink.flush()
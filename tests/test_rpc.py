import io
import json

import pytest

from termbus.pluginrpc.protocol import (
    ExecuteRequest,
    ExecuteResponse,
    InfoResponse,
    InitRequest,
    InitResponse,
    ManifestResponse,
    StopRequest,
    StopResponse,
)
from termbus.pluginrpc.rpc import Client, PluginRPCError, Service, ServiceImpl, serve


class FakeImpl(ServiceImpl):
    def __init__(self, fail=False):
        self.fail = fail
        self.calls = []

    def init(self, session_id, config):
        self.calls.append(("init", session_id, config))
        if self.fail:
            raise RuntimeError("init failed")

    def execute(self, command, args, env):
        self.calls.append(("execute", command, args, env))
        if self.fail:
            raise RuntimeError("execute failed")
        return ExecuteResponse(exit_code=7, stdout=command)

    def stop(self, force):
        self.calls.append(("stop", force))
        if self.fail:
            raise RuntimeError("stop failed")

    def info(self):
        if self.fail:
            raise RuntimeError("info failed")
        return InfoResponse(name="fake", version="1.0.0", description="d", author="a")

    def manifest(self):
        return ManifestResponse(name="fake", permissions=["ssh.execute"], commands=["fake"])


def test_service_init_success():
    impl = FakeImpl()
    response = Service(impl).init(InitRequest(session_id="s1", config={"k": "v"}))
    assert response == InitResponse(success=True, error="")
    assert impl.calls == [("init", "s1", {"k": "v"})]


def test_service_init_failure_reports_error():
    response = Service(FakeImpl(fail=True)).init(InitRequest(session_id="s1"))
    assert response == InitResponse(success=False, error="init failed")


def test_service_execute_returns_impl_result():
    response = Service(FakeImpl()).execute(ExecuteRequest(command="ls", args=["-l"]))
    assert response.exit_code == 7
    assert response.stdout == "ls"


def test_service_execute_failure_reports_error():
    response = Service(FakeImpl(fail=True)).execute(ExecuteRequest(command="ls"))
    assert response == ExecuteResponse(error="execute failed")


def test_service_stop_passes_force():
    impl = FakeImpl()
    assert Service(impl).stop(StopRequest(force=True)) == StopResponse(success=True)
    assert impl.calls == [("stop", True)]


def test_service_stop_failure_reports_error():
    response = Service(FakeImpl(fail=True)).stop(StopRequest())
    assert response == StopResponse(success=False, error="stop failed")


def test_service_info_failure_propagates():
    with pytest.raises(RuntimeError, match="info failed"):
        Service(FakeImpl(fail=True)).info()


def test_dispatch_returns_mapping():
    result = Service(FakeImpl()).dispatch("Plugin.Init", {"session_id": "s1"})
    assert result == {"success": True, "error": ""}


def test_dispatch_unknown_method():
    with pytest.raises(PluginRPCError):
        Service(FakeImpl()).dispatch("Plugin.Nope", {})


def test_client_through_service():
    impl = FakeImpl()
    service = Service(impl)
    methods = []

    def transport(method, params):
        methods.append(method)
        return service.dispatch(method, params)

    client = Client(transport)
    assert client.manifest() == impl.manifest()
    assert client.info().name == "fake"
    assert client.execute(ExecuteRequest(command="ls", args=["-l"])).stdout == "ls"
    assert client.stop(StopRequest(force=False)).success is True
    assert client.init(InitRequest(session_id="s2")).success is True
    assert methods == [
        "Plugin.Manifest",
        "Plugin.Info",
        "Plugin.Execute",
        "Plugin.Stop",
        "Plugin.Init",
    ]


def test_client_propagates_transport_errors():
    def transport(method, params):
        raise PluginRPCError("connection lost")

    with pytest.raises(PluginRPCError, match="connection lost"):
        Client(transport).info()


def test_serve_answers_each_line(monkeypatch):
    monkeypatch.setenv("TERMBUS_PLUGIN", "1")
    requests = [
        json.dumps({"id": 1, "method": "Plugin.Init", "params": {"session_id": "s1"}}),
        json.dumps({"id": 2, "method": "Plugin.Missing"}),
        "",
        "{broken",
        json.dumps({"id": 3, "method": "Plugin.Manifest"}),
    ]
    stdin = io.StringIO("\n".join(requests) + "\n")
    stdout = io.StringIO()
    serve(FakeImpl(), stdin, stdout)
    replies = [json.loads(line) for line in stdout.getvalue().splitlines()]
    assert len(replies) == 4
    assert replies[0] == {"id": 1, "result": {"success": True, "error": ""}, "error": None}
    assert replies[1]["id"] == 2
    assert replies[1]["result"] is None
    assert "Plugin.Missing" in replies[1]["error"]
    assert replies[2]["id"] is None
    assert replies[2]["error"].startswith("invalid request")
    assert replies[3]["result"]["commands"] == ["fake"]


def test_serve_requires_handshake_cookie(monkeypatch):
    monkeypatch.delenv("TERMBUS_PLUGIN", raising=False)
    with pytest.raises(PluginRPCError):
        serve(FakeImpl(), io.StringIO(""), io.StringIO())
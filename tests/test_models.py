import json
from datetime import datetime, timezone

import pytest

from termbus.models import (
    AgentPlan,
    AgentStep,
    ForwardTunnel,
    ForwardType,
    KeepaliveConfig,
    Pane,
    PaneType,
    SSHHostConfig,
    Session,
    SessionState,
    TunnelStatus,
    Window,
)


def test_host_config_defaults():
    cfg = SSHHostConfig(host="web")
    assert (
        cfg.port,
        cfg.connect_timeout,
        cfg.server_alive_interval,
        cfg.server_alive_count_max,
        cfg.strict_host_key_checking,
    ) == (22, 30, 60, 3, "ask")


def test_session_to_dict_keys():
    data = Session(id="s1").to_dict()
    assert set(data) == {
        "id",
        "host_config",
        "state",
        "windows",
        "active_window_id",
        "created_at",
        "connected_at",
        "error_msg",
        "keepalive_config",
        "reconnect_config",
    }


def test_session_to_dict_values():
    session = Session(
        id="s1",
        host_config=SSHHostConfig(host="web", user="alice"),
        keepalive_config=KeepaliveConfig(enabled=True, interval=60, count_max=3),
    )
    data = session.to_dict()
    assert data["state"] == "disconnected"
    assert data["connected_at"] is None
    assert data["host_config"]["Host"] == "web"
    assert data["host_config"]["User"] == "alice"
    assert data["host_config"]["Port"] == 22
    assert data["keepalive_config"] == {"enabled": True, "interval": 60, "count_max": 3}
    assert data["reconnect_config"] is None


def test_session_to_dict_is_json_serialisable():
    session = Session(id="s1", host_config=SSHHostConfig(host="web"), state=SessionState.CONNECTED)
    data = session.to_dict()
    assert json.loads(json.dumps(data)) == data
    assert data["state"] == "connected"


def test_session_connected_at_round_trips():
    when = datetime(2024, 5, 6, 7, 8, 9, tzinfo=timezone.utc)
    data = Session(id="s1", connected_at=when).to_dict()
    assert datetime.fromisoformat(data["connected_at"]) == when


def test_window_panes_exclude_content():
    pane = Pane(id="p1", type=PaneType.SHELL, session_id="s1", content=object(), active=True)
    window = Window(id="w1", session_id="s1", panes={"p1": pane}, active_pane_id="p1")
    data = Session(id="s1", windows={"w1": window}).to_dict()
    pane_data = data["windows"]["w1"]["panes"]["p1"]
    assert "content" not in pane_data
    assert pane_data["type"] == "shell"
    assert pane_data["active"] is True
    assert data["windows"]["w1"]["active_pane_id"] == "p1"


def test_tunnel_round_trip():
    tunnel = ForwardTunnel(
        id="t1",
        session_id="s1",
        type=ForwardType.REMOTE,
        local_addr="127.0.0.1:83",
        remote_addr="127.0.0.1:8083",
        status=TunnelStatus.RUNNING,
        auto_start=True,
        created_at=datetime(2023, 1, 1, tzinfo=timezone.utc),
    )
    assert ForwardTunnel.from_dict(tunnel.to_dict()) == tunnel


def test_tunnel_to_dict_uses_enum_values():
    data = ForwardTunnel(id="t1", type=ForwardType.DYNAMIC).to_dict()
    assert data["type"] == "dynamic"
    assert data["status"] == "stopped"


def test_tunnel_from_dict_accepts_zulu_time():
    tunnel = ForwardTunnel.from_dict({"id": "t1", "created_at": "2024-01-02T03:04:05Z"})
    assert tunnel.created_at == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def test_tunnel_from_dict_defaults():
    tunnel = ForwardTunnel.from_dict({"id": "t1"})
    assert tunnel.type is ForwardType.LOCAL
    assert tunnel.status is TunnelStatus.STOPPED
    assert tunnel.auto_start is False


def test_tunnel_from_dict_rejects_unknown_type():
    with pytest.raises(ValueError):
        ForwardTunnel.from_dict({"id": "t1", "type": "sideways"})


def test_tunnel_from_dict_rejects_bad_timestamp():
    with pytest.raises(ValueError):
        ForwardTunnel.from_dict({"id": "t1", "created_at": "yesterday"})


def test_agent_plan_lists_are_independent():
    first = AgentPlan(task="a")
    second = AgentPlan(task="b")
    first.steps.append(AgentStep(id=1, description="x"))
    first.risk_tips.append("careful")
    assert second.steps == []
    assert second.risk_tips == []
    assert first.steps[0].status.value == "pending"
import pytest

from termbus.models import ForwardTunnel, ForwardType, TunnelStatus
from termbus.tui.styles import strip_ansi
from termbus.tui.tunnel_list import NEW_TUNNEL, TunnelListError, TunnelListModel


class FakeTunnels:
    def __init__(self, tunnels=None, fail_list=False):
        self.tunnels = list(tunnels or [])
        self.fail_list = fail_list
        self.calls = []

    def list_tunnels(self, session_id):
        if self.fail_list:
            raise RuntimeError("boom")
        return [t for t in self.tunnels if t.session_id == session_id]

    def start_tunnel(self, tunnel_id):
        self.calls.append(("start", tunnel_id))

    def stop_tunnel(self, tunnel_id):
        self.calls.append(("stop", tunnel_id))

    def delete_tunnel(self, tunnel_id):
        self.calls.append(("delete", tunnel_id))
        self.tunnels = [t for t in self.tunnels if t.id != tunnel_id]


def make_tunnels():
    return [
        ForwardTunnel(id="t1", session_id="s1", local_addr="127.0.0.1:8081", remote_addr="127.0.0.1:81"),
        ForwardTunnel(
            id="t2",
            session_id="s1",
            local_addr="127.0.0.1:8082",
            remote_addr="127.0.0.1:82",
            status=TunnelStatus.RUNNING,
        ),
        ForwardTunnel(id="t3", session_id="s2", type=ForwardType.DYNAMIC, local_addr="127.0.0.1:0"),
    ]


@pytest.fixture
def model():
    m = TunnelListModel(FakeTunnels(make_tunnels()), 80, 24)
    m.refresh("s1")
    return m


def test_refresh_lists_session_tunnels(model):
    assert [t.id for t in model.tunnels] == ["t1", "t2"]
    assert model.session_id == "s1"


def test_refresh_error_wrapped():
    m = TunnelListModel(FakeTunnels(fail_list=True), 80, 24)
    with pytest.raises(TunnelListError, match="failed to list tunnels"):
        m.refresh("s1")


def test_refresh_clamps_selection(model):
    model.selected = 1
    model.tunnel_manager.tunnels = model.tunnel_manager.tunnels[:1]
    model.refresh("s1")
    assert model.selected == 0


def test_navigation_bounds(model):
    model.handle_key("up")
    assert model.selected == 0
    model.handle_key("j")
    model.handle_key("down")
    assert model.selected == len(model.tunnels) - 1
    model.handle_key("k")
    assert model.selected == 0


def test_selected_tunnel_empty():
    m = TunnelListModel(FakeTunnels(), 80, 24)
    assert m.selected_tunnel() is None
    for action in (m.start_selected, m.stop_selected, m.delete_selected):
        with pytest.raises(TunnelListError, match="no tunnel selected"):
            action()


def test_start_and_stop_selected(model):
    model.start_selected()
    model.stop_selected()
    assert model.tunnel_manager.calls == [("start", "t1"), ("stop", "t1")]


def test_enter_toggles_by_status(model):
    model.handle_key("enter")
    model.handle_key("down")
    model.handle_key("enter")
    assert model.tunnel_manager.calls == [("start", "t1"), ("stop", "t2")]


def test_delete_selected_removes_and_clamps(model):
    model.selected = 1
    model.delete_selected()
    assert [t.id for t in model.tunnels] == ["t1"]
    assert model.selected == 0
    assert ("delete", "t2") in model.tunnel_manager.calls


def test_d_key_on_empty_records_error():
    m = TunnelListModel(FakeTunnels(), 80, 24)
    m.handle_key("d")
    assert "no tunnel selected" in str(m.error)
    assert m.tunnels == []


def test_n_key_requests_new(model):
    assert model.handle_key("n") == NEW_TUNNEL
    assert model.handle_key("x") is None


def test_view_empty_message():
    m = TunnelListModel(FakeTunnels(), 80, 24)
    text = strip_ansi(m.view())
    assert "No tunnels. Press 'n' to create one." in text
    assert "Tunnels" in text


def test_view_lists_tunnels(model):
    text = strip_ansi(model.view())
    assert "127.0.0.1:8081" in text
    assert "127.0.0.1:82" in text
    assert "● Running" in text
    assert "○ Stopped" in text
    assert "> local" in text


def test_set_size(model):
    model.set_size(100, 30)
    assert (model.width, model.height) == (100, 30)
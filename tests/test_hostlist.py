from termbus.models import SSHHostConfig
from termbus.tui.hostlist import (
    HostList,
    host_description,
    host_filter_value,
    host_title,
)
from termbus.tui.styles import strip_ansi


def _hosts():
    return [
        SSHHostConfig(host="web", host_name="10.0.0.1", user="admin", alias="web-1"),
        SSHHostConfig(host="db", host_name="10.0.0.2", alias="db-1"),
        SSHHostConfig(host="cache"),
    ]


def test_title_is_alias():
    assert host_title(SSHHostConfig(alias="prod")) == "prod"


def test_description_variants():
    web, db, cache = _hosts()
    assert host_description(web) == f"{web.user}@{web.host_name}"
    assert host_description(db) == db.host_name
    assert host_description(cache) == cache.host


def test_filter_value_prefers_alias():
    web, _, cache = _hosts()
    assert host_filter_value(web) == web.alias
    assert host_filter_value(cache) == cache.host


def test_selection_moves_and_clamps():
    hosts = _hosts()
    lst = HostList(24, 20, hosts)
    assert lst.selected() is hosts[0]
    lst.handle_key("down")
    assert lst.selected() is hosts[1]
    for _ in range(5):
        lst.handle_key("j")
    assert lst.selected() is hosts[2]
    lst.handle_key("home")
    assert lst.selected() is hosts[0]
    lst.handle_key("up")
    assert lst.selected() is hosts[0]


def test_empty_list_has_no_selection():
    lst = HostList(24, 10, [])
    lst.handle_key("down")
    assert lst.selected() is None
    assert "Hosts" in strip_ansi(lst.view())


def test_view_lists_hosts():
    lst = HostList(30, 20, _hosts())
    text = strip_ansi(lst.view())
    assert "Hosts" in text
    assert "web-1" in text
    assert "admin@10.0.0.1" in text


def test_paging_shows_cursor_page():
    hosts = [SSHHostConfig(host=f"h{i}", alias=f"alias{i}") for i in range(10)]
    lst = HostList(30, 8, hosts)
    lst.handle_key("end")
    text = strip_ansi(lst.view())
    assert "alias9" in text
    assert "alias0" not in text


def test_set_size():
    lst = HostList(10, 10, _hosts())
    lst.set_size(40, 12)
    assert (lst.width, lst.height) == (40, 12)
    assert len(lst.view().split("\n")) >= 12
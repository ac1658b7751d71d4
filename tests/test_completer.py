import os

from termbus.tui.completer import Command, Completer


def _completer():
    c = Completer()
    c.add_command(Command(name="connect", aliases=["c"]))
    c.add_command(Command(name="close"))
    c.add_command(Command(name="help"))
    return c


def test_colon_command_completion():
    assert _completer().complete(":c") == [":c", ":close", ":connect"]


def test_bare_command_completion():
    assert _completer().complete("con") == ["connect"]


def test_empty_input():
    c = _completer()
    c.complete("he")
    assert c.complete("   ") == []
    assert c.last() == []


def test_last_remembers_result():
    c = _completer()
    result = c.complete("he")
    assert c.last() == result == ["help"]


def test_add_command_ignores_nameless():
    c = Completer()
    c.add_command(Command(name=""))
    c.add_command(None)
    assert c.commands == {}


def test_history():
    c = Completer()
    c.add_history("ls")
    c.add_history("")
    assert c.history == ["ls"]


def test_host_completion():
    c = _completer()
    c.set_hosts(["web1", "web2", "db"])
    assert c.complete("ssh @we") == ["@web1", "@web2"]
    assert c.complete("ssh we") == ["@web1", "@web2"]


def test_no_hosts_no_completion():
    assert _completer().complete("ssh @we") == []


def test_path_completion(tmp_path):
    for name in ("alpha.txt", "alpine.log", "beta"):
        (tmp_path / name).write_text("x")
    prefix = str(tmp_path) + os.sep + "al"
    result = _completer().complete("cat " + prefix)
    assert result == sorted([str(tmp_path / "alpha.txt"), str(tmp_path / "alpine.log")])
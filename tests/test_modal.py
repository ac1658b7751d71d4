from termbus.tui.modal import AuthModal, Button, ConfirmModal, Modal
from termbus.tui.styles import strip_ansi, visible_width


def test_modal_view_marks_active_button():
    modal = Modal(title="Title", content="Body", buttons=[Button("OK"), Button("Cancel")])
    text = strip_ansi(modal.view(20))
    assert "[OK]" in text
    assert "[Cancel]" not in text
    assert "Title" in text and "Body" in text
    assert visible_width(modal.view(20)) == 22


def test_confirm_runs_callback_then_button_action():
    calls = []
    modal = Modal(
        buttons=[Button("A", lambda: calls.append("a")), Button("B", lambda: calls.append("b"))],
        on_confirm=lambda: calls.append("confirm"),
    )
    modal.next()
    modal.confirm()
    assert calls == ["confirm", "b"]


def test_cancel_runs_callback():
    calls = []
    Modal(on_cancel=lambda: calls.append("cancel")).cancel()
    assert calls == ["cancel"]


def test_next_and_prev_wrap():
    modal = Modal(buttons=[Button("A"), Button("B"), Button("C")])
    modal.prev()
    assert modal.active_idx == 2
    modal.next()
    assert modal.active_idx == 0


def test_navigation_without_buttons():
    modal = Modal()
    modal.next()
    modal.prev()
    assert modal.active_idx == 0


def test_confirm_modal_keys():
    calls = []
    modal = ConfirmModal(
        title="Q", message="Sure?", on_yes=lambda: calls.append("yes"),
        on_no=lambda: calls.append("no"), active=True,
    )
    modal.handle_key("enter")
    modal.handle_key("esc")
    modal.handle_key("x")
    assert calls == ["yes", "no"]


def test_inactive_confirm_modal_ignores_keys():
    calls = []
    modal = ConfirmModal(on_yes=lambda: calls.append("yes"), active=False)
    modal.handle_key("enter")
    assert calls == []


def test_confirm_modal_view():
    text = strip_ansi(ConfirmModal(title="Permission", message="Allow?").view(30))
    assert "Permission" in text and "Allow?" in text


def test_auth_modal_masks_and_submits():
    submitted = []
    modal = AuthModal("Login", "Password", on_submit=submitted.append)
    for ch in "secret":
        modal.handle_key(ch)
    assert modal.value() == "secret"
    text = strip_ansi(modal.view(30))
    assert "secret" not in text
    assert "******" in text
    modal.handle_key("enter")
    assert submitted == ["secret"]


def test_auth_modal_shows_prompt_when_empty():
    assert "Password" in strip_ansi(AuthModal("Login", "Password").view(30))
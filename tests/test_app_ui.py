# tests/test_app_ui.py

import pytest
from streamlit.testing.v1 import AppTest
import cat_app.ui.adopted as adopted_ui
import cat_app.ui.gallery as gallery_ui
import cat_app.ui.login as login_ui


UNAUTHORIZED = {"error": "Unauthorized. Please log in.", "status": 401}
CATS = [{"id": "1", "tag": "tabby", "img": None, "description": "Loves boxes"}]


class FakeCookies(dict):
    """Stands in for the browser cookie component."""

    def __init__(self):
        super().__init__(session_id="sid-123")
        self.saved = False

    def ready(self):
        return True

    def save(self):
        self.saved = True


@pytest.fixture
def cookies(monkeypatch):
    jar = FakeCookies()
    monkeypatch.setattr(login_ui, "EncryptedCookieManager", lambda **kwargs: jar)
    monkeypatch.setattr(login_ui, "check_auth", lambda http: {"authenticated": False})
    monkeypatch.setattr(gallery_ui, "list_cats", lambda http: CATS)
    return jar


def logged_in_app(page="gallery"):
    at = AppTest.from_file("../cat_app/main.py", default_timeout=10)
    at.session_state["username"] = "alice"
    at.session_state["auth_checked"] = True
    at.session_state["page"] = page
    return at


def assert_logged_out(at, cookies):
    assert not at.exception
    assert "username" not in at.session_state
    assert cookies["session_id"] == ""
    assert cookies.saved
    assert "Username" in [t.label for t in at.sidebar.text_input]


def test_logged_in_user_sees_menu(cookies):
    at = logged_in_app().run()

    assert not at.exception
    assert at.session_state["username"] == "alice"
    labels = [b.label for b in at.sidebar.button]
    assert "🔓 Log out" in labels
    assert "adopt-1" in [b.key for b in at.button]


def test_unauthorized_adopted_list_logs_out(cookies, monkeypatch):
    monkeypatch.setattr(adopted_ui, "list_adopted", lambda http: UNAUTHORIZED)

    at = logged_in_app(page="adopted").run()

    assert_logged_out(at, cookies)
    assert [w.value for w in at.sidebar.warning] == ["Session expired. Please log in."]


def test_unauthorized_adopt_logs_out(cookies, monkeypatch):
    calls = []

    def adopt_cat(http, cat_id):
        calls.append(cat_id)
        return UNAUTHORIZED

    monkeypatch.setattr(gallery_ui, "adopt_cat", adopt_cat)

    at = logged_in_app().run()
    at.button(key="adopt-1").click().run()

    assert calls == ["1"]
    assert_logged_out(at, cookies)
    assert [w.value for w in at.sidebar.warning] == ["Session expired. Please log in."]


def test_logout_button_clears_login(cookies, monkeypatch):
    calls = []
    monkeypatch.setattr(login_ui, "logout_user", lambda http: calls.append(http) or {"message": "ok"})

    at = logged_in_app().run()
    next(b for b in at.sidebar.button if b.label == "🔓 Log out").click().run()

    assert len(calls) == 1
    assert_logged_out(at, cookies)
    assert "page" not in at.session_state
    assert not at.sidebar.warning


def test_adopted_page_lists_deleted_cats(cookies, monkeypatch):
    adopted = [
        {"id": 2, "catId": "6", "adoptionDate": "2024-05-02T10:00:00", "tag": None, "img": None, "description": None},
        {"id": 1, "catId": "1", "adoptionDate": "2024-05-01T09:30:00", "tag": "tabby",
         "img": "https://cataas.com/cat/tabby", "description": "Loves boxes"},
    ]
    monkeypatch.setattr(adopted_ui, "list_adopted", lambda http: adopted)

    at = logged_in_app(page="adopted").run()

    assert not at.exception
    names = [m.value for m in at.markdown]
    assert "**Unknown Cat**" in names
    assert "**Tabby**" in names
    assert "Adopted on: 2024-05-02" in [c.value for c in at.caption]

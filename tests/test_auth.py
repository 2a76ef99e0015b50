# tests/test_auth.py

from cat_api.core.config import settings
from cat_api.models import User
from conftest import register_and_login


def test_signup_then_duplicate_is_rejected(client):
    body = {"username": "bob", "email": "bob@example.com", "password": "pw"}

    res = client.post("/signup", json=body)
    assert res.status_code == 200
    assert "message" in res.json()

    res = client.post("/signup", json=body)
    assert res.status_code == 400
    assert "error" in res.json()


def test_signup_duplicate_email_with_new_username(client):
    client.post("/signup", json={"username": "bob", "email": "bob@example.com", "password": "pw"})
    res = client.post("/signup", json={"username": "robert", "email": "bob@example.com", "password": "pw"})
    assert res.status_code == 400


def test_signup_requires_all_fields(client):
    res = client.post("/signup", json={"username": "bob", "password": "pw"})
    assert res.status_code == 400
    assert res.json()["error"]


def test_password_is_stored_hashed(client, db_session):
    client.post("/signup", json={"username": "bob", "email": "bob@example.com", "password": "plain-text"})
    user = db_session.query(User).filter_by(username="bob").one()
    assert user.password != "plain-text"
    assert user.password.startswith("$2")


def test_login_sets_session_and_check_auth_reports_user(client):
    res = register_and_login(client, username="carol")
    assert res.json() == {"message": "Login successful", "username": "carol"}
    assert client.cookies.get(settings.SESSION_COOKIE_NAME)

    res = client.get("/check-auth")
    assert res.json() == {"authenticated": True, "username": "carol"}


def test_login_with_wrong_password(client):
    client.post("/signup", json={"username": "dave", "email": "dave@example.com", "password": "right"})

    res = client.post("/login", json={"username": "dave", "password": "wrong"})
    assert res.status_code == 401
    assert "error" in res.json()
    assert settings.SESSION_COOKIE_NAME not in res.cookies
    assert client.get("/check-auth").json() == {"authenticated": False}


def test_login_unknown_user(client):
    res = client.post("/login", json={"username": "nobody", "password": "x"})
    assert res.status_code == 401


def test_check_auth_without_session(client):
    assert client.get("/check-auth").json() == {"authenticated": False}


def test_logout_invalidates_session(auth_client):
    res = auth_client.post("/logout")
    assert res.status_code == 200

    assert auth_client.get("/check-auth").json() == {"authenticated": False}
    res = auth_client.post("/cats", json={"id": "99", "tag": "x"})
    assert res.status_code == 401


def test_old_session_id_rejected_after_logout(auth_client):
    sid = auth_client.cookies.get(settings.SESSION_COOKIE_NAME)
    auth_client.post("/logout")

    auth_client.cookies.set(settings.SESSION_COOKIE_NAME, sid)
    assert auth_client.get("/adopted").status_code == 401


def test_logout_without_session_is_safe(client):
    res = client.post("/logout")
    assert res.status_code == 200
    assert "message" in res.json()


def test_forged_session_cookie_is_rejected(client):
    client.cookies.set(settings.SESSION_COOKIE_NAME, "not-a-real-session")
    assert client.get("/adopted").status_code == 401
    assert client.get("/check-auth").json() == {"authenticated": False}


def test_padded_username_logs_in_as_signed_up(client):
    body = {"username": " erin ", "email": "erin@example.com", "password": "pw"}
    assert client.post("/signup", json=body).status_code == 200

    res = client.post("/login", json={"username": " erin ", "password": "pw"})
    assert res.status_code == 200
    assert res.json()["username"] == "erin"

    res = client.post("/login", json={"username": "erin", "password": "pw"})
    assert res.status_code == 200

# cat_app/services/api.py

import os
import requests
from dotenv import load_dotenv

load_dotenv()

# Base URL of the FastAPI backend
API_URL = os.getenv("API_URL", "http://localhost:8000")

# Name of the cookie the backend uses for the login session
SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "session_id")

TIMEOUT = 10


def new_http_session(session_id: str | None = None) -> requests.Session:
    """
    Creates the HTTP session used for one user of the app.
    The backend's session cookie lives in its cookie jar.
    """
    http = requests.Session()
    if session_id:
        http.cookies.set(SESSION_COOKIE_NAME, session_id)
    return http


def get_session_id(http: requests.Session) -> str | None:
    return http.cookies.get(SESSION_COOKIE_NAME)


def is_error(result) -> bool:
    return isinstance(result, dict) and "error" in result


def is_unauthorized(result) -> bool:
    return is_error(result) and result.get("status") == 401


def _call(http: requests.Session, method: str, path: str, **kwargs):
    try:
        res = http.request(method, f"{API_URL}{path}", timeout=TIMEOUT, **kwargs)
    except requests.RequestException as e:
        return {"error": f"Server unreachable: {e}", "status": None}

    try:
        data = res.json()
    except ValueError:
        data = None

    if res.ok:
        return data
    message = data.get("error") if isinstance(data, dict) else None
    return {"error": message or f"Request failed ({res.status_code})", "status": res.status_code}


# -------------------------------
# Authentication-related functions
# -------------------------------

def signup_user(http, username, email, password):
    return _call(http, "POST", "/signup", json={"username": username, "email": email, "password": password})


def login_user(http, username, password):
    """
    Logs in and keeps the session cookie in `http`.
    """
    return _call(http, "POST", "/login", json={"username": username, "password": password})


def logout_user(http):
    result = _call(http, "POST", "/logout")
    http.cookies.clear()
    return result


def check_auth(http):
    result = _call(http, "GET", "/check-auth")
    if is_error(result):
        return {"authenticated": False}
    return result


# -------------------------
# Cats
# -------------------------

def list_cats(http):
    return _call(http, "GET", "/cats")


def get_cat(http, cat_id):
    result = _call(http, "GET", f"/cats/{cat_id}")
    if isinstance(result, list):
        return result[0] if result else None
    return result


def create_cat(http, cat_id, tag, img, description):
    payload = {"id": cat_id, "tag": tag, "img": img, "description": description}
    return _call(http, "POST", "/cats", json=payload)


def update_cat(http, cat_id, tag, img, description):
    payload = {"tag": tag, "img": img, "description": description}
    return _call(http, "PUT", f"/cats/{cat_id}", json=payload)


def delete_cat(http, cat_id):
    return _call(http, "DELETE", f"/cats/{cat_id}")


# -------------------------
# Adoption
# -------------------------

def adopt_cat(http, cat_id):
    return _call(http, "POST", "/adopt", json={"catId": cat_id})


def list_adopted(http):
    return _call(http, "GET", "/adopted")

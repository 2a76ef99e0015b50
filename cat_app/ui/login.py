# cat_app/ui/login.py

import os
import streamlit as st
from dotenv import load_dotenv
from streamlit_cookies_manager import EncryptedCookieManager
from cat_app.services.api import (
    new_http_session,
    get_session_id,
    login_user,
    logout_user,
    signup_user,
    check_auth,
)

load_dotenv()

COOKIE_PASSWORD = os.getenv("COOKIE_PASSWORD", "change-me")


def load_cookies():
    """
    Syncs the browser cookies. Must run at the top of every script run:
    the cookie component only reports values while it is rendered.
    """
    cookies = EncryptedCookieManager(prefix="cat_gallery/", password=COOKIE_PASSWORD)
    if not cookies.ready():
        st.stop()
    st.session_state["cookies"] = cookies
    return cookies


def _cookies():
    return st.session_state["cookies"]


def get_http():
    if "http" not in st.session_state:
        st.session_state["http"] = new_http_session(_cookies().get("session_id") or None)
    return st.session_state["http"]


def is_logged_in() -> bool:
    return "username" in st.session_state


def restore_login():
    """
    Picks up a login kept in the browser cookie after a page reload.
    """
    if is_logged_in() or st.session_state.get("auth_checked"):
        return
    st.session_state["auth_checked"] = True

    if not _cookies().get("session_id"):
        return

    result = check_auth(get_http())
    if result.get("authenticated"):
        st.session_state["username"] = result["username"]
    else:
        _forget_login()


def _forget_login():
    st.session_state.pop("username", None)
    st.session_state.pop("http", None)
    cookies = _cookies()
    cookies["session_id"] = ""
    cookies.save()


def expire_login():
    """Called when the server answers 401: the session is gone."""
    _forget_login()
    st.session_state["auth_notice"] = "Session expired. Please log in."
    st.rerun()


def logout():
    logout_user(get_http())
    _forget_login()


def login_sidebar():
    if "show_register" not in st.session_state:
        st.session_state["show_register"] = False

    notice = st.session_state.pop("auth_notice", None)
    if notice:
        st.sidebar.warning(notice)

    with st.sidebar:
        if st.session_state["show_register"]:
            show_register_form()
        else:
            show_login_form()


def show_login_form():
    st.subheader("🔐 Log in")
    with st.form("login_form"):
        username = st.text_input("Username")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Log in")

    if submitted:
        with st.spinner("Logging in..."):
            http = get_http()
            result = login_user(http, username, password)
            if isinstance(result, dict) and result.get("error"):
                st.error(f"❌ Login failed: {result['error']}")
            else:
                st.session_state["username"] = result["username"]
                cookies = _cookies()
                cookies["session_id"] = get_session_id(http) or ""
                cookies.save()
                st.rerun()

    if st.button("Sign up"):
        st.session_state["show_register"] = True
        st.rerun()


def show_register_form():
    st.subheader("📝 Sign up")

    with st.form("register_form"):
        new_user = st.text_input("Username", key="new_user")
        new_email = st.text_input("Email", key="new_email")
        new_pass = st.text_input("Password", type="password", key="new_pass")
        submitted = st.form_submit_button("Create account")

    if submitted:
        with st.spinner("Creating account..."):
            result = signup_user(get_http(), new_user, new_email, new_pass)
            if isinstance(result, dict) and result.get("error"):
                st.error(f"❌ Sign up failed: {result['error']}")
            else:
                st.success("🎉 Account created! Please log in.")
                st.session_state["show_register"] = False
                st.rerun()

    if st.button("← Back to log in"):
        st.session_state["show_register"] = False
        st.rerun()

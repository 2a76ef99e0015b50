# cat_app/main.py

import streamlit as st
from dotenv import load_dotenv
from cat_app.ui.login import load_cookies, login_sidebar, restore_login, is_logged_in, logout
from cat_app.ui.gallery import gallery_page
from cat_app.ui.adopted import adopted_page


load_dotenv()


def main_page():
    st.sidebar.markdown(f"## 👋 {st.session_state['username']}")

    if st.sidebar.button("🐈 Gallery"):
        st.session_state["page"] = "gallery"
    if st.sidebar.button("💚 My adoptions"):
        st.session_state["page"] = "adopted"
    if st.sidebar.button("🔓 Log out"):
        logout()
        st.session_state.pop("page", None)
        st.rerun()

    page = st.session_state.get("page", "gallery")
    if page == "adopted":
        adopted_page()
    else:
        gallery_page(logged_in=True)


load_cookies()
restore_login()

if is_logged_in():
    main_page()
else:
    login_sidebar()
    gallery_page(logged_in=False)

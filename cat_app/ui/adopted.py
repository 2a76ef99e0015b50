# cat_app/ui/adopted.py

from datetime import datetime
import streamlit as st
from cat_app.services.api import list_adopted, is_error, is_unauthorized
from cat_app.ui.login import get_http, expire_login


def format_adoption_date(value) -> str:
    if not value:
        return "unknown"
    try:
        return datetime.fromisoformat(value).strftime("%Y-%m-%d")
    except ValueError:
        return value


def adopted_page():
    st.title("💚 My Adoptions")

    adopted = list_adopted(get_http())
    if is_unauthorized(adopted):
        expire_login()
    if is_error(adopted):
        st.error(f"Failed to load your adoptions: {adopted['error']}")
        return

    if not adopted:
        st.info("You haven't adopted any cats yet.")
        return

    cols = st.columns(3)
    for i, cat in enumerate(adopted):
        with cols[i % 3]:
            with st.container(border=True):
                if cat.get("img"):
                    st.image(cat["img"], width="stretch")
                st.markdown(f"**{(cat.get('tag') or 'Unknown Cat').title()}**")
                st.caption(f"Adopted on: {format_adoption_date(cat.get('adoptionDate'))}")

# cat_app/ui/gallery.py

import streamlit as st
from cat_app.services.api import (
    list_cats,
    get_cat,
    create_cat,
    update_cat,
    delete_cat,
    adopt_cat,
    is_error,
    is_unauthorized,
)
from cat_app.services.gallery import (
    ALL_TAGS,
    GalleryState,
    collect_tags,
    filter_cats,
    paginate,
    total_pages,
    clamp_page,
    new_cat_id,
)
from cat_app.ui.login import get_http, expire_login

COLUMNS = 3


def _check(result, failure: str) -> bool:
    """
    Shows an error for a failed call. A 401 logs the user out.
    """
    if is_unauthorized(result):
        expire_login()
    if is_error(result):
        st.error(f"❌ {failure}: {result['error']}")
        return False
    return True


def gallery_page(logged_in: bool):
    st.title("🐈 Cat Adoption Gallery")

    cats = list_cats(get_http())
    if is_error(cats):
        st.error("Failed to load cats. Please try again later.")
        return

    state = st.session_state.get("gallery", GalleryState())
    state = render_filters(state, collect_tags(cats))

    if logged_in and st.button("➕ Add cat"):
        add_cat_dialog()

    visible = filter_cats(cats, state)
    state = state.with_page(clamp_page(state.page, len(visible)))
    st.session_state["gallery"] = state

    render_cards(paginate(visible, state.page), logged_in)
    render_pagination(state, len(visible))


def render_filters(state: GalleryState, tags) -> GalleryState:
    options = [ALL_TAGS] + tags
    if st.session_state.get("gallery_tag") not in options:
        st.session_state["gallery_tag"] = ALL_TAGS

    col1, col2 = st.columns([3, 1])
    with col1:
        search = st.text_input("Search", key="gallery_search", placeholder="Search by tag or description")
    with col2:
        tag = st.selectbox(
            "Tag",
            options=options,
            key="gallery_tag",
            format_func=lambda t: "All Tags" if t == ALL_TAGS else t,
        )
    return state.with_filters(search, tag)


def render_cards(cats, logged_in: bool):
    if not cats:
        st.info("No felines found matching your criteria.")
        return

    for start in range(0, len(cats), COLUMNS):
        row = st.columns(COLUMNS)
        for col, cat in zip(row, cats[start:start + COLUMNS]):
            with col:
                render_card(cat, logged_in)


def render_card(cat, logged_in: bool):
    with st.container(border=True):
        if cat.get("img"):
            st.image(cat["img"], width="stretch")
        st.subheader((cat.get("tag") or "Unknown Cat").title())
        st.caption(cat.get("description") or "Information pending for this magnificent feline.")

        if not logged_in:
            return

        c1, c2, c3 = st.columns(3)
        with c1:
            if st.button("✏️ Edit", key=f"edit-{cat['id']}"):
                edit_cat_dialog(cat)
        with c2:
            if st.button("🗑️", key=f"delete-{cat['id']}"):
                delete_cat_dialog(cat)
        with c3:
            if st.button("💚 Adopt", key=f"adopt-{cat['id']}"):
                result = adopt_cat(get_http(), cat["id"])
                if _check(result, "Adoption failed"):
                    st.success("Congratulations! You have adopted a new feline friend!")


def render_pagination(state: GalleryState, count: int):
    pages = total_pages(count)
    if pages <= 1:
        return

    targets = [("←", state.page - 1, state.page <= 1)]
    targets += [(str(i), i, False) for i in range(1, pages + 1)]
    targets += [("→", state.page + 1, state.page >= pages)]

    for col, (label, page, disabled) in zip(st.columns(len(targets)), targets):
        with col:
            kind = "primary" if label == str(state.page) else "secondary"
            if st.button(label, key=f"page-{label}", type=kind, disabled=disabled):
                st.session_state["gallery"] = state.with_page(page)
                st.rerun()


# -------------------------------
# Dialogs
# -------------------------------

@st.dialog("Add a cat")
def add_cat_dialog():
    tag = st.text_input("Tag")
    img = st.text_input("Image URL")
    description = st.text_area("Description")

    if st.button("💾 Save"):
        result = create_cat(get_http(), new_cat_id(), tag, img, description)
        if _check(result, "Failed to add cat"):
            st.rerun()


@st.dialog("Edit cat")
def edit_cat_dialog(cat):
    # Edit the stored values, not the cached card.
    current = get_cat(get_http(), cat["id"])
    if not _check(current, "Failed to load cat"):
        return
    if current is None:
        st.warning("This cat no longer exists.")
        return
    cat = current

    tag = st.text_input("Tag", value=cat.get("tag") or "")
    img = st.text_input("Image URL", value=cat.get("img") or "")
    description = st.text_area("Description", value=cat.get("description") or "")

    if st.button("💾 Save"):
        result = update_cat(get_http(), cat["id"], tag, img, description)
        if _check(result, "Failed to update cat"):
            st.rerun()


@st.dialog("Delete cat")
def delete_cat_dialog(cat):
    st.warning(f"⚠️ Delete '{cat.get('tag') or cat['id']}'? This cannot be undone.")
    col1, col2 = st.columns(2)
    with col1:
        if st.button("Delete", type="primary"):
            result = delete_cat(get_http(), cat["id"])
            if _check(result, "Failed to delete cat"):
                st.rerun()
    with col2:
        if st.button("Cancel"):
            st.rerun()

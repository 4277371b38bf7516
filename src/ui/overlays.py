import streamlit as st
from models.models import ExchangeType
from ui.intents import (
    CancelDelete,
    CloseOverlay,
    ContactOwner,
    DismissNotices,
    RequestDelete,
    SubmitNewBook,
)
from ui.views import AddBookView, BookDetailView, Screen
from utils.constants import Label


def _render_book_detail(session, view: BookDetailView):
    title, close = st.columns([6, 1])
    title.subheader(view.title)
    if close.button("✕", key="close_overlay"):
        session.act(CloseOverlay())
    st.caption(f"{view.author} • {view.exchange_type}")
    st.write(view.description)
    st.divider()
    st.markdown(f"**Owner:** {view.owner_name} ({view.owner_rating} ★)")
    if view.distance:
        st.caption(view.distance)
    delete, contact = st.columns(2)
    if view.can_delete and delete.button("Delete", key="overlay_delete"):
        session.act(RequestDelete(view.book_id))
    if contact.button("Contact Owner", type="primary", key="contact_owner"):
        session.act(ContactOwner(view.book_id))


def _render_add_book(session, view: AddBookView):
    st.subheader("List a New Book")
    if view.error:
        st.error(view.error)
    with st.form("add_book_form", clear_on_submit=False):
        title_col, author_col = st.columns(2)
        title = title_col.text_input(Label.TITLE.value + Label.MANDATORY_FIELD_MARKER.value)
        author = author_col.text_input(
            Label.AUTHOR.value + Label.MANDATORY_FIELD_MARKER.value
        )
        cover_url = st.text_input(Label.COVER_URL.value)
        exchange_type = st.selectbox(
            Label.EXCHANGE_TYPE.value, [t.value for t in ExchangeType]
        )
        description = st.text_area(Label.DESCRIPTION.value)
        cancel, submit = st.columns(2)
        cancelled = cancel.form_submit_button("Cancel")
        submitted = submit.form_submit_button("Add Book", type="primary")

    if cancelled:
        session.act(CloseOverlay())
    if submitted:
        session.act(
            SubmitNewBook(
                title=title,
                author=author,
                exchange_type=exchange_type,
                cover_image_url=cover_url,
                description=description,
            ),
            "Listing your book...",
        )


def render_overlay(session, screen: Screen):
    """Draw the single open overlay, if any, above the page."""
    if screen.overlay is None:
        return
    with st.container(border=True):
        if isinstance(screen.overlay, BookDetailView):
            _render_book_detail(session, screen.overlay)
        elif isinstance(screen.overlay, AddBookView):
            _render_add_book(session, screen.overlay)


def render_confirm_delete(session, screen: Screen):
    confirm = screen.confirm_delete
    if confirm is None:
        return
    st.warning(f"{confirm.prompt} ({confirm.title})")
    yes, no, _ = st.columns([1, 1, 4])
    if yes.button("Delete", type="primary", key="confirm_delete"):
        session.act(RequestDelete(confirm.book_id, confirmed=True), "Deleting...")
    if no.button("Cancel", key="cancel_delete"):
        session.act(CancelDelete())


def render_notices(session, notices):
    if not notices:
        return
    for notice in notices:
        st.toast(notice)
    session.dispatch(DismissNotices())

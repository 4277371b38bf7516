from typing import List, Optional
import streamlit as st
from ui.intents import OpenBookDetails, RequestDelete
from ui.views import BookRowView


def render_book_row(session, row: BookRowView, scope: str):
    with st.container(border=True):
        cover, body = st.columns([1, 5])
        with cover:
            if row.cover_image_url:
                st.image(row.cover_image_url, width=80)
            else:
                st.markdown(f"### {row.initials}")
        with body:
            st.markdown(f"**{row.title}**")
            st.caption(f"{row.author} • {row.exchange_type}")
            st.caption(f"Owner: {row.owner_name} · Rating: {row.owner_rating} ★")
            if row.distance:
                st.caption(row.distance)
            details, delete, _ = st.columns([1, 1, 3])
            if details.button("View details", key=f"{scope}-details-{row.book_id}"):
                session.act(OpenBookDetails(row.book_id))
            if row.can_delete and delete.button(
                "Delete", key=f"{scope}-delete-{row.book_id}"
            ):
                session.act(RequestDelete(row.book_id))


def render_book_list(
    session, rows: Optional[List[BookRowView]], empty_message: str, scope: str
):
    if rows is None:
        st.caption("Loading books...")
        return
    if not rows:
        st.info(empty_message)
        return
    for row in rows:
        render_book_row(session, row, scope)

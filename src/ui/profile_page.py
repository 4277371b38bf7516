import streamlit as st
from ui.Page import Page
from ui.book_card import render_book_list
from ui.views import ProfileView


class ProfilePage(Page):
    """The signed-in user's details and their own listings."""

    def render(self, session):
        view: ProfileView = session.app.state.screen.page
        with st.container(border=True):
            st.title(view.name)
            st.caption(view.email)
            st.caption(f"Rating: {view.rating} ★")
        st.subheader("My Listed Books")
        render_book_list(session, view.rows, view.empty_message, scope="profile")

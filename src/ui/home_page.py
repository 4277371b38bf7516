import streamlit as st
from models.models import ExchangeType
from ui.Page import Page
from ui.book_card import render_book_list
from ui.intents import OpenAddBook, SetFilters
from ui.views import HomeView
from utils.constants import ALL_EXCHANGE_TYPES, Label

EXCHANGE_OPTIONS = [ALL_EXCHANGE_TYPES, *(t.value for t in ExchangeType)]


class HomePage(Page):
    """Browse every listing, filtered locally by text and exchange type."""

    def render(self, session):
        view: HomeView = session.app.state.screen.page
        entry = session.app.state.page_entry

        search, kind, action = st.columns([3, 2, 2], vertical_alignment="bottom")
        query = search.text_input(
            Label.SEARCH.value,
            placeholder=Label.SEARCH.value,
            label_visibility="collapsed",
            key=f"search_query-{entry}",
        )
        exchange_type = kind.selectbox(
            Label.EXCHANGE_TYPE.value,
            EXCHANGE_OPTIONS,
            label_visibility="collapsed",
            key=f"exchange_type-{entry}",
        )
        if view.can_list_book and action.button("List a New Book", type="primary"):
            session.act(OpenAddBook())
        st.caption(view.location_status)

        if (query, exchange_type) != (view.query, view.exchange_filter):
            session.dispatch(SetFilters(query=query, exchange_type=exchange_type))
            view = session.app.state.screen.page

        render_book_list(session, view.rows, view.empty_message, scope="home")

import atexit

import streamlit as st
from config.config import SETTINGS
from di.container import Container
from ui.header import render_header
from ui.overlays import render_confirm_delete, render_notices, render_overlay
from ui.session import ensure_session
from ui.views import FormView, HomeView, LoadingView, ProfileView
from utils.logging import setup_logging
from utils.styling import load_custom_css


@st.cache_resource
def get_container() -> Container:
    container = Container()
    atexit.register(container.shutdown_resources)
    return container


def main():
    setup_logging(SETTINGS.log_level)
    st.set_page_config(page_title="Decentralized Book Exchange", page_icon="📚")
    load_custom_css()
    container = get_container()
    session = ensure_session(container)
    session.boot()

    screen = session.app.state.screen
    render_header(session, screen.header)
    render_notices(session, session.app.state.notices)
    render_confirm_delete(session, screen)
    render_overlay(session, screen)

    page = screen.page
    if isinstance(page, HomeView):
        container.home_page().render(session)
    elif isinstance(page, ProfileView):
        container.profile_page().render(session)
    elif isinstance(page, FormView) and page.kind == "login":
        container.login_page().render(session)
    elif isinstance(page, FormView):
        container.signup_page().render(session)
    elif isinstance(page, LoadingView):
        st.caption("Loading...")


if __name__ == "__main__":
    main()

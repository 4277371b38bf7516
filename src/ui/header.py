import streamlit as st
from ui.intents import Logout, Navigate
from ui.views import HeaderView
from utils.constants import Pages


def render_header(session, header: HeaderView):
    brand, auth = st.columns([3, 2], vertical_alignment="center")
    with brand:
        if st.button("**B** · Decentralized Book Exchange", type="tertiary", key="brand"):
            session.act(Navigate(Pages.HOME.key))
        st.caption("Find, swap, or give away books near you")

    with auth:
        if header.signed_in:
            welcome, logout = st.columns(2)
            if welcome.button(header.welcome, type="tertiary", key="welcome"):
                session.act(Navigate(Pages.PROFILE.key))
            if logout.button("Logout", type="primary", key="logout"):
                session.act(Logout(), "Logging out...")
        else:
            login, signup = st.columns(2)
            if login.button("Login", key="header_login"):
                session.act(Navigate(Pages.LOGIN.key))
            if signup.button("Sign Up", type="primary", key="header_signup"):
                session.act(Navigate(Pages.SIGNUP.key))

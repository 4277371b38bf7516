import streamlit as st
from ui.Page import Page
from ui.intents import Navigate, SubmitLogin, SubmitSignup
from ui.views import FormView
from utils.constants import Label, Pages


class LoginPage(Page):
    def render(self, session):
        view: FormView = session.app.state.screen.page
        st.title("Login")
        if view.error:
            st.error(view.error)
        with st.form("login_form"):
            email = st.text_input(Label.EMAIL.value)
            submitted = st.form_submit_button("Login", type="primary")
        if submitted:
            session.act(SubmitLogin(email=email), "Logging in...")
        if st.button("Don't have an account? Sign up", type="tertiary"):
            session.act(Navigate(Pages.SIGNUP.key))


class SignupPage(Page):
    def render(self, session):
        view: FormView = session.app.state.screen.page
        st.title("Create Account")
        if view.error:
            st.error(view.error)
        with st.form("signup_form"):
            name = st.text_input(Label.NAME.value)
            email = st.text_input(Label.EMAIL.value)
            submitted = st.form_submit_button("Sign Up", type="primary")
        if submitted:
            session.act(SubmitSignup(name=name, email=email), "Creating account...")
        if st.button("Already have an account? Login", type="tertiary"):
            session.act(Navigate(Pages.LOGIN.key))

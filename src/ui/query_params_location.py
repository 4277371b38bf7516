import streamlit as st
from ui.router import InMemoryNavigationLocation

PAGE_PARAM = "page"


class QueryParamsLocation(InMemoryNavigationLocation):
    """Route kept in the ``?page=`` query parameter.

    Navigation runs on the session's event loop thread, which cannot touch
    ``st.query_params``; the script thread copies the value in with
    ``pull()`` at the start of a run and out with ``push()`` after actions.
    """

    def pull(self) -> None:
        self.target = st.query_params.get(PAGE_PARAM, "")

    def push(self) -> None:
        if self.target:
            st.query_params[PAGE_PARAM] = self.target
        elif PAGE_PARAM in st.query_params:
            del st.query_params[PAGE_PARAM]

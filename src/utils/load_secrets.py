import os
import streamlit as st


def load_env_vars():
    """Copy top-level Streamlit secrets into the environment, if a secrets file exists."""
    if not st.secrets.load_if_toml_exists():
        return
    for k, v in st.secrets.items():
        if isinstance(v, (str, int, float, bool)):
            os.environ.setdefault(k, str(v))

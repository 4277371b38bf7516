import streamlit as st

APP_CUSTOM_CSS = """
<style>
:root {
    --accent: #f97316;
    --accent-hover: #ea580c;
}

div[data-testid="stVerticalBlockBorderWrapper"] {
    border-radius: 12px;
}

button[kind="primary"] {
    background: var(--accent);
    border-color: var(--accent);
}

button[kind="primary"]:hover {
    background: var(--accent-hover);
    border-color: var(--accent-hover);
}
</style>
"""

APP_BACKGROUND_CSS_LIGHT_MODE = """
<style>
.stApp {
    background: #fffaf5;
}
</style>
"""


def load_custom_css():
    st.markdown(APP_CUSTOM_CSS, unsafe_allow_html=True)
    if st.context.theme.type != "dark":
        st.markdown(APP_BACKGROUND_CSS_LIGHT_MODE, unsafe_allow_html=True)

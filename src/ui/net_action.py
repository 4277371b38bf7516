import logging
import time
from contextlib import contextmanager

import streamlit as st

logger = logging.getLogger(__name__)

SLOW_ACTION_SECONDS = 2.0


@contextmanager
def net_action(text: str):
    """Show a spinner while a service call runs and log it when it drags."""
    started = time.monotonic()
    with st.spinner(text, show_time=True):
        yield
    elapsed = time.monotonic() - started
    if elapsed > SLOW_ACTION_SECONDS:
        logger.warning("'%s' took %.1fs", text, elapsed)

import logging
from dataclasses import dataclass
from typing import Optional
import streamlit as st
from ui.app import BookSwapApp
from ui.intents import ActionResult
from ui.net_action import net_action
from ui.query_params_location import QueryParamsLocation
from utils.async_runner import AsyncRunner

logger = logging.getLogger(__name__)

SESSION_KEY = "bookswap_session"


@dataclass
class Session:
    """A browser session's app together with the shared loop that runs it."""

    app: BookSwapApp
    runner: AsyncRunner

    @property
    def location(self) -> Optional[QueryParamsLocation]:
        location = self.app.router.location
        return location if isinstance(location, QueryParamsLocation) else None

    def boot(self) -> None:
        """Start the app on first run, otherwise pick up outside navigation."""
        if self.location:
            self.location.pull()
        if not self.app.started:
            with net_action("Loading..."):
                self.runner.run(self.app.start())
        else:
            self.runner.run(self.app.sync())
        if self.location:
            self.location.push()

    def dispatch(self, intent, text: Optional[str] = None) -> ActionResult:
        if text:
            with net_action(text):
                result = self.runner.run(self.app.dispatch(intent))
        else:
            result = self.runner.run(self.app.dispatch(intent))
        if self.location:
            self.location.push()
        return result

    def act(self, intent, text: Optional[str] = None) -> None:
        """Dispatch and redraw the page."""
        self.dispatch(intent, text)
        st.rerun()


def ensure_session(container) -> Session:
    """Return this browser session's Session, creating it on first use."""
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = Session(
            app=container.app(), runner=container.event_loop()
        )
        logger.info("New browser session")
    return st.session_state[SESSION_KEY]

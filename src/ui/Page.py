from abc import ABC, abstractmethod


class Page(ABC):
    """A Streamlit page that draws the view the app has already built.

    Pages never call the service themselves; they read ``session.app.state.screen``
    and turn widget events into intents via ``session.act``.
    """

    @abstractmethod
    def render(self, session) -> None:
        pass

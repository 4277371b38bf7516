import logging
from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Optional
from ui.state import AppState
from utils.constants import Pages

logger = logging.getLogger(__name__)


class NavigationLocation(ABC):
    """The addressable part of the client location that selects a page."""

    @abstractmethod
    def get(self) -> str:
        pass

    @abstractmethod
    def set(self, target: str) -> None:
        pass


class InMemoryNavigationLocation(NavigationLocation):
    def __init__(self, target: str = ""):
        self.target = target

    def get(self) -> str:
        return self.target

    def set(self, target: str) -> None:
        self.target = target


def resolve_route(target: str, has_user: bool) -> Pages:
    """Map a requested route to the page that will actually be shown.

    Unknown routes and the profile page without a signed-in user fall back
    to home.
    """
    page = Pages.from_key((target or "").lstrip("#"))
    if page is None:
        return Pages.HOME
    if page is Pages.PROFILE and not has_user:
        return Pages.HOME
    return page


class Router:
    def __init__(self, state: AppState, location: NavigationLocation):
        self.state = state
        self.location = location
        self.last_target: Optional[str] = None
        self._on_route: Optional[Callable[[Pages], Awaitable[None]]] = None

    def attach(self, on_route: Callable[[Pages], Awaitable[None]]) -> None:
        self._on_route = on_route

    async def handle(self) -> Pages:
        target = self.location.get()
        self.last_target = target
        page = resolve_route(target, self.state.current_user is not None)
        logger.info(f"Route {target!r} resolved to {page.name}")
        self.state.is_loading = True
        self.state.current_page = page
        self.state.page_entry += 1
        if self._on_route:
            await self._on_route(page)
        self.state.is_loading = False
        return page

    async def navigate(self, target: str | Pages) -> Pages:
        self.location.set(target.key if isinstance(target, Pages) else target)
        return await self.handle()

    def location_changed(self) -> bool:
        """True when the location moved without going through navigate()."""
        return self.location.get() != self.last_target

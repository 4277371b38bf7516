import asyncio
import logging
from typing import Optional
from clients.location_provider import LocationProvider
from clients.mock_remote_service import MockRemoteService
from models.models import Location, LocationStatus
from services.location_service import resolve_user_location
from ui.handlers import EventHandlers
from ui.intents import ActionResult
from ui.renderer import ViewRenderer
from ui.router import NavigationLocation, Router
from ui.state import AppState
from utils.constants import FALLBACK_LOCATION

logger = logging.getLogger(__name__)


class BookSwapApp:
    """One client session: its state plus the router, renderer and handlers bound to it."""

    def __init__(
        self,
        service: MockRemoteService,
        location: NavigationLocation,
        location_provider: Optional[LocationProvider] = None,
        location_timeout: float = 8.0,
        state: Optional[AppState] = None,
    ):
        self.state = state or AppState()
        self.service = service
        self.location_provider = location_provider
        self.location_timeout = location_timeout
        self.router = Router(self.state, location)
        self.renderer = ViewRenderer(self.state, service, self.router)
        self.handlers = EventHandlers(self.state, service, self.router, self.renderer)
        self.location_task: Optional[asyncio.Task] = None
        self.started = False

    async def start(self) -> None:
        """Restore the session, start the location lookup and show the first page."""
        self.renderer.show_loading()
        self.state.current_user = await self.service.get_current_user()
        self.location_task = asyncio.create_task(self._locate())
        self.location_task.add_done_callback(self._location_done)
        await self.router.handle()
        self.started = True
        logger.info("Session started")

    async def _locate(self) -> None:
        await resolve_user_location(
            self.state, self.location_provider, timeout=self.location_timeout
        )
        self.renderer.refresh()

    def _location_done(self, task: asyncio.Task) -> None:
        if task.cancelled() or task.exception() is None:
            return
        logger.error("Location lookup failed", exc_info=task.exception())
        self.state.user_location = Location(**FALLBACK_LOCATION)
        self.state.location_status = LocationStatus.UNAVAILABLE
        self.renderer.refresh()

    async def dispatch(self, intent) -> ActionResult:
        return await self.handlers.dispatch(intent)

    async def sync(self) -> None:
        """Pick up navigation that happened outside the app, else just repaint."""
        if self.router.location_changed():
            await self.router.handle()
        else:
            self.renderer.refresh()

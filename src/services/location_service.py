import asyncio
import logging
from typing import Optional
from clients.location_provider import LocationProvider
from models.errors import LocationDeniedError
from models.models import Location, LocationStatus
from ui.state import AppState
from utils.constants import FALLBACK_LOCATION

logger = logging.getLogger(__name__)


async def resolve_user_location(
    state: AppState,
    provider: Optional[LocationProvider],
    timeout: float = 8.0,
    fallback: Optional[Location] = None,
) -> None:
    """Fill in the viewer's location and status on the session state.

    Without a capable provider the status becomes Unavailable; a denial or a
    lookup slower than ``timeout`` seconds becomes Blocked. Both fall back to
    a fixed coordinate.
    """
    fallback = fallback or Location(**FALLBACK_LOCATION)
    if provider is None or not provider.available:
        state.user_location = fallback
        state.location_status = LocationStatus.UNAVAILABLE
        logger.info("Location capability unavailable, using fallback")
        return
    try:
        position = await asyncio.wait_for(provider.current_position(), timeout)
    except (LocationDeniedError, asyncio.TimeoutError) as e:
        state.user_location = fallback
        state.location_status = LocationStatus.BLOCKED
        logger.info(f"Location lookup blocked ({type(e).__name__}), using fallback")
        return
    state.user_location = position
    state.location_status = LocationStatus.FOUND
    logger.info("Location found")

import asyncio

import pytest

from clients.location_provider import (
    DeniedLocationProvider,
    LocationProvider,
    StaticLocationProvider,
    provider_from_settings,
)
from models.models import Location, LocationStatus
from services.location_service import resolve_user_location
from ui.state import AppState

FALLBACK = Location(lat=34.0522, lng=-118.2437)


class SlowProvider(LocationProvider):
    async def current_position(self) -> Location:
        await asyncio.sleep(10)
        return Location(lat=1, lng=1)


@pytest.mark.asyncio
async def test_found():
    state = AppState()
    here = Location(lat=12.9, lng=77.6)
    await resolve_user_location(state, StaticLocationProvider(here))
    assert state.location_status is LocationStatus.FOUND
    assert state.user_location == here


@pytest.mark.asyncio
@pytest.mark.parametrize("provider", [None, StaticLocationProvider(None)])
async def test_unavailable_uses_fallback(provider):
    state = AppState()
    await resolve_user_location(state, provider)
    assert state.location_status is LocationStatus.UNAVAILABLE
    assert state.user_location == FALLBACK


@pytest.mark.asyncio
async def test_denied_is_blocked():
    state = AppState()
    await resolve_user_location(state, DeniedLocationProvider())
    assert state.location_status is LocationStatus.BLOCKED
    assert state.user_location == FALLBACK


@pytest.mark.asyncio
async def test_timeout_is_blocked():
    state = AppState()
    await resolve_user_location(state, SlowProvider(), timeout=0.01)
    assert state.location_status is LocationStatus.BLOCKED
    assert state.user_location == FALLBACK


def test_state_starts_initializing():
    state = AppState()
    assert state.location_status is LocationStatus.INITIALIZING
    assert state.user_location is None


def test_provider_from_settings():
    assert isinstance(provider_from_settings(1.0, 2.0, denied=True), DeniedLocationProvider)
    assert not provider_from_settings(None, 2.0, denied=False).available
    provider = provider_from_settings(1.0, 2.0, denied=False)
    assert provider.available
    assert provider.location == Location(lat=1.0, lng=2.0)

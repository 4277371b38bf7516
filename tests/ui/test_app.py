import asyncio

import pytest

from clients.location_provider import LocationProvider
from clients.mock_remote_service import MockRemoteService
from models.models import Location, LocationStatus
from ui.app import BookSwapApp
from ui.intents import Logout, SubmitLogin
from ui.router import InMemoryNavigationLocation
from ui.views import HomeView, ProfileView
from utils.constants import Pages


class GatedProvider(LocationProvider):
    """Answers only once the test opens the gate."""

    def __init__(self):
        self.gate = asyncio.Event()

    async def current_position(self) -> Location:
        await self.gate.wait()
        return Location(lat=13.0827, lng=80.2707)


@pytest.mark.asyncio
async def test_start_without_session_shows_home(app):
    await app.start()
    assert app.started
    assert app.state.current_user is None
    assert app.state.current_page is Pages.HOME
    assert isinstance(app.state.screen.page, HomeView)
    assert len(app.state.screen.page.rows) == 3
    assert app.state.is_loading is False


@pytest.mark.asyncio
async def test_start_restores_session_and_route(service, location):
    await service.login("ravi@example.com")
    location.set("profile")
    app = BookSwapApp(service, location)
    await app.start()
    assert app.state.current_user.id == "u1"
    assert app.state.current_page is Pages.PROFILE
    assert isinstance(app.state.screen.page, ProfileView)


@pytest.mark.asyncio
async def test_start_guards_profile_without_session(service):
    app = BookSwapApp(service, InMemoryNavigationLocation("profile"))
    await app.start()
    assert app.state.current_page is Pages.HOME


@pytest.mark.asyncio
async def test_location_does_not_block_first_paint(service):
    provider = GatedProvider()
    app = BookSwapApp(service, InMemoryNavigationLocation(), location_provider=provider)
    await app.start()
    page = app.state.screen.page
    assert page.location_status == "Initializing..."
    assert all(row.distance is None for row in page.rows)

    provider.gate.set()
    await app.location_task
    page = app.state.screen.page
    assert app.state.location_status is LocationStatus.FOUND
    assert page.location_status == "Location found"
    assert [row.distance for row in page.rows][1] == "0m away"


@pytest.mark.asyncio
async def test_location_unavailable_without_provider(service):
    app = BookSwapApp(service, InMemoryNavigationLocation())
    await app.start()
    await app.location_task
    assert app.state.location_status is LocationStatus.UNAVAILABLE
    assert app.state.screen.page.location_status == "Location unavailable"


@pytest.mark.asyncio
async def test_sync_picks_up_external_navigation(app, location):
    await app.start()
    location.set("signup")
    await app.sync()
    assert app.state.current_page is Pages.SIGNUP


@pytest.mark.asyncio
async def test_sync_without_navigation_does_not_refetch(app, service):
    await app.start()
    calls = []
    original = service.get_books

    async def counting():
        calls.append(1)
        return await original()

    service.get_books = counting
    await app.sync()
    assert calls == []
    assert isinstance(app.state.screen.page, HomeView)


def _browser(store):
    """An app with its own session over the shared store."""
    return BookSwapApp(
        MockRemoteService(store, latency_scale=0), InMemoryNavigationLocation()
    )


class FailingProvider(LocationProvider):
    async def current_position(self) -> Location:
        raise RuntimeError("sensor exploded")


@pytest.mark.asyncio
async def test_location_failure_falls_back_to_unavailable(service):
    app = BookSwapApp(
        service, InMemoryNavigationLocation(), location_provider=FailingProvider()
    )
    await app.start()
    with pytest.raises(RuntimeError):
        await app.location_task
    await asyncio.sleep(0)
    assert app.state.location_status is LocationStatus.UNAVAILABLE
    assert app.state.user_location == Location(lat=34.0522, lng=-118.2437)
    assert app.state.screen.page.location_status == "Location unavailable"


@pytest.mark.asyncio
async def test_login_in_one_browser_does_not_sign_in_another(store):
    alice, bob = _browser(store), _browser(store)

    await alice.dispatch(SubmitLogin(email="alice@example.com"))
    await bob.start()
    assert bob.state.current_user is None
    assert bob.state.screen.header.signed_in is False


@pytest.mark.asyncio
async def test_logout_in_one_browser_keeps_the_other_signed_in(store):
    alice, bob = _browser(store), _browser(store)

    await alice.dispatch(SubmitLogin(email="alice@example.com"))
    await bob.dispatch(SubmitLogin(email="ravi@example.com"))
    await bob.dispatch(Logout())

    assert alice.state.current_user.email == "alice@example.com"
    assert (await alice.service.get_current_user()).id == alice.state.current_user.id
    assert bob.state.current_user is None
    assert await bob.service.get_current_user() is None

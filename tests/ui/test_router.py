import pytest

from models.models import User
from ui.router import InMemoryNavigationLocation, Router, resolve_route
from ui.state import AppState
from utils.constants import Pages

RAVI = User(id="u1", name="Ravi", email="ravi@example.com", rating=4.7)


@pytest.mark.parametrize(
    "target, has_user, expected",
    [
        ("", False, Pages.HOME),
        ("login", False, Pages.LOGIN),
        ("signup", True, Pages.SIGNUP),
        ("profile", False, Pages.HOME),
        ("profile", True, Pages.PROFILE),
        ("#profile", True, Pages.PROFILE),
        ("#login", False, Pages.LOGIN),
        ("settings", True, Pages.HOME),
        ("PROFILE", True, Pages.HOME),
        (None, False, Pages.HOME),
    ],
)
def test_resolve_route(target, has_user, expected):
    assert resolve_route(target, has_user) is expected


@pytest.mark.asyncio
async def test_navigate_updates_location_and_page():
    state = AppState()
    location = InMemoryNavigationLocation()
    shown = []

    async def on_route(page):
        shown.append(page)

    router = Router(state, location)
    router.attach(on_route)
    await router.navigate("login")
    assert location.get() == "login"
    assert state.current_page is Pages.LOGIN
    assert shown == [Pages.LOGIN]
    assert state.is_loading is False


@pytest.mark.asyncio
async def test_profile_guard_follows_current_user():
    state = AppState()
    router = Router(state, InMemoryNavigationLocation())
    assert await router.navigate(Pages.PROFILE) is Pages.HOME
    state.current_user = RAVI
    assert await router.navigate(Pages.PROFILE) is Pages.PROFILE


@pytest.mark.asyncio
async def test_external_navigation_matches_navigate():
    state = AppState(current_user=RAVI)
    location = InMemoryNavigationLocation()
    router = Router(state, location)
    await router.navigate("signup")
    entry = state.page_entry

    location.set("profile")
    assert router.location_changed()
    assert await router.handle() is Pages.PROFILE
    assert not router.location_changed()
    assert state.page_entry == entry + 1

    location.set("nowhere")
    assert await router.handle() is await router.navigate("nowhere")

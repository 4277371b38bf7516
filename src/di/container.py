from dependency_injector import containers, providers
from clients.key_value_store import InMemoryKeyValueStore, JsonFileKeyValueStore
from clients.location_provider import provider_from_settings
from clients.mock_remote_service import MockRemoteService
from clients.persistence_store import PersistenceStore
from ui.app import BookSwapApp
from ui.auth_pages import LoginPage, SignupPage
from ui.home_page import HomePage
from ui.profile_page import ProfilePage
from ui.query_params_location import QueryParamsLocation
from utils.async_runner import AsyncRunner
from config.config import SETTINGS


def init_event_loop():
    runner = AsyncRunner()
    yield runner
    runner.close()


class Container(containers.DeclarativeContainer):
    # Storage shared by every browser session
    key_value_store = providers.Selector(
        providers.Object("file" if SETTINGS.store_path else "memory"),
        file=providers.Singleton(JsonFileKeyValueStore, path=SETTINGS.store_path),
        memory=providers.Singleton(InMemoryKeyValueStore),
    )
    persistence_store = providers.Singleton(PersistenceStore, kv=key_value_store)

    # One loop thread runs the coroutines of all sessions
    event_loop = providers.Resource(init_event_loop)

    # Clients, one per browser session
    remote_service = providers.Factory(
        MockRemoteService,
        store=persistence_store,
        session_store=providers.Factory(
            PersistenceStore, kv=providers.Factory(InMemoryKeyValueStore)
        ),
        latency_scale=SETTINGS.latency_scale,
    )
    location_provider = providers.Singleton(
        provider_from_settings,
        lat=SETTINGS.user_lat,
        lng=SETTINGS.user_lng,
        denied=SETTINGS.location_denied,
    )

    # Session
    app = providers.Factory(
        BookSwapApp,
        service=remote_service,
        location=providers.Factory(QueryParamsLocation),
        location_provider=location_provider,
        location_timeout=SETTINGS.location_timeout,
    )

    # UI Pages
    home_page = providers.Singleton(HomePage)
    profile_page = providers.Singleton(ProfilePage)
    login_page = providers.Singleton(LoginPage)
    signup_page = providers.Singleton(SignupPage)

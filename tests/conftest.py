import pytest

from clients.key_value_store import InMemoryKeyValueStore
from clients.location_provider import StaticLocationProvider
from clients.mock_remote_service import MockRemoteService
from clients.persistence_store import PersistenceStore
from models.models import Location
from ui.app import BookSwapApp
from ui.router import InMemoryNavigationLocation

VIEWER_LOCATION = Location(lat=12.9352, lng=77.6245)


@pytest.fixture
def kv():
    return InMemoryKeyValueStore()


@pytest.fixture
def store(kv):
    return PersistenceStore(kv)


@pytest.fixture
def service(store):
    """Service with every delay collapsed to a bare event-loop yield."""
    return MockRemoteService(store, latency_scale=0)


@pytest.fixture
def slow_service(store):
    """Service keeping the relative delays, scaled down to tens of milliseconds."""
    return MockRemoteService(store, latency_scale=0.0001)


@pytest.fixture
def location():
    return InMemoryNavigationLocation()


@pytest.fixture
def app(service, location):
    return BookSwapApp(
        service,
        location,
        location_provider=StaticLocationProvider(VIEWER_LOCATION),
    )


@pytest.fixture
def slow_app(slow_service, location):
    return BookSwapApp(
        slow_service,
        location,
        location_provider=StaticLocationProvider(VIEWER_LOCATION),
    )

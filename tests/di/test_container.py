import pytest
from dependency_injector import providers

from clients.key_value_store import InMemoryKeyValueStore
from di.container import Container


@pytest.fixture
def container():
    container = Container()
    container.key_value_store.override(providers.Singleton(InMemoryKeyValueStore))
    yield container
    container.shutdown_resources()
    container.key_value_store.reset_override()


def test_event_loop_is_shared_and_closed_on_shutdown(container):
    runner = container.event_loop()
    assert container.event_loop() is runner
    assert runner.running
    container.shutdown_resources()
    assert not runner.running


def test_each_app_gets_its_own_session_over_shared_storage(container):
    first, second = container.app(), container.app()
    assert first.service is not second.service
    assert first.service.session_store is not second.service.session_store
    assert first.service.store is second.service.store

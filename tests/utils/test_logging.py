import logging

import pytest

from utils.logging import HealthCheckFilter


def _record(msg):
    return logging.LogRecord("tornado.access", logging.INFO, __file__, 1, msg, None, None)


@pytest.mark.parametrize(
    "msg",
    ["200 GET /_stcore/health (127.0.0.1)", "200 GET /healthz", "200 GET /_stcore/host-config"],
)
def test_health_probes_are_dropped(msg):
    assert HealthCheckFilter().filter(_record(msg)) is False


def test_other_requests_pass():
    assert HealthCheckFilter().filter(_record("200 GET /?page=profile")) is True

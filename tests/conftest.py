"""Shared pytest fixtures for all tests."""

import time

import httpx
import pytest

BRUSSELS = (50.8092356, 4.9370557)


@pytest.fixture
def sunset_payload():
    """sunrise-sunset.org body for 2024-06-21 (formatted=0)."""
    return {
        "results": {
            "sunrise": "2024-06-21T03:29:00+00:00",
            "sunset": "2024-06-21T19:48:00+00:00",
            "solar_noon": "2024-06-21T11:38:00+00:00",
            "day_length": 58740,
            "civil_twilight_begin": "2024-06-21T17:18:00+00:00",
            "civil_twilight_end": "2024-06-21T20:25:00+00:00",
        },
        "status": "OK",
        "tzid": "UTC",
    }


@pytest.fixture
def mock_client():
    """Build an httpx.Client whose requests are answered by handler."""
    clients = []

    def _build(handler):
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _build
    for client in clients:
        client.close()


@pytest.fixture
def host_zone(monkeypatch):
    """Set the host's local time zone for the rest of the test."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() not available on this platform")

    def _set(name):
        monkeypatch.setenv("TZ", name)
        time.tzset()

    yield _set
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def utc_local(host_zone):
    """Run the test with the host's local time zone set to UTC."""
    host_zone("UTC")

"""Shared fixtures for PTV adapter tests."""

import json
from typing import Any
from urllib.parse import urlsplit

import pytest

from ptv_departures.domain.models import Credentials

TEST_DEVID = "135"
TEST_KEY = "abcdefg"
TEST_BASE_URL = "https://timetableapi.example.com"
TEST_NOW = 1408083488.7

HEALTHY = {
    "securityTokenOK": True,
    "clientClockOK": True,
    "memcacheOK": True,
    "databaseOK": True,
}


def make_stop(
    stop_id: int = 1071,
    name: str = "Flinders Street Station",
    suburb: str = "Melbourne City",
    transport_type: str = "train",
    lat: float = -37.8183051,
    lon: float = 144.966964,
    distance: float | None = None,
) -> dict[str, Any]:
    """Build a PTV stop object as returned by the API."""
    stop: dict[str, Any] = {
        "stop_id": stop_id,
        "location_name": name,
        "suburb": suburb,
        "transport_type": transport_type,
        "lat": lat,
        "lon": lon,
    }
    if distance is not None:
        stop["distance"] = distance
    return stop


def make_departure(
    timetable: str = "2014-08-15T06:18:08Z",
    realtime: str | None = None,
    stop: dict[str, Any] | None = None,
    linedir_id: int = 38,
    direction_name: str = "Belgrave",
    line_id: int = 1,
    line_name: str = "Belgrave",
    transport_type: str = "train",
) -> dict[str, Any]:
    """Build a by-destination departure entry as returned by the API."""
    return {
        "time_timetable_utc": timetable,
        "time_realtime_utc": realtime,
        "platform": {
            "stop": stop or make_stop(),
            "direction": {
                "linedir_id": linedir_id,
                "direction_name": direction_name,
                "line": {
                    "line_id": line_id,
                    "line_name": line_name,
                    "transport_type": transport_type,
                },
            },
        },
    }


class FakeTransport:
    """HTTP transport answering from canned JSON payloads keyed by URL path prefix."""

    def __init__(self, payloads: dict[str, Any] | None = None, health: Any = None) -> None:
        self.payloads = payloads or {}
        self.health = HEALTHY if health is None else health
        self.requested_urls: list[str] = []

    async def fetch(self, url: str) -> str:
        self.requested_urls.append(url)
        path = urlsplit(url).path
        if path == "/v2/healthcheck":
            return json.dumps(self.health)
        for prefix, payload in self.payloads.items():
            if path.startswith(prefix):
                return payload if isinstance(payload, str) else json.dumps(payload)
        raise AssertionError(f"Unexpected request to {url}")

    @property
    def requested_paths(self) -> list[str]:
        return [urlsplit(url).path for url in self.requested_urls]


@pytest.fixture
def credentials() -> Credentials:
    """Credentials matching the published signing test vectors."""
    return Credentials(devid=TEST_DEVID, private_key=TEST_KEY)


@pytest.fixture
def clock() -> Any:
    """Fixed clock for reproducible health check URLs."""
    return lambda: TEST_NOW

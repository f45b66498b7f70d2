"""
Shared test fixtures for the launch-watch test suite.

Provides canned SpaceX API payloads and a SpaceXClient pointed at the
respx-mocked base URL.
"""

from __future__ import annotations

from typing import Any

import pytest

from launch_watch.adapters.spacex_client import SpaceXClient

BASE_URL = "https://api.spacexdata.com"
ROCKET_ID = "5e9d0d95eda69973a809d1ec"


def launch_payload(**overrides: Any) -> dict[str, Any]:
    """Return a /v5/launches/latest payload, with selected keys replaced."""
    payload: dict[str, Any] = {
        "id": "62dd70d5202306255024d139",
        "name": "Crew-5",
        "rocket": ROCKET_ID,
        "flight_number": 187,
        "date_utc": "2022-10-05T16:00:00.000Z",
        "success": True,
        "details": None,
    }
    payload.update(overrides)
    return payload


def rocket_payload(**overrides: Any) -> dict[str, Any]:
    """Return a /v4/rockets/{id} payload, with selected keys replaced."""
    payload: dict[str, Any] = {"id": ROCKET_ID, "name": "Falcon 9", "active": True, "stages": 2}
    payload.update(overrides)
    return payload


@pytest.fixture()
def client() -> SpaceXClient:
    """A SpaceXClient with fast retries, for respx-mocked tests."""
    return SpaceXClient(base_url=BASE_URL, timeout=5, retry_attempts=2, max_wait=0.1)

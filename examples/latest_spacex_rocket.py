"""
Example: the rocket name of the latest SpaceX launch, as one AsyncTry chain.

Talks to the public API with a bare httpx client; see launch_watch for the
full adapter with retries and error mapping.
"""

from __future__ import annotations

import asyncio
from typing import Any

import httpx

from attempt import AsyncTry, HttpError

API = "https://api.spacexdata.com"


async def get_latest_launch() -> dict[str, Any]:
    async with httpx.AsyncClient(base_url=API, timeout=10) as client:
        response = await client.get("/v5/launches/latest")
        response.raise_for_status()
        return response.json()


async def get_rocket(rocket_id: str) -> dict[str, Any]:
    async with httpx.AsyncClient(base_url=API, timeout=10) as client:
        response = await client.get(f"/v4/rockets/{rocket_id}")
        response.raise_for_status()
        return response.json()


def print_rocket_name_of_latest_launch() -> AsyncTry[str]:
    return (
        AsyncTry.of(get_latest_launch)
        .and_then(lambda _: print("Got the latest launch!"))
        .map(lambda launch: launch["rocket"])
        .and_then(lambda rocket_id: print(f"Got the rocket id: {rocket_id}"))
        .map(get_rocket)
        .and_then(lambda _: print("Got the rocket!"))
        .map(lambda rocket: rocket["name"])
        .and_then(lambda name: print(f"The rocket name is: {name}"))
        .map_failure(HttpError.cast)
    )


if __name__ == "__main__":
    asyncio.run(print_rocket_name_of_latest_launch().get_or_else(lambda error: f"failed: {error!r}"))

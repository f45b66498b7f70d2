"""
HTTP adapter — SpaceX REST API client via httpx.

Adapter layer: implements the LaunchSource port. Each lookup returns an
AsyncTry that has not run yet; the request happens when the chain is first
settled, and it happens once no matter how often the chain is queried.

Retry/backoff via tenacity on transient errors (network, timeout).
Every failure leaves this module as an HttpError:

  - HTTP error status            → HttpError with that status
  - timeout after all retries    → 504 Gateway Timeout
  - other transport errors       → 502 Bad Gateway
  - payload missing fields       → 502 Bad Gateway
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog
from attempt import AsyncTry, HttpError
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from launch_watch.domain.models import Launch, Rocket

log = structlog.get_logger()

LATEST_LAUNCH_PATH = "/v5/launches/latest"
ROCKET_PATH = "/v4/rockets/{rocket_id}"


def to_http_error(error: BaseException) -> HttpError:
    """Map a transport or parsing exception to the HttpError it stands for."""
    match error:
        case HttpError():
            return error
        case httpx.HTTPStatusError():
            return HttpError.from_status(error.response.status_code)
        case httpx.TimeoutException():
            return HttpError.gateway_timeout(f"SpaceX API timed out: {error}")
        case httpx.HTTPError():
            return HttpError.bad_gateway(f"SpaceX API unreachable: {error}")
        case KeyError() | ValueError() | TypeError():
            return HttpError.bad_gateway(f"Unexpected SpaceX API payload: {error!r}")
        case _:
            return HttpError.cast(error)


class SpaceXClient:
    """
    Look up launches and rockets on the SpaceX REST API.

    Implements the LaunchSource port.
    Uses tenacity retry on transient network errors only.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        retry_attempts: int = 3,
        max_wait: float = 10.0,
    ) -> None:
        self._base_url = base_url
        self._timeout = timeout
        self._retry_attempts = retry_attempts
        self._max_wait = max_wait

    def latest_launch(self) -> AsyncTry[Launch]:
        """
        Fetch the most recent launch.

        Calls GET {base_url}/v5/launches/latest.
        Returns AsyncTry[Launch]; failures carry an HttpError.
        """
        return (
            AsyncTry.of(lambda: self._get_json(LATEST_LAUNCH_PATH))
            .map(Launch.from_payload)
            .and_then(lambda launch: log.info(
                "launch.fetched",
                name=launch.name,
                flight_number=launch.flight_number,
            ))
            .map_failure(to_http_error)
        )

    def rocket(self, rocket_id: str) -> AsyncTry[Rocket]:
        """
        Fetch a rocket by its identifier.

        Calls GET {base_url}/v4/rockets/{rocket_id}.
        Returns AsyncTry[Rocket]; failures carry an HttpError (404 for an unknown id).
        """
        return (
            AsyncTry.of(lambda: self._get_json(ROCKET_PATH.format(rocket_id=rocket_id)))
            .map(Rocket.from_payload)
            .and_then(lambda rocket: log.info("rocket.fetched", rocket_id=rocket.id, name=rocket.name))
            .map_failure(to_http_error)
        )

    async def _get_json(self, path: str) -> Any:
        """HTTP GET with retry. Exceptions are captured by the surrounding AsyncTry."""
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._retry_attempts),
            wait=wait_exponential(multiplier=1, min=0.1, max=self._max_wait),
            retry=retry_if_exception_type((httpx.TimeoutException, httpx.NetworkError)),
            reraise=True,
        ):
            with attempt:
                async with httpx.AsyncClient(base_url=self._base_url, timeout=self._timeout) as client:
                    response = await client.get(path)
                    response.raise_for_status()
                    log.debug("spacex.response", path=path, status=response.status_code)
                    return response.json()
        raise AssertionError("unreachable")  # pragma: no cover

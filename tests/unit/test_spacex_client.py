"""
Unit tests for the SpaceX HTTP adapter.

Uses respx to mock httpx HTTP calls (never makes real HTTP requests).

Test categories:
  - Success: 200 with a valid payload → successful AsyncTry
  - HTTP error status: 404/500 → HttpError with that status, no retry
  - Timeout/network: retried, then → 504 / 502
  - Malformed response: → 502 (never raises)
  - Laziness: no request until the AsyncTry is settled, one request per chain
"""

from __future__ import annotations

import httpx
import pytest
import respx
from attempt import HttpError, TryAssertions

from launch_watch.adapters.spacex_client import SpaceXClient, to_http_error
from launch_watch.domain.models import Launch, Rocket
from tests.conftest import BASE_URL, ROCKET_ID, launch_payload, rocket_payload

LATEST_URL = f"{BASE_URL}/v5/launches/latest"
ROCKET_URL = f"{BASE_URL}/v4/rockets/{ROCKET_ID}"


# ═══════════════════════════════════════════════════════════════════════
# latest_launch()
# ═══════════════════════════════════════════════════════════════════════


class TestLatestLaunchSuccess:
    """
    GIVEN the SpaceX API answers 200 with a launch payload
    WHEN latest_launch() is settled
    THEN it holds the parsed Launch.
    """

    @pytest.mark.asyncio
    @respx.mock
    async def test_returns_launch(self, client: SpaceXClient) -> None:
        respx.get(LATEST_URL).mock(return_value=httpx.Response(200, json=launch_payload()))
        launch = await TryAssertions.assert_async_success(client.latest_launch())
        assert isinstance(launch, Launch)
        assert launch.name == "Crew-5"
        assert launch.rocket_id == ROCKET_ID

    @pytest.mark.asyncio
    @respx.mock
    async def test_no_request_until_settled(self, client: SpaceXClient) -> None:
        """
        GIVEN a latest_launch() chain
        WHEN it has been built but not settled
        THEN no request has been sent; settling it twice sends exactly one.
        """
        route = respx.get(LATEST_URL).mock(return_value=httpx.Response(200, json=launch_payload()))
        node = client.latest_launch()
        assert route.call_count == 0

        await node.get()
        await node.is_success()
        assert route.call_count == 1


class TestLatestLaunchHttpError:
    @pytest.mark.asyncio
    @respx.mock
    async def test_404_maps_to_not_found(self, client: SpaceXClient) -> None:
        """
        GIVEN the API responds 404
        WHEN latest_launch() is settled
        THEN the failure is HttpError(404, 'Not Found') and the request is not retried.
        """
        route = respx.get(LATEST_URL).mock(return_value=httpx.Response(404))
        error = await TryAssertions.assert_async_failure(client.latest_launch(), HttpError)
        assert (error.status_code, error.message) == (404, "Not Found")
        assert route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_500_maps_to_internal_server_error(self, client: SpaceXClient) -> None:
        respx.get(LATEST_URL).mock(return_value=httpx.Response(500))
        error = await TryAssertions.assert_async_failure(client.latest_launch(), HttpError)
        assert error.status_code == 500


class TestLatestLaunchTransportError:
    @pytest.mark.asyncio
    @respx.mock
    async def test_timeout_is_retried_then_succeeds(self, client: SpaceXClient) -> None:
        """
        GIVEN the first attempt times out and the second answers 200
        WHEN latest_launch() is settled
        THEN it succeeds after two requests.
        """
        route = respx.get(LATEST_URL).mock(
            side_effect=[
                httpx.ConnectTimeout("connect timed out"),
                httpx.Response(200, json=launch_payload()),
            ]
        )
        await TryAssertions.assert_async_success(client.latest_launch())
        assert route.call_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_persistent_timeout_maps_to_gateway_timeout(self, client: SpaceXClient) -> None:
        route = respx.get(LATEST_URL).mock(side_effect=httpx.ReadTimeout("read timed out"))
        error = await TryAssertions.assert_async_failure(client.latest_launch(), HttpError)
        assert error.status_code == 504
        assert "timed out" in error.message
        assert route.call_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_connection_error_maps_to_bad_gateway(self, client: SpaceXClient) -> None:
        respx.get(LATEST_URL).mock(side_effect=httpx.ConnectError("connection refused"))
        error = await TryAssertions.assert_async_failure(client.latest_launch(), HttpError)
        assert error.status_code == 502
        assert "unreachable" in error.message


class TestLatestLaunchMalformedResponse:
    @pytest.mark.asyncio
    @respx.mock
    async def test_missing_field_maps_to_bad_gateway(self, client: SpaceXClient) -> None:
        """
        GIVEN a 200 response whose payload lacks the rocket id
        WHEN latest_launch() is settled
        THEN the failure is a 502 HttpError (never raises).
        """
        respx.get(LATEST_URL).mock(return_value=httpx.Response(200, json={"id": "x", "name": "Crew-5"}))
        error = await TryAssertions.assert_async_failure(client.latest_launch(), HttpError)
        assert error.status_code == 502
        assert "Unexpected SpaceX API payload" in error.message

    @pytest.mark.asyncio
    @respx.mock
    async def test_non_json_body_maps_to_bad_gateway(self, client: SpaceXClient) -> None:
        respx.get(LATEST_URL).mock(return_value=httpx.Response(200, text="<html>maintenance</html>"))
        error = await TryAssertions.assert_async_failure(client.latest_launch(), HttpError)
        assert error.status_code == 502


# ═══════════════════════════════════════════════════════════════════════
# rocket()
# ═══════════════════════════════════════════════════════════════════════


class TestRocket:
    @pytest.mark.asyncio
    @respx.mock
    async def test_returns_rocket(self, client: SpaceXClient) -> None:
        respx.get(ROCKET_URL).mock(return_value=httpx.Response(200, json=rocket_payload()))
        rocket = await TryAssertions.assert_async_success(client.rocket(ROCKET_ID))
        assert rocket == Rocket(id=ROCKET_ID, name="Falcon 9", active=True)

    @pytest.mark.asyncio
    @respx.mock
    async def test_unknown_rocket_maps_to_not_found(self, client: SpaceXClient) -> None:
        respx.get(f"{BASE_URL}/v4/rockets/nope").mock(return_value=httpx.Response(404))
        error = await TryAssertions.assert_async_failure(client.rocket("nope"), HttpError)
        assert error.status_code == 404


# ═══════════════════════════════════════════════════════════════════════
# to_http_error()
# ═══════════════════════════════════════════════════════════════════════


class TestToHttpError:
    def test_http_error_is_kept(self) -> None:
        error = HttpError.conflict()
        assert to_http_error(error) is error

    def test_status_error_keeps_status(self) -> None:
        request = httpx.Request("GET", LATEST_URL)
        response = httpx.Response(429, request=request)
        status_error = httpx.HTTPStatusError("too many", request=request, response=response)
        assert to_http_error(status_error).status_code == 429

    def test_unexpected_error_is_cast(self) -> None:
        error = to_http_error(RuntimeError("boom"))
        assert (error.status_code, error.message) == (500, "boom")

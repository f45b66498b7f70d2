"""
Test assertions for Try and AsyncTry values.

Expressive assert helpers that produce clear failure messages.

Usage in tests:
    from attempt import TryAssertions

    def test_parse_port():
        result = Try.of(lambda: int("8080"))
        assert TryAssertions.assert_success(result) == 8080

    async def test_fetch_launch():
        node = client.fetch_latest_launch()
        error = await TryAssertions.assert_async_failure(node, HttpError)
        assert error.status_code == 404
"""

from __future__ import annotations

from typing import Any, TypeVar

from attempt.async_try import AsyncTry
from attempt.sync_try import Try

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


def _describe_cause(cause: BaseException) -> str:
    return f"{type(cause).__name__}({str(cause)!r})"


class TryAssertions:
    """Expressive test assertions for Try and AsyncTry values."""

    # ──────────────────────── Try ────────────────────────

    @staticmethod
    def assert_success(result: Try[T], message: str = "") -> T:
        """
        Assert the Try is a Success and return the value.

            value = TryAssertions.assert_success(result)
        """
        context = f" — {message}" if message else ""
        assert result.is_success(), (
            f"Expected Success but got Failure({_describe_cause(result.get_cause())}){context}"
        )
        return result.get()

    @staticmethod
    def assert_failure(
        result: Try[T],
        expected_type: type[E] | None = None,
        message: str = "",
    ) -> BaseException:
        """
        Assert the Try is a Failure, optionally checking the cause type.

            error = TryAssertions.assert_failure(result, ValueError)
        """
        context = f" — {message}" if message else ""
        assert result.is_failure(), f"Expected Failure but got Success({result.get()!r}){context}"
        cause = result.get_cause()
        if expected_type is not None:
            assert isinstance(cause, expected_type), (
                f"Expected cause of type {expected_type.__name__} "
                f"but got {_describe_cause(cause)}{context}"
            )
        return cause

    @staticmethod
    def assert_failure_message_contains(result: Try[T], substring: str) -> None:
        """Assert that the cause's message contains the given substring (case-insensitive)."""
        cause = TryAssertions.assert_failure(result)
        assert substring.lower() in str(cause).lower(), (
            f"Expected failure message to contain {substring!r} but message was: {str(cause)!r}"
        )

    @staticmethod
    def assert_success_value(result: Try[T], expected_value: Any) -> None:
        """Assert the Try is a Success with the specific value."""
        value = TryAssertions.assert_success(result)
        assert value == expected_value, f"Expected success value {expected_value!r} but got {value!r}"

    # ──────────────────────── AsyncTry ────────────────────────

    @staticmethod
    async def assert_async_success(result: AsyncTry[T], message: str = "") -> T:
        """Settle the AsyncTry, assert it succeeded and return the value."""
        return TryAssertions.assert_success(await _settled(result), message)

    @staticmethod
    async def assert_async_failure(
        result: AsyncTry[T],
        expected_type: type[E] | None = None,
        message: str = "",
    ) -> BaseException:
        """Settle the AsyncTry, assert it failed and return the cause."""
        return TryAssertions.assert_failure(await _settled(result), expected_type, message)


async def _settled(result: AsyncTry[T]) -> Try[T]:
    """Fold a settled AsyncTry back into a plain Try."""
    either = await result.resolve()
    return either.fold(Try.failure, Try.success)

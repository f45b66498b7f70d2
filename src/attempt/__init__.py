"""
attempt — Try / AsyncTry combinators for Python.

Explicit, composable error handling: wrap a call that may raise, chain
further steps, and only deal with the exception when you ask for the result.

    from attempt import AsyncTry, Try

    port = Try.of(lambda: int(raw_port)).get_or_else(lambda _: 8080)

    rocket_name = await (
        AsyncTry.of(fetch_latest_launch)
        .map(lambda launch: launch.rocket)
        .map(fetch_rocket)
        .map(lambda rocket: rocket.name)
        .get()
    )
"""

from attempt.sync_try import Try, Success, Failure
from attempt.async_try import AsyncTry
from attempt.either import Either
from attempt.optional import Optional
from attempt.http_error import HttpError, HttpErrorCode
from attempt.errors import AttemptError, ConstructionError, MisuseError
from attempt.assertions import TryAssertions

__all__ = [
    "Try",
    "Success",
    "Failure",
    "AsyncTry",
    "Either",
    "Optional",
    "HttpError",
    "HttpErrorCode",
    "AttemptError",
    "ConstructionError",
    "MisuseError",
    "TryAssertions",
]

__version__ = "1.0.0"

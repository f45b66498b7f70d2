"""
AsyncTry — the asynchronous counterpart of Try, with memoized resolution.

An AsyncTry wraps a deferred computation (a coroutine or any awaitable).
Nothing is awaited while the chain is being built; the first terminal
operation (is_success, is_failure, get, get_or_else, get_or_else_throw,
get_cause, resolve) settles the node and every later call reads the cached
outcome.

    AsyncTry.of(fetch) ─map─▶ node B ─and_then─▶ node C ─map─▶ node D
          │                     │                   │             │
       settles once          settles once        settles once  settles once

Each transformation builds a NEW node holding a coroutine function that
awaits the previous node's settlement and then runs its own step. The
coroutine is only created when the node settles, so a branch nobody
queries leaves nothing un-awaited behind. The previous node stays
independently resolvable. Exactly-once holds per node: however many times,
in whatever order, and however concurrently a node is queried, its executor
or transformer runs at most once.

State machine:

    PENDING ──first settle──▶ SUCCESS(value)
                         └──▶ FAILURE(cause)

Settling wraps the awaitable in a single asyncio task so that concurrent
resolvers (asyncio.gather(node.get(), node.is_success())) share one run.
Writes to the memoization slots happen only on the event loop and are
idempotent, so no lock is needed.

AsyncTry.of() calls the executor right away, but a coroutine does not run
until it is awaited. Unlike a JavaScript promise, AsyncTry.of(send) on its
own never executes the body of send: something has to settle the node (or
a node derived from it). Hand in a task (asyncio.ensure_future) instead of
a bare coroutine when the work must start immediately:

    AsyncTry.of(lambda: asyncio.ensure_future(send()))

No cancellation is threaded through a chain and nothing is retried.
Callers that need a timeout race the awaitable themselves
(asyncio.wait_for) before handing it to AsyncTry.of().
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from enum import Enum, auto, unique
from typing import (
    Any,
    Awaitable,
    Callable,
    Generic,
    TypeVar,
    Union,
)

from attempt.either import Either
from attempt.errors import ConstructionError, MisuseError
from attempt.sync_try import Try

T = TypeVar("T")
U = TypeVar("U")

MaybeAwaitable = Union[U, Awaitable[U]]

logger = logging.getLogger("attempt.async_try")


@unique
class _State(Enum):
    PENDING = auto()
    SUCCESS = auto()
    FAILURE = auto()


async def _await_if_needed(value: MaybeAwaitable[U]) -> U:
    """Await value when it is awaitable, otherwise hand it back as-is."""
    if inspect.isawaitable(value):
        return await value
    return value


def _identity(error: BaseException) -> BaseException:
    return error


class AsyncTry(Generic[T]):
    """
    Asynchronous result container with exactly-once, memoized resolution.

    Usage:
        >>> async def main():
        ...     name = await (
        ...         AsyncTry.of(fetch_latest_launch)
        ...         .map(lambda launch: launch.rocket)
        ...         .map(fetch_rocket)
        ...         .map(lambda rocket: rocket.name)
        ...         .get()
        ...     )
    """

    __slots__ = ("_source", "_factory", "_task", "_state", "_result", "_cause")

    def __init__(
        self,
        source: Awaitable[T] | None = None,
        *,
        factory: Callable[[], Awaitable[T]] | None = None,
        state: _State = _State.PENDING,
        result: Any = None,
        cause: BaseException | None = None,
    ) -> None:
        self._source = source
        self._factory = factory
        self._task: asyncio.Future[T] | None = None
        self._state = state
        self._result = result
        self._cause = cause

    # ──────────────────────── Resolution ────────────────────────

    async def _settle(self) -> None:
        """
        Drive the node from PENDING to a settled state.

        Safe to call any number of times: once settled, returns without
        touching the source again.
        """
        if self._state is not _State.PENDING:
            return
        if self._task is None:
            source = self._source if self._source is not None else self._factory()  # type: ignore[misc]
            self._task = asyncio.ensure_future(source)
        try:
            value = await asyncio.shield(self._task)
        except Exception as error:
            self._store_failure(error)
        else:
            self._store_success(value)

    def _store_success(self, value: T) -> None:
        if self._state is _State.PENDING:
            self._state = _State.SUCCESS
            self._result = value
            self._source = None
            self._factory = None
            logger.debug("AsyncTry settled: outcome=success")

    def _store_failure(self, error: BaseException) -> None:
        if self._state is _State.PENDING:
            self._state = _State.FAILURE
            self._cause = error
            self._source = None
            self._factory = None
            logger.debug(
                "AsyncTry settled: outcome=failure error=%s: %s",
                type(error).__name__,
                error,
            )

    # ──────────────────────── Transformations ────────────────────────

    def map(self, transformer: Callable[[T], MaybeAwaitable[U]]) -> AsyncTry[U]:
        """
        Transform the value once it is available. Short-circuits on failure.

        The transformer may be a plain function or a coroutine function.
        If this node fails, the transformer never runs and the cause
        propagates to the new node.

            AsyncTry.of(fetch_launch).map(lambda launch: launch.rocket)
            AsyncTry.of(fetch_launch).map(fetch_rocket_for_launch)
        """
        if self._state is _State.FAILURE:
            return AsyncTry.failure(self._cause)  # type: ignore[arg-type]

        async def mapped() -> U:
            value = await self.get()
            return await _await_if_needed(transformer(value))

        return AsyncTry(factory=mapped)

    def flat_map(
        self,
        transformer: Callable[[Any], MaybeAwaitable[AsyncTry[U] | Try[U]]] | None = None,
    ) -> AsyncTry[U]:
        """
        Chain an AsyncTry-returning function. Short-circuits on failure.

        If the value this node resolves to is itself an AsyncTry (or a Try),
        one level is unwrapped before the transformer runs. Without a
        transformer this simply flattens:

            AsyncTry.of(get_name).map(create_message).flat_map()
            AsyncTry.of(get_name).flat_map(create_message)

        The transformer may return an AsyncTry, a Try, or an awaitable of
        either; the new node settles to that container's outcome.
        """
        if self._state is _State.FAILURE:
            return AsyncTry.failure(self._cause)  # type: ignore[arg-type]

        chosen = transformer if transformer is not None else AsyncTry.success

        async def flattened() -> U:
            value = await self.get()
            if isinstance(value, (AsyncTry, Try)):
                value = await _terminal_value(value)
            inner = await _await_if_needed(chosen(value))
            if not isinstance(inner, (AsyncTry, Try)):
                raise TypeError(
                    f"flat_map transformer must return an AsyncTry or a Try, got {type(inner).__name__}"
                )
            return await _terminal_value(inner)

        return AsyncTry(factory=flattened)

    def map_failure(
        self,
        failure_transformer: Callable[[BaseException], MaybeAwaitable[BaseException]],
    ) -> AsyncTry[T]:
        """
        Transform the cause. A success passes through unchanged.

        The transformer may be sync or async. If it raises, the raised
        exception becomes the cause.

            AsyncTry.of(call_api).map_failure(HttpError.cast)
        """
        if self._state is _State.SUCCESS:
            return self

        async def remapped() -> T:
            try:
                return await self.get()
            except Exception as error:
                mapped = await _await_if_needed(failure_transformer(error))
                if not isinstance(mapped, BaseException):
                    raise ConstructionError(
                        f"Failure cause must be an exception, got {type(mapped).__name__}"
                    ) from error
                raise mapped

        return AsyncTry(factory=remapped)

    def map_to_success(
        self,
        failure_transformer: Callable[[BaseException], MaybeAwaitable[T]],
    ) -> AsyncTry[T]:
        """
        Recover from a failure by turning the cause into a value.

            AsyncTry.of(load_profile).map_to_success(lambda _: DEFAULT_PROFILE)
        """
        if self._state is _State.SUCCESS:
            return self

        async def recovered() -> T:
            try:
                return await self.get()
            except Exception as error:
                return await _await_if_needed(failure_transformer(error))

        return AsyncTry(factory=recovered)

    # ──────────────────────── Side Effects ────────────────────────

    def and_then(self, side_effect: Callable[[T], Any]) -> AsyncTry[T]:
        """
        Run a side effect on the value and keep the original value.

        The side effect may be sync or async; its return value is ignored.
        If it raises, the new node is a failure carrying that exception.
        The side effect runs exactly once for the new node, whether this
        node is already settled or still pending.

            AsyncTry.of(fetch_launch).and_then(lambda launch: log.info("launch.fetched"))
        """
        if self._state is _State.FAILURE:
            return self

        async def with_side_effect() -> T:
            value = await self.get()
            await _await_if_needed(side_effect(value))
            return value

        return AsyncTry(factory=with_side_effect)

    # ──────────────────────── Terminal Operations ────────────────────────

    async def is_success(self) -> bool:
        """Settle the node if needed and report whether it holds a value."""
        await self._settle()
        return self._state is _State.SUCCESS

    async def is_failure(self) -> bool:
        """Settle the node if needed and report whether it holds a cause."""
        return not await self.is_success()

    async def get(self) -> T:
        """Return the value, or raise the cause."""
        if await self.is_success():
            return self._result
        raise self._cause  # type: ignore[misc]

    async def get_or_else(self, fallback: Callable[[BaseException], MaybeAwaitable[U]]) -> T | U:
        """Return the value, or the (awaited) fallback computed from the cause."""
        if await self.is_success():
            return self._result
        return await _await_if_needed(fallback(self._cause))  # type: ignore[arg-type]

    async def get_or_else_throw(
        self,
        failure_mapper: Callable[[BaseException], MaybeAwaitable[BaseException]] = _identity,
    ) -> T:
        """Return the value, or raise the exception failure_mapper builds from the cause."""
        if await self.is_success():
            return self._result
        cause = self._cause
        mapped = await _await_if_needed(failure_mapper(cause))  # type: ignore[arg-type]
        if mapped is cause:
            raise cause  # type: ignore[misc]
        raise mapped from cause

    async def get_cause(self) -> BaseException:
        """Return the cause. Raises MisuseError if the node settled as a success."""
        if await self.is_success():
            raise MisuseError("Cannot get cause of a successful AsyncTry.")
        return self._cause  # type: ignore[return-value]

    async def resolve(self) -> Either[BaseException, T]:
        """Settle and fold into an Either: left holds the cause, right holds the value."""
        if await self.is_success():
            return Either.right(self._result)
        return Either.left(self._cause)

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def of(executor: Callable[[], MaybeAwaitable[T]]) -> AsyncTry[T]:
        """
        Start a deferred computation without awaiting it.

        executor is called immediately; the awaitable it returns is stored
        and only awaited on first settlement. A coroutine body therefore does
        not start before then, and an exception it raises is captured
        lazily. An executor that raises before producing an awaitable gives
        a failed AsyncTry, and one that returns a plain value gives a
        successful one.

            AsyncTry.of(fetch_latest_launch)
            AsyncTry.of(lambda: client.get(url))
        """
        try:
            pending = executor()
        except Exception as error:
            logger.debug("Executor raised before producing an awaitable: %s", error)
            return AsyncTry.failure(error)
        if inspect.isawaitable(pending):
            return AsyncTry(pending)
        return AsyncTry.success(pending)

    @staticmethod
    def success(value: T) -> AsyncTry[T]:
        """Create an already-settled successful AsyncTry."""
        return AsyncTry(state=_State.SUCCESS, result=value)

    @staticmethod
    def failure(error: BaseException) -> AsyncTry[Any]:
        """Create an already-settled failed AsyncTry. No computation is involved."""
        return AsyncTry(state=_State.FAILURE, cause=error)

    @staticmethod
    def from_try(result: Try[T]) -> AsyncTry[T]:
        """Lift a settled Try into the async world."""
        if result.is_success():
            return AsyncTry.success(result.get())
        return AsyncTry.failure(result.get_cause())

    # ──────────────────────── Dunder methods ────────────────────────

    def __repr__(self) -> str:
        match self._state:
            case _State.SUCCESS:
                return f"AsyncTry(Success({self._result!r}))"
            case _State.FAILURE:
                return f"AsyncTry(Failure({self._cause!r}))"
        return "AsyncTry(<pending>)"


async def _terminal_value(container: AsyncTry[U] | Try[U]) -> U:
    if isinstance(container, AsyncTry):
        return await container.get()
    return container.get()

"""
Try — a synchronous, immutable result of a computation that may raise.

A Try[T] is either Success(value: T) or Failure(cause: BaseException).
Try.of() runs a callable right away and captures whatever it raises; every
transformation after that is guarded the same way, so a chain never raises
until a terminal accessor (get, get_or_else_throw, get_cause) asks for it.

    ┌──────────┐     map      ┌──────────┐   and_then   ┌──────────┐
    │  Try.of  │──Success─────│ transform│──Success─────│  effect  │──→ Try[T]
    │          │              │          │              │          │
    └────┬─────┘              └────┬─────┘              └────┬─────┘
         │ Failure                 │ Failure                 │ Failure
         └─────────────────────────┴─────────────────────────┴──→ Try[T]

Only Exception subclasses are captured. KeyboardInterrupt, SystemExit and
asyncio.CancelledError still propagate.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
    Any,
    Awaitable,
    Callable,
    Generic,
    TypeVar,
)

from attempt.either import Either
from attempt.errors import ConstructionError, MisuseError

if TYPE_CHECKING:
    from attempt.async_try import AsyncTry

T = TypeVar("T")
U = TypeVar("U")

logger = logging.getLogger("attempt.sync_try")


def _identity(error: BaseException) -> BaseException:
    return error


class Try(Generic[T]):
    """
    Synchronous result container.

    Two possible states:
      - Success(value: T)          — the computation returned
      - Failure(cause: Exception)  — the computation raised

    Construct through Try.of(), Try.success() or Try.failure(); the base
    class itself cannot be instantiated.

    Usage:
        >>> Try.of(lambda: int("42")).map(lambda x: x * 2).get()
        84

        >>> Try.of(lambda: int("forty-two")).map(lambda x: x * 2).is_failure()
        True
    """

    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any) -> Try[T]:
        if cls is Try:
            raise ConstructionError("Try must be constructed with either a value or an error.")
        return super().__new__(cls)

    # ──────────────────────── Introspection ────────────────────────

    def is_success(self) -> bool:
        """Check if this Try holds a value."""
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        """Check if this Try holds a cause."""
        return isinstance(self, Failure)

    # ──────────────────────── Transformations ────────────────────────

    def map(self, transformer: Callable[[T], U]) -> Try[U]:
        """
        Transform the value. Short-circuits on failure.

        The transformer runs under the same capture as Try.of(), so an
        exception it raises becomes the cause of the returned failure.

            Try.success(5).map(lambda x: x * 2)   # → Success(10)
            Try.success(5).map(lambda x: x / 0)   # → Failure(ZeroDivisionError)
        """
        match self:
            case Success(value):
                return Try.of(lambda: transformer(value))
            case Failure(cause):
                return Failure(cause)
        raise TypeError("unreachable")  # pragma: no cover

    def flat_map(self, transformer: Callable[[Any], Try[U]] | None = None) -> Try[U]:
        """
        Chain a Try-returning function. Short-circuits on failure.

        When the value is itself a Try (the usual outcome of mapping a
        Try-returning function) one level is unwrapped before the
        transformer runs, and an inner failure becomes the result. Without
        a transformer this simply flattens:

            Try.success(Try.success(1)).flat_map()            # → Success(1)
            get_name().map(create_message).flat_map()         # → Try[str]
            Try.success("7").flat_map(parse_int)              # → whatever parse_int returns

        The transformer's Try is returned as-is. Returning anything else
        gives a failure whose cause is a TypeError.
        """
        match self:
            case Failure(cause):
                return Failure(cause)
            case Success(value):
                if isinstance(value, Try):
                    if value.is_failure():
                        return Failure(value.get_cause())
                    value = value.get()
                chosen = transformer if transformer is not None else Try.success
                outcome = Try.of(lambda: chosen(value))
                if outcome.is_failure():
                    return outcome
                inner = outcome.get()
                if not isinstance(inner, Try):
                    return Failure(
                        TypeError(f"flat_map transformer must return a Try, got {type(inner).__name__}")
                    )
                return inner
        raise TypeError("unreachable")  # pragma: no cover

    def map_failure(self, failure_transformer: Callable[[BaseException], BaseException]) -> Try[T]:
        """
        Transform the cause. Passes a success through unchanged.

        If the transformer raises, the raised exception becomes the cause.

            result.map_failure(HttpError.cast)
        """
        match self:
            case Success(_):
                return self
            case Failure(cause):
                try:
                    return Failure(failure_transformer(cause))
                except Exception as error:
                    return Failure(error)
        raise TypeError("unreachable")  # pragma: no cover

    def map_async(self, transformer: Callable[[T], Awaitable[U]]) -> AsyncTry[U]:
        """
        Continue the chain asynchronously.

            user = await Try.of(lambda: int(raw_id)).map_async(fetch_user).get()

        A failure short-circuits to AsyncTry.failure without calling the transformer.
        """
        from attempt.async_try import AsyncTry

        match self:
            case Success(value):
                return AsyncTry.of(lambda: transformer(value))
            case Failure(cause):
                return AsyncTry.failure(cause)
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Side Effects ────────────────────────

    def and_then(self, side_effect: Callable[[T], Any]) -> Try[T]:
        """
        Run a side effect on the value and keep the original Try.

        The side effect's return value is ignored. If it raises, the result
        is a new failure carrying that exception.

            Try.success(1).and_then(lambda v: v + 100).get()   # → 1
            result.and_then(lambda user: logger.info("Created %s", user.id))
        """
        match self:
            case Success(value):
                try:
                    side_effect(value)
                except Exception as error:
                    return Failure(error)
        return self

    # ──────────────────────── Terminal Accessors ────────────────────────

    def get(self) -> T:
        """Return the value, or raise the stored cause."""
        match self:
            case Success(value):
                return value
            case Failure(cause):
                raise cause
        raise TypeError("unreachable")  # pragma: no cover

    def get_or_else(self, fallback: Callable[[BaseException], U]) -> T | U:
        """Return the value, or compute a fallback from the cause."""
        match self:
            case Success(value):
                return value
            case Failure(cause):
                return fallback(cause)
        raise TypeError("unreachable")  # pragma: no cover

    def get_or_else_throw(
        self,
        failure_mapper: Callable[[BaseException], BaseException] = _identity,
    ) -> T:
        """
        Return the value, or raise the exception failure_mapper builds from the cause.

            order = result.get_or_else_throw(lambda e: HttpError.not_found(str(e)))
        """
        match self:
            case Success(value):
                return value
            case Failure(cause):
                mapped = failure_mapper(cause)
                if mapped is cause:
                    raise cause
                raise mapped from cause
        raise TypeError("unreachable")  # pragma: no cover

    def get_cause(self) -> BaseException:
        """Return the cause. Raises MisuseError if called on a success."""
        match self:
            case Failure(cause):
                return cause
            case Success(_):
                raise MisuseError("Cannot get cause of a successful Try.")
        raise TypeError("unreachable")  # pragma: no cover

    def resolve(self) -> Either[BaseException, T]:
        """Fold into an Either: left holds the cause, right holds the value."""
        match self:
            case Success(value):
                return Either.right(value)
            case Failure(cause):
                return Either.left(cause)
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def of(executor: Callable[[], T]) -> Try[T]:
        """
        Run executor now and capture the outcome.

        Before:
            try:
                port = int(raw_port)
            except ValueError as e:
                ...

        After:
            port = Try.of(lambda: int(raw_port))
        """
        try:
            return Success(executor())
        except Exception as error:
            logger.debug("Captured %s: %s", type(error).__name__, error)
            return Failure(error)

    @staticmethod
    def success(value: T) -> Try[T]:
        """Create a successful Try wrapping the given value."""
        return Success(value)

    @staticmethod
    def failure(error: BaseException) -> Try[Any]:
        """Create a failed Try carrying the given exception."""
        return Failure(error)

    # ──────────────────────── Dunder methods ────────────────────────

    def __bool__(self) -> bool:
        """Allow truthiness check: `if result: ...` succeeds only on Success."""
        return self.is_success()


@dataclass(frozen=True, slots=True)
class Success(Try[T]):
    """The success track. Wraps a value of type T. None is a valid value."""

    _value: T

    def __init__(self, value: T) -> None:
        object.__setattr__(self, "_value", value)

    def __repr__(self) -> str:
        return f"Success({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Success):
            return self._value == other._value
        if isinstance(other, Try):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("Success", self._value))


# Enable structural pattern matching: case Success(value)
Success.__match_args__ = ("_value",)


@dataclass(frozen=True, slots=True)
class Failure(Try[T]):
    """The failure track. Wraps the exception that was raised."""

    _cause: BaseException

    def __init__(self, cause: BaseException) -> None:
        if not isinstance(cause, BaseException):
            raise ConstructionError(
                f"Failure cause must be an exception, got {type(cause).__name__}"
            )
        object.__setattr__(self, "_cause", cause)

    def __repr__(self) -> str:
        return f"Failure({self._cause!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Failure):
            return self._cause is other._cause
        if isinstance(other, Try):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("Failure", id(self._cause)))


# Enable structural pattern matching: case Failure(cause)
Failure.__match_args__ = ("_cause",)

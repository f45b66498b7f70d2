"""
Optional — a container that may or may not hold a value.

Only None means absent. Falsy values (0, "", False, empty collections)
are present values:

    >>> Optional.of(5).map(lambda v: v + 1).get_or_else(lambda: 0)
    6
    >>> Optional.of(None).map(lambda v: v + 1).get_or_else(lambda: 0)
    0
    >>> Optional.of(0).is_present()
    True
"""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from attempt.errors import MisuseError

T = TypeVar("T")
U = TypeVar("U")

_EMPTY_MESSAGE = "Cannot get value of an empty Optional"


def _identity(error: BaseException) -> BaseException:
    return error


class Optional(Generic[T]):
    """Immutable maybe-value. Build with Optional.of() or Optional.empty()."""

    __slots__ = ("_value",)

    def __init__(self, value: T | None = None) -> None:
        self._value = value

    def is_present(self) -> bool:
        return self._value is not None

    def is_empty(self) -> bool:
        return self._value is None

    def map(self, mapper: Callable[[T], U | None]) -> Optional[U]:
        """Transform the value. An empty Optional, or a mapper returning None, gives empty."""
        if self._value is None:
            return Optional.empty()
        return Optional.of(mapper(self._value))

    def filter(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Keep the value only if predicate accepts it."""
        if self._value is not None and predicate(self._value):
            return self
        return Optional.empty()

    def if_present(self, consumer: Callable[[T], Any]) -> Optional[T]:
        """Call consumer with the value when present. Always returns self."""
        if self._value is not None:
            consumer(self._value)
        return self

    def get(self) -> T:
        """Return the value. Raises MisuseError when empty."""
        if self._value is None:
            raise MisuseError(_EMPTY_MESSAGE)
        return self._value

    def get_or_else(self, supplier: Callable[[], U]) -> T | U:
        if self._value is None:
            return supplier()
        return self._value

    def get_or_else_throw(
        self,
        failure_mapper: Callable[[BaseException], BaseException] = _identity,
    ) -> T:
        """
        Return the value, or raise what failure_mapper builds from a MisuseError.

            user = find_user(user_id).get_or_else_throw(lambda _: HttpError.not_found())
        """
        if self._value is None:
            raise failure_mapper(MisuseError(_EMPTY_MESSAGE))
        return self._value

    @staticmethod
    def of(value: T | None) -> Optional[T]:
        return Optional(value)

    @staticmethod
    def empty() -> Optional[Any]:
        return Optional()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Optional):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("Optional", self._value))

    def __repr__(self) -> str:
        if self._value is None:
            return "Optional.empty"
        return f"Optional({self._value!r})"

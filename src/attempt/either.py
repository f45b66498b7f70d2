"""
Either — a tagged union holding exactly one of two values.

By convention the left side carries a failure and the right side a success,
which is the shape Try.resolve() and AsyncTry.resolve() produce:

    Either.left(error)   → the failure side
    Either.right(value)  → the success side

Operations that only make sense for one side (get, map) are right-biased.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from attempt.errors import ConstructionError, MisuseError

L = TypeVar("L")
R = TypeVar("R")
U = TypeVar("U")


class _Missing:
    """Marks an unpopulated side. None is a legitimate value, so it can't be used."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<missing>"


_MISSING: Any = _Missing()


@dataclass(frozen=True, slots=True)
class Either(Generic[L, R]):
    """
    Immutable union of a left value and a right value. Exactly one is set.

        >>> Either.right(5).map(lambda x: x + 1).get()
        6
        >>> Either.left("boom").swap().get_right()
        'boom'
    """

    _left: Any = _MISSING
    _right: Any = _MISSING

    def __post_init__(self) -> None:
        has_left = self._left is not _MISSING
        has_right = self._right is not _MISSING
        if has_left and has_right:
            raise ConstructionError("Either cannot be constructed with both a left and a right.")
        if not has_left and not has_right:
            raise ConstructionError("Either must be constructed with either a left or a right.")

    # ──────────────────────── Introspection ────────────────────────

    def is_left(self) -> bool:
        return self._left is not _MISSING

    def is_right(self) -> bool:
        return self._right is not _MISSING

    def get_left(self) -> L:
        """Return the left value. Raises MisuseError on a right Either."""
        if not self.is_left():
            raise MisuseError("Cannot get left of right Either.")
        return self._left

    def get_right(self) -> R:
        """Return the right value. Raises MisuseError on a left Either."""
        if not self.is_right():
            raise MisuseError("Cannot get right of left Either.")
        return self._right

    def get(self) -> R:
        """Right-biased accessor, same as get_right()."""
        return self.get_right()

    # ──────────────────────── Transformations ────────────────────────

    def fold(self, on_left: Callable[[L], U], on_right: Callable[[R], U]) -> U:
        """
        Apply one of two functions depending on the populated side.

            either.fold(
                on_left=lambda err: f"Error: {err}",
                on_right=lambda user: f"Hello {user.name}",
            )
        """
        if self.is_left():
            return on_left(self._left)
        return on_right(self._right)

    def swap(self) -> Either[R, L]:
        """Exchange the sides: a left becomes a right and vice versa."""
        return Either(_left=self._right, _right=self._left)

    def map_left(self, mapper: Callable[[L], U]) -> Either[U, R]:
        """Transform the left value. A right Either passes through unchanged."""
        if self.is_left():
            return Either.left(mapper(self._left))
        return self  # type: ignore[return-value]

    def map_right(self, mapper: Callable[[R], U]) -> Either[L, U]:
        """Transform the right value. A left Either passes through unchanged."""
        if self.is_right():
            return Either.right(mapper(self._right))
        return self  # type: ignore[return-value]

    def map(self, mapper: Callable[[R], U]) -> Either[L, U]:
        """Right-biased map, same as map_right()."""
        return self.map_right(mapper)

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def left(value: L) -> Either[L, Any]:
        return Either(_left=value)

    @staticmethod
    def right(value: R) -> Either[Any, R]:
        return Either(_right=value)

    def __repr__(self) -> str:
        if self.is_left():
            return f"Left({self._left!r})"
        return f"Right({self._right!r})"

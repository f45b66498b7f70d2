"""
Tests for the synchronous Try container.

Tests cover:
  - Creation (of, success, failure) and construction failures
  - map, flat_map (incl. nested unwrapping), map_failure
  - Side effects (and_then)
  - Terminal accessors (get, get_or_else, get_or_else_throw, get_cause, resolve)
  - Bridging to AsyncTry (map_async)
  - Pattern matching, equality, repr
"""

from __future__ import annotations

import logging

import pytest

from attempt import (
    AsyncTry,
    ConstructionError,
    Failure,
    MisuseError,
    Success,
    Try,
)

test_error = ValueError("This is a test error.")


def raising_executor() -> int:
    raise test_error


# ═══════════════════════════════════════════════════════════════
# 1. Creation & Introspection
# ═══════════════════════════════════════════════════════════════


class TestOf:
    def test_returning_executor_gives_success(self):
        result = Try.of(lambda: 42)
        assert result.is_success()
        assert not result.is_failure()
        assert result.get() == 42

    def test_raising_executor_gives_failure(self):
        result = Try.of(raising_executor)
        assert result.is_failure()
        assert not result.is_success()

    def test_get_raises_the_same_instance(self):
        with pytest.raises(ValueError) as excinfo:
            Try.of(raising_executor).get()
        assert excinfo.value is test_error

    def test_executor_runs_once(self):
        calls: list[int] = []
        result = Try.of(lambda: calls.append(1) or len(calls))
        result.get()
        result.is_success()
        result.get()
        assert calls == [1]

    def test_none_and_falsy_values_are_successes(self):
        for value in (None, 0, "", False, []):
            assert Try.of(lambda v=value: v).get() == value

    def test_does_not_capture_keyboard_interrupt(self):
        def interrupted():
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            Try.of(interrupted)

    def test_logs_captured_failure(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="attempt.sync_try"):
            Try.of(raising_executor)
        assert "ValueError" in caplog.text


class TestConstruction:
    def test_success_wraps_value(self):
        assert Try.success(1).get() == 1

    def test_failure_wraps_error(self):
        assert Try.failure(test_error).get_cause() is test_error

    def test_base_class_cannot_be_instantiated(self):
        with pytest.raises(ConstructionError, match="either a value or an error"):
            Try()

    def test_failure_rejects_non_exception_cause(self):
        with pytest.raises(TypeError, match="must be an exception"):
            Failure("not an exception")

    def test_truthiness(self):
        assert Try.success(0)
        assert not Try.failure(test_error)


# ═══════════════════════════════════════════════════════════════
# 2. Transformations
# ═══════════════════════════════════════════════════════════════


class TestMap:
    def test_transforms_success_value(self):
        assert Try.success(5).map(lambda x: x * 2).get() == 10

    def test_raising_transformer_gives_failure(self):
        result = Try.success(5).map(lambda x: x / 0)
        assert result.is_failure()
        assert isinstance(result.get_cause(), ZeroDivisionError)

    def test_short_circuits_on_failure(self):
        calls: list[int] = []
        result = Try.failure(test_error).map(lambda x: calls.append(x))
        assert result.get_cause() is test_error
        assert calls == []

    def test_chain(self):
        result = Try.of(lambda: 3).map(lambda x: x + 1).map(lambda x: x * 2).map(str)
        assert result.get() == "8"


class TestFlatMap:
    def test_default_unwraps_one_level(self):
        assert Try.success(Try.success(1)).flat_map().get() == 1

    def test_default_unwraps_nested_failure(self):
        result = Try.success(Try.failure(test_error)).flat_map()
        assert result.get_cause() is test_error

    def test_default_only_unwraps_one_level(self):
        innermost = Try.success(1)
        result = Try.success(Try.success(innermost)).flat_map()
        assert result.get() is innermost

    def test_applies_transformer(self):
        def parse(raw: str) -> Try[int]:
            return Try.of(lambda: int(raw))

        assert Try.success("7").flat_map(parse).get() == 7
        assert Try.success("seven").flat_map(parse).is_failure()

    def test_unwraps_before_applying_transformer(self):
        result = Try.success(Try.success(2)).flat_map(lambda x: Try.success(x * 10))
        assert result.get() == 20

    def test_returned_failure_propagates_as_is(self):
        failure = Try.failure(test_error)
        assert Try.success(1).flat_map(lambda _: failure) is failure

    def test_raising_transformer_gives_failure(self):
        result = Try.success(1).flat_map(lambda _: raising_executor())
        assert result.get_cause() is test_error

    def test_failure_propagates_without_calling_transformer(self):
        calls: list[int] = []
        result = Try.failure(test_error).flat_map(lambda x: calls.append(x) or Try.success(x))
        assert result.get_cause() is test_error
        assert calls == []

    def test_non_try_result_becomes_failure(self):
        result = Try.success(1).flat_map(lambda x: x + 1)
        assert result.is_failure()
        cause = result.get_cause()
        assert isinstance(cause, TypeError)
        assert "must return a Try, got int" in str(cause)

    def test_chaining_try_returning_functions(self):
        def get_name() -> Try[str]:
            return Try.of(lambda: "John Doe")

        def create_message(name: str) -> Try[str]:
            return Try.of(lambda: f"Hello World from {name}!")

        def shout(message: str) -> Try[str]:
            return Try.of(lambda: message.upper())

        result = get_name().map(create_message).flat_map().flat_map(shout)
        assert result.get() == "HELLO WORLD FROM JOHN DOE!"


class TestMapFailure:
    def test_noop_on_success(self):
        original = Try.success(42)
        assert original.map_failure(lambda e: RuntimeError("never")) is original

    def test_maps_cause_exactly_once(self):
        calls: list[BaseException] = []

        def wrap(error: BaseException) -> BaseException:
            calls.append(error)
            return RuntimeError(f"Wrapped: {error}")

        result = Try.failure(test_error).map_failure(wrap)
        assert str(result.get_cause()) == "Wrapped: This is a test error."
        assert calls == [test_error]

    def test_raising_mapper_error_becomes_cause(self):
        replacement = KeyError("mapper broke")

        def broken(_: BaseException) -> BaseException:
            raise replacement

        assert Try.failure(test_error).map_failure(broken).get_cause() is replacement

    def test_non_exception_mapper_result_becomes_construction_error(self):
        cause = Try.failure(test_error).map_failure(lambda e: "not an exception").get_cause()
        assert isinstance(cause, ConstructionError)


# ═══════════════════════════════════════════════════════════════
# 3. Side Effects
# ═══════════════════════════════════════════════════════════════


class TestAndThen:
    def test_preserves_original_value(self):
        assert Try.success(1).and_then(lambda v: v + 100).get() == 1

    def test_returns_same_instance_on_success(self):
        original = Try.success(1)
        assert original.and_then(lambda v: None) is original

    def test_raising_side_effect_converts_to_failure(self):
        def explode(_: int) -> None:
            raise test_error

        result = Try.success(1).and_then(explode)
        assert result.is_failure()
        assert result.get_cause() is test_error

    def test_not_called_on_failure(self):
        calls: list[int] = []
        original = Try.failure(test_error)
        assert original.and_then(calls.append) is original
        assert calls == []

    def test_transformations_pipeline(self):
        seen: list[float] = []
        result = (
            Try.of(lambda: 4)
            .map(lambda x: x * 2)
            .map(lambda x: x * 3)
            .map(lambda x: x / 2)
            .and_then(seen.append)
        )
        assert result.get() == 12
        assert seen == [12]


# ═══════════════════════════════════════════════════════════════
# 4. Terminal Accessors
# ═══════════════════════════════════════════════════════════════


class TestGetOrElse:
    def test_returns_value_on_success(self):
        assert Try.success(1).get_or_else(lambda _: 2) == 1

    def test_computes_fallback_from_cause(self):
        assert Try.failure(test_error).get_or_else(lambda e: str(e)) == "This is a test error."


class TestGetOrElseThrow:
    def test_returns_value_on_success(self):
        assert Try.success(1).get_or_else_throw() == 1

    def test_raises_cause_by_default(self):
        with pytest.raises(ValueError) as excinfo:
            Try.failure(test_error).get_or_else_throw()
        assert excinfo.value is test_error

    def test_raises_mapped_error(self):
        with pytest.raises(RuntimeError, match="New error: This is a test error.") as excinfo:
            Try.failure(test_error).get_or_else_throw(lambda e: RuntimeError(f"New error: {e}"))
        assert excinfo.value.__cause__ is test_error


class TestGetCause:
    def test_returns_cause_on_failure(self):
        assert Try.failure(test_error).get_cause() is test_error

    def test_misuse_on_success(self):
        with pytest.raises(MisuseError, match="Cannot get cause of a successful Try"):
            Try.success(1).get_cause()

    def test_misuse_is_distinguishable_from_business_errors(self):
        with pytest.raises(ValueError) as excinfo:
            Try.success(1).get_cause()
        assert excinfo.value is not test_error
        assert isinstance(excinfo.value, MisuseError)


class TestResolve:
    def test_success_resolves_right(self):
        either = Try.success(1).resolve()
        assert either.is_right()
        assert either.get_right() == 1

    def test_failure_resolves_left(self):
        either = Try.failure(test_error).resolve()
        assert either.is_left()
        assert either.get_left() is test_error


# ═══════════════════════════════════════════════════════════════
# 5. Async bridge
# ═══════════════════════════════════════════════════════════════


class TestMapAsync:
    @pytest.mark.asyncio
    async def test_success_continues_asynchronously(self):
        async def double(x: int) -> int:
            return x * 2

        node = Try.success(5).map_async(double)
        assert isinstance(node, AsyncTry)
        assert await node.get() == 10

    @pytest.mark.asyncio
    async def test_failure_short_circuits(self):
        calls: list[int] = []

        async def record(x: int) -> int:
            calls.append(x)
            return x

        node = Try.failure(test_error).map_async(record)
        assert await node.get_cause() is test_error
        assert calls == []

    @pytest.mark.asyncio
    async def test_rejected_transformer_gives_failure(self):
        async def explode(_: int) -> int:
            raise test_error

        assert await Try.success(1).map_async(explode).get_cause() is test_error


# ═══════════════════════════════════════════════════════════════
# 6. Pattern matching, equality, repr
# ═══════════════════════════════════════════════════════════════


class TestPatternMatching:
    def test_match_success(self):
        match Try.success(42):
            case Success(v):
                assert v == 42
            case Failure(_):
                pytest.fail("Should be Success")

    def test_match_failure(self):
        match Try.failure(test_error):
            case Success(_):
                pytest.fail("Should be Failure")
            case Failure(cause):
                assert cause is test_error


class TestEqualityAndRepr:
    def test_successes_compare_by_value(self):
        assert Try.success(1) == Try.success(1)
        assert Try.success(1) != Try.success(2)

    def test_failures_compare_by_cause_identity(self):
        assert Try.failure(test_error) == Try.failure(test_error)
        assert Try.failure(ValueError("x")) != Try.failure(ValueError("x"))

    def test_success_never_equals_failure(self):
        assert Try.success(1) != Try.failure(test_error)

    def test_hashable(self):
        assert len({Try.success(1), Try.success(1), Try.failure(test_error)}) == 2

    def test_repr(self):
        assert repr(Try.success(1)) == "Success(1)"
        assert repr(Try.failure(test_error)) == "Failure(ValueError('This is a test error.'))"

"""Tests for Result container.

Validates:
- Functor laws
- Monad laws
- Variant accessors and pipe combinators
- Exception adapters
"""

from __future__ import annotations

from typing import Callable

import pytest

from holo_fn import HoloError, UnwrapError, pipe
from holo_fn import result as R
from holo_fn.errors import ErrorCode
from holo_fn.result import Err, Ok, Result


# ═════════════════════════════════════════════════════════════════════════════
# Property Tests - Functor Laws
# ═════════════════════════════════════════════════════════════════════════════


def test_functor_identity() -> None:
    """Functor law: fmap id = id"""
    result: Result[int, str] = Ok(42)
    assert result.map(lambda x: x) == result

    err_result: Result[int, str] = Err("fail")
    assert err_result.map(lambda x: x) == err_result


def test_functor_composition() -> None:
    """Functor law: fmap (f . g) = fmap f . fmap g"""
    f: Callable[[int], int] = lambda x: x + 1
    g: Callable[[int], int] = lambda x: x * 2

    result: Result[int, str] = Ok(5)
    assert result.map(lambda x: f(g(x))) == result.map(g).map(f)


# ═════════════════════════════════════════════════════════════════════════════
# Property Tests - Monad Laws
# ═════════════════════════════════════════════════════════════════════════════


def test_monad_left_identity() -> None:
    """Monad law: return a >>= f = f a"""
    f: Callable[[int], Result[int, str]] = lambda x: Ok(x * 2)
    assert Ok(42).chain(f) == f(42)


def test_monad_right_identity() -> None:
    """Monad law: m >>= return = m"""
    m: Result[int, str] = Ok(42)
    assert m.chain(Ok) == m


def test_monad_associativity() -> None:
    """Monad law: (m >>= f) >>= g = m >>= (\\x -> f x >>= g)"""
    m: Result[int, str] = Ok(5)
    f: Callable[[int], Result[int, str]] = lambda x: Ok(x + 1)
    g: Callable[[int], Result[int, str]] = lambda x: Ok(x * 2)

    assert m.chain(f).chain(g) == m.chain(lambda x: f(x).chain(g))


# ═════════════════════════════════════════════════════════════════════════════
# Operational Tests
# ═════════════════════════════════════════════════════════════════════════════


def test_ok_construction() -> None:
    result: Result[int, str] = Ok(42)

    assert result.is_ok()
    assert not result.is_err()
    assert not result.is_failure()
    assert result.extract() == 42
    assert result.unwrap() == 42
    assert result.ok() == 42
    assert result.err() is None


def test_err_construction() -> None:
    result: Result[int, str] = Err("failed")

    assert result.is_err()
    assert result.is_failure()
    assert result.extract() == "failed"
    assert result.unwrap_err() == "failed"
    assert result.ok() is None
    assert result.err() == "failed"


def test_lowercase_constructors() -> None:
    assert R.ok(1) == Ok(1)
    assert R.err("e") == Err("e")


def test_unwrap_wrong_variant_raises() -> None:
    with pytest.raises(UnwrapError) as exc_info:
        Err("boom").unwrap()
    assert exc_info.value.error.code is ErrorCode.UNWRAP_FAILED
    assert "Err('boom')" in str(exc_info.value)

    with pytest.raises(UnwrapError):
        Ok(1).unwrap_err()

    # UnwrapError stays a RuntimeError for callers catching the broad type
    with pytest.raises(RuntimeError, match="config missing"):
        Err("x").expect("config missing")


def test_map_err() -> None:
    assert Err("fail").map_err(lambda e: f"Error: {e}") == Err("Error: fail")
    assert Ok(42).map_err(lambda e: f"Error: {e}") == Ok(42)


def test_chain_short_circuits_on_err() -> None:
    called = False

    def step(x: int) -> Result[int, str]:
        nonlocal called
        called = True
        return Ok(x)

    assert Err("fail").chain(step) == Err("fail")
    assert not called


def test_flat_map_alias() -> None:
    assert Ok(5).flat_map(lambda x: Ok(x * 2)) == Ok(5).chain(lambda x: Ok(x * 2))


def test_validate() -> None:
    is_positive = lambda x: x > 0  # noqa: E731

    assert Ok(5).validate(is_positive, "not positive") == Ok(5)
    assert Ok(-1).validate(is_positive, "not positive") == Err("not positive")
    assert Err("earlier").validate(is_positive, "not positive") == Err("earlier")


def test_unwrap_or() -> None:
    assert Ok(5).unwrap_or(10) == 5
    assert Err("fail").unwrap_or(10) == 10
    assert Err("fail").unwrap_or_else(len) == 4


def test_match() -> None:
    cases = {"ok": lambda x: f"success: {x}", "err": lambda e: f"failed: {e}"}

    assert Ok(42).match(**cases) == "success: 42"
    assert Err("fail").match(**cases) == "failed: fail"


def test_equals() -> None:
    assert Ok(1).equals(Ok(1))
    assert not Ok(1).equals(Ok(2))
    assert not Ok("x").equals(Err("x"))
    assert Err("x").equals(Err("x"))


def test_dunders() -> None:
    assert repr(Ok(1)) == "Ok(1)"
    assert repr(Err("e")) == "Err('e')"
    assert bool(Ok(0))
    assert not bool(Err("e"))
    assert list(Ok(3)) == [3]
    assert list(Err("e")) == []
    assert len({Ok(1), Ok(1), Err(1)}) == 2


# ═════════════════════════════════════════════════════════════════════════════
# Pipe Combinators
# ═════════════════════════════════════════════════════════════════════════════


def test_pipe_success_path() -> None:
    def parse_int(s: str) -> Result[int, str]:
        try:
            return Ok(int(s))
        except ValueError:
            return Err(f"invalid: {s}")

    out = pipe(
        Ok("42"),
        R.chain(parse_int),
        R.validate(lambda n: n > 0, "must be positive"),
        R.map(lambda n: n * 2),
    )
    assert out == Ok(84)


def test_pipe_error_path() -> None:
    out = pipe(
        Ok(-5),
        R.validate(lambda n: n > 0, "must be positive"),
        R.map(lambda n: n * 2),
        R.map_err(str.upper),
    )
    assert out == Err("MUST BE POSITIVE")


def test_pipe_terminal_combinators() -> None:
    assert pipe(Err("x"), R.unwrap_or(0)) == 0
    assert pipe(Ok(2), R.match(ok=lambda v: v + 1, err=lambda e: -1)) == 3
    assert pipe(Ok(2), R.equals(Ok(2)))
    assert not pipe(Ok(2), R.equals(Err(2)))


# ═════════════════════════════════════════════════════════════════════════════
# Adapters
# ═════════════════════════════════════════════════════════════════════════════


def test_from_throwable_success() -> None:
    assert R.from_throwable(lambda: int("42")) == Ok(42)


def test_from_throwable_keeps_exception_by_default() -> None:
    result = R.from_throwable(lambda: int("x"))

    assert result.is_err()
    assert isinstance(result.unwrap_err(), ValueError)


def test_from_throwable_maps_error() -> None:
    result = R.from_throwable(lambda: 1 / 0, HoloError.from_exception)
    error = result.unwrap_err()

    assert error.code is ErrorCode.CAUGHT_EXCEPTION
    assert error.exc_type == "ZeroDivisionError"


@pytest.mark.asyncio
async def test_from_awaitable() -> None:
    async def fetch() -> int:
        return 7

    async def broken() -> int:
        raise KeyError("missing")

    assert await R.from_awaitable(fetch()) == Ok(7)
    assert await R.from_awaitable(broken(), lambda e: type(e).__name__) == Err("KeyError")


@pytest.mark.asyncio
async def test_from_async() -> None:
    async def fetch() -> str:
        return "data"

    def raises_before_awaiting() -> object:
        raise ValueError("sync failure")

    assert await R.from_async(fetch) == Ok("data")
    result = await R.from_async(raises_before_awaiting, str)  # type: ignore[arg-type]
    assert result == Err("sync failure")

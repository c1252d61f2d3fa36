"""Result monad: success (Ok) or failure (Err).

Implements a discriminated union with the operations the pipe helpers
build on:
- Functor: map, map_err
- Monad: chain (flat_map)
- Guards: validate
- Exhaustive case analysis: match

Performance notes:
- Uses __slots__ for minimal memory footprint
- One class with a flag instead of a subclass per variant
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Awaitable, Callable, Generic, TypeVar

from ..errors import UnwrapError

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")

_OK = True
_ERR = False


class Result(Generic[T, E]):
    """Discriminated union representing success (Ok) or failure (Err).

    Examples:
        >>> Ok(42).map(lambda x: x * 2).unwrap()
        84
        >>> Err("fail").map(lambda x: x * 2).unwrap_err()
        'fail'
        >>> Ok(5).chain(lambda x: Ok(x * 2) if x > 0 else Err("neg")).unwrap()
        10
    """

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_value",)

    def __init__(self, value: T | E, is_ok: bool) -> None:
        self._value = value
        self._is_ok = is_ok

    # ─── Type Checking ───────────────────────────────────────────────

    def is_ok(self) -> bool:
        return self._is_ok

    def is_err(self) -> bool:
        return not self._is_ok

    is_failure = is_err

    def extract(self) -> T | E:
        """Raw payload: the value if Ok, the error if Err."""
        return self._value

    # ─── Value Extraction ──────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract Ok value. Raises UnwrapError on Err."""
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        raise UnwrapError.wrong_variant("unwrap()", self)

    def unwrap_err(self) -> E:
        """Extract Err value. Raises UnwrapError on Ok."""
        if not self._is_ok:
            return self._value  # type: ignore[return-value]
        raise UnwrapError.wrong_variant("unwrap_err()", self)

    def expect(self, msg: str) -> T:
        """Extract Ok value with custom error message."""
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        raise UnwrapError.wrong_variant(msg, self)

    def unwrap_or(self, default: T) -> T:
        return self._value if self._is_ok else default  # type: ignore[return-value]

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Extract Ok value or compute one from the error."""
        return self._value if self._is_ok else f(self._value)  # type: ignore[return-value,arg-type]

    def ok(self) -> T | None:
        return self._value if self._is_ok else None  # type: ignore[return-value]

    def err(self) -> E | None:
        return self._value if not self._is_ok else None  # type: ignore[return-value]

    # ─── Functor / Monad ───────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply f to Ok value. Signature: Result[T,E] → (T→U) → Result[U,E]"""
        return Result(f(self._value), _OK) if self._is_ok else Result(self._value, _ERR)  # type: ignore[arg-type]

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        """Apply f to Err value. Signature: Result[T,E] → (E→F) → Result[T,F]"""
        return Result(f(self._value), _ERR) if not self._is_ok else Result(self._value, _OK)  # type: ignore[arg-type]

    def chain(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Monadic bind (>>=). Chain operations that can fail."""
        return f(self._value) if self._is_ok else Result(self._value, _ERR)  # type: ignore[arg-type]

    flat_map = chain

    def validate(self, predicate: Callable[[T], bool], error: E) -> Result[T, E]:
        """Turn an Ok into Err(error) when its value fails predicate. Err passes through."""
        if not self._is_ok or predicate(self._value):  # type: ignore[arg-type]
            return self
        return Result(error, _ERR)

    # ─── Pattern Matching ────────────────────────────────────────────────

    def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Exhaustive pattern match. Forces handling both Ok and Err."""
        return ok(self._value) if self._is_ok else err(self._value)  # type: ignore[arg-type]

    def equals(self, other: Result[T, E]) -> bool:
        """Same variant holding an equal payload."""
        return self == other

    # ─── Dunder Methods ──────────────────────────────────────────────────

    __bool__ = lambda self: self._is_ok  # noqa: E731
    __hash__ = lambda self: hash((self._is_ok, self._value))  # noqa: E731
    __repr__ = lambda self: f"{'Ok' if self._is_ok else 'Err'}({self._value!r})"  # noqa: E731
    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        return self._is_ok == other._is_ok and self._value == other._value if isinstance(other, Result) else NotImplemented

    def __iter__(self) -> Iterator[T]:
        """Iterate: yields value if Ok, nothing if Err."""
        if self._is_ok:
            yield self._value  # type: ignore[misc]


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def Ok(value: T) -> Result[T, E]:  # noqa: N802
    """Construct Ok variant (success)."""
    return Result(value, _OK)


def Err(error: E) -> Result[T, E]:  # noqa: N802
    """Construct Err variant (failure)."""
    return Result(error, _ERR)


ok = Ok
err = Err


# ═══════════════════════════════════════════════════════════════════════════════
# Adapters
# ═══════════════════════════════════════════════════════════════════════════════


def from_throwable(fn: Callable[[], T], on_error: Callable[[Exception], E] | None = None) -> Result[T, E]:
    """Run fn, capturing a raised exception as Err.

    Without on_error the exception object itself becomes the error.

    Example:
        >>> from_throwable(lambda: int("42"))
        Ok(42)
        >>> from_throwable(lambda: int("x"), lambda e: "not a number")
        Err('not a number')
    """
    try:
        return Result(fn(), _OK)
    except Exception as e:
        return Result(on_error(e) if on_error else e, _ERR)  # type: ignore[arg-type]


async def from_awaitable(awaitable: Awaitable[T], on_error: Callable[[Exception], E] | None = None) -> Result[T, E]:
    """Await an already-created awaitable, capturing failure as Err."""
    try:
        return Result(await awaitable, _OK)
    except Exception as e:
        return Result(on_error(e) if on_error else e, _ERR)  # type: ignore[arg-type]


async def from_async(fn: Callable[[], Awaitable[T]], on_error: Callable[[Exception], E] | None = None) -> Result[T, E]:
    """Call fn and await it, capturing failure as Err (including a synchronous raise from fn)."""
    try:
        return Result(await fn(), _OK)
    except Exception as e:
        return Result(on_error(e) if on_error else e, _ERR)  # type: ignore[arg-type]

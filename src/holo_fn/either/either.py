"""Either: a value that is Left (L) or Right (R).

Right is the success track and the one map/chain operate on; Left is the
failure track, carried through untouched until mapped with map_left or
handled in match.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Awaitable, Callable, Generic, TypeVar

from ..errors import UnwrapError

if TYPE_CHECKING:
    from collections.abc import Iterator

L = TypeVar("L")
R = TypeVar("R")
U = TypeVar("U")
M = TypeVar("M")

_RIGHT = True
_LEFT = False


class Either(Generic[L, R]):
    """Disjoint union of Left and Right.

    Examples:
        >>> Right(2).map(lambda x: x + 1)
        Right(3)
        >>> Left("no").map(lambda x: x + 1)
        Left('no')
    """

    __slots__ = ("_value", "_is_right")
    __match_args__ = ("_value",)

    def __init__(self, value: L | R, is_right: bool) -> None:
        self._value = value
        self._is_right = is_right

    def is_right(self) -> bool:
        return self._is_right

    def is_left(self) -> bool:
        return not self._is_right

    is_failure = is_left

    def extract(self) -> L | R:
        return self._value

    # ─── Value Extraction ──────────────────────────────────────────────

    def unwrap(self) -> R:
        """Extract Right value. Raises UnwrapError on Left."""
        if self._is_right:
            return self._value  # type: ignore[return-value]
        raise UnwrapError.wrong_variant("unwrap()", self)

    def unwrap_left(self) -> L:
        """Extract Left value. Raises UnwrapError on Right."""
        if not self._is_right:
            return self._value  # type: ignore[return-value]
        raise UnwrapError.wrong_variant("unwrap_left()", self)

    def unwrap_or(self, default: R) -> R:
        return self._value if self._is_right else default  # type: ignore[return-value]

    def unwrap_or_else(self, f: Callable[[L], R]) -> R:
        return self._value if self._is_right else f(self._value)  # type: ignore[return-value,arg-type]

    # ─── Transformations ───────────────────────────────────────────────

    def map(self, f: Callable[[R], U]) -> Either[L, U]:
        return Either(f(self._value), _RIGHT) if self._is_right else Either(self._value, _LEFT)  # type: ignore[arg-type]

    def map_left(self, f: Callable[[L], M]) -> Either[M, R]:
        return Either(f(self._value), _LEFT) if not self._is_right else Either(self._value, _RIGHT)  # type: ignore[arg-type]

    def chain(self, f: Callable[[R], Either[L, U]]) -> Either[L, U]:
        return f(self._value) if self._is_right else Either(self._value, _LEFT)  # type: ignore[arg-type]

    flat_map = chain

    def validate(self, predicate: Callable[[R], bool], left_value: L) -> Either[L, R]:
        """Turn a Right into Left(left_value) when its value fails predicate."""
        if not self._is_right or predicate(self._value):  # type: ignore[arg-type]
            return self
        return Either(left_value, _LEFT)

    def swap(self) -> Either[R, L]:
        return Either(self._value, not self._is_right)

    def match(self, *, left: Callable[[L], U], right: Callable[[R], U]) -> U:
        return right(self._value) if self._is_right else left(self._value)  # type: ignore[arg-type]

    def equals(self, other: Either[L, R]) -> bool:
        return self == other

    # ─── Dunder Methods ──────────────────────────────────────────────────

    __bool__ = lambda self: self._is_right  # noqa: E731
    __hash__ = lambda self: hash((self._is_right, self._value))  # noqa: E731
    __repr__ = lambda self: f"{'Right' if self._is_right else 'Left'}({self._value!r})"  # noqa: E731
    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        return self._is_right == other._is_right and self._value == other._value if isinstance(other, Either) else NotImplemented

    def __iter__(self) -> Iterator[R]:
        if self._is_right:
            yield self._value  # type: ignore[misc]


def Right(value: R) -> Either[L, R]:  # noqa: N802
    """Construct Right variant (success)."""
    return Either(value, _RIGHT)


def Left(value: L) -> Either[L, R]:  # noqa: N802
    """Construct Left variant (failure)."""
    return Either(value, _LEFT)


right = Right
left = Left


def try_catch(fn: Callable[[], R], on_error: Callable[[Exception], L] | None = None) -> Either[L, R]:
    """Run fn; a raised exception becomes Left (mapped through on_error if given)."""
    try:
        return Either(fn(), _RIGHT)
    except Exception as e:
        return Either(on_error(e) if on_error else e, _LEFT)  # type: ignore[arg-type]


async def from_awaitable(awaitable: Awaitable[R], on_error: Callable[[Exception], L] | None = None) -> Either[L, R]:
    """Await an already-created awaitable, capturing failure as Left."""
    try:
        return Either(await awaitable, _RIGHT)
    except Exception as e:
        return Either(on_error(e) if on_error else e, _LEFT)  # type: ignore[arg-type]


async def from_async(fn: Callable[[], Awaitable[R]], on_error: Callable[[Exception], L] | None = None) -> Either[L, R]:
    """Call fn and await it, capturing failure as Left (including a synchronous raise from fn)."""
    try:
        return Either(await fn(), _RIGHT)
    except Exception as e:
        return Either(on_error(e) if on_error else e, _LEFT)  # type: ignore[arg-type]

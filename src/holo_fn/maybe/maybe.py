"""Maybe: an optional value, Just(value) or Nothing.

Nothing carries no payload; ``extract()`` on it returns None.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from ..errors import UnwrapError

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
U = TypeVar("U")


class Maybe(Generic[T]):
    """Optional value with map/chain/filter.

    Examples:
        >>> from_nullable({"name": "Rich"}.get("name")).map(str.upper).unwrap_or("Visitor")
        'RICH'
        >>> from_nullable({}.get("name")).map(str.upper).unwrap_or("Visitor")
        'Visitor'
    """

    __slots__ = ("_value", "_is_just")
    __match_args__ = ("_value",)

    def __init__(self, value: T | None, is_just: bool) -> None:
        self._value = value
        self._is_just = is_just

    def is_just(self) -> bool:
        return self._is_just

    def is_nothing(self) -> bool:
        return not self._is_just

    is_failure = is_nothing

    def extract(self) -> T | None:
        return self._value

    def unwrap(self) -> T:
        """Extract Just value. Raises UnwrapError on Nothing."""
        if self._is_just:
            return self._value  # type: ignore[return-value]
        raise UnwrapError.wrong_variant("unwrap()", self)

    def unwrap_or(self, default: T) -> T:
        return self._value if self._is_just else default  # type: ignore[return-value]

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        return self._value if self._is_just else f()  # type: ignore[return-value]

    def map(self, f: Callable[[T], U]) -> Maybe[U]:
        return Maybe(f(self._value), True) if self._is_just else _NOTHING  # type: ignore[arg-type]

    def chain(self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        return f(self._value) if self._is_just else _NOTHING  # type: ignore[arg-type]

    flat_map = chain

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        """Keep a Just only if its value satisfies predicate."""
        return self if not self._is_just or predicate(self._value) else _NOTHING  # type: ignore[arg-type]

    def match(self, *, just: Callable[[T], U], nothing: Callable[[], U]) -> U:
        return just(self._value) if self._is_just else nothing()  # type: ignore[arg-type]

    def equals(self, other: Maybe[T]) -> bool:
        return self == other

    __bool__ = lambda self: self._is_just  # noqa: E731
    __hash__ = lambda self: hash((self._is_just, self._value))  # noqa: E731
    __repr__ = lambda self: f"Just({self._value!r})" if self._is_just else "Nothing"  # noqa: E731
    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        return self._is_just == other._is_just and self._value == other._value if isinstance(other, Maybe) else NotImplemented

    def __iter__(self) -> Iterator[T]:
        if self._is_just:
            yield self._value  # type: ignore[misc]


# Nothing is immutable and payload-free, so one instance serves every call
_NOTHING: Maybe = Maybe(None, False)


def Just(value: T) -> Maybe[T]:  # noqa: N802
    """Construct Just variant. None is a legal payload here; use from_nullable to map None to Nothing."""
    return Maybe(value, True)


def Nothing() -> Maybe[T]:  # noqa: N802
    """Construct Nothing variant."""
    return _NOTHING


just = Just
nothing = Nothing


def from_nullable(value: T | None) -> Maybe[T]:
    """None → Nothing, anything else (0, "", [] included) → Just."""
    return _NOTHING if value is None else Maybe(value, True)

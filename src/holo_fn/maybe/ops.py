"""Pipe-friendly Maybe combinators and list aggregators.

A Nothing has no payload to report, so ``all_`` and ``sequence`` agree on
the outcome (Nothing as soon as any input is Nothing). They still differ
in traversal: ``all_`` reads every element, ``sequence`` stops at the
first Nothing, which matters for lazily produced inputs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, TypeVar

from ..core import aggregate
from .maybe import Just, Maybe, Nothing

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..core import Partition

T = TypeVar("T")
U = TypeVar("U")


def map(fn: Callable[[T], U]) -> Callable[[Maybe[T]], Maybe[U]]:  # noqa: A001
    return lambda maybe: maybe.map(fn)


def chain(fn: Callable[[T], Maybe[U]]) -> Callable[[Maybe[T]], Maybe[U]]:
    return lambda maybe: maybe.chain(fn)


def filter(predicate: Callable[[T], bool]) -> Callable[[Maybe[T]], Maybe[T]]:  # noqa: A001
    return lambda maybe: maybe.filter(predicate)


def unwrap_or(default: T) -> Callable[[Maybe[T]], T]:
    return lambda maybe: maybe.unwrap_or(default)


def match(*, just: Callable[[T], U], nothing: Callable[[], U]) -> Callable[[Maybe[T]], U]:
    return lambda maybe: maybe.match(just=just, nothing=nothing)


def equals(other: Maybe[T]) -> Callable[[Maybe[T]], bool]:
    return lambda maybe: maybe.equals(other)


def all_(maybes: Iterable[Maybe[T]]) -> Maybe[list[T]]:
    """Just of every value, or Nothing if any input is Nothing."""
    return aggregate.all_with(maybes, success=Just, failure=lambda _: Nothing())


def sequence(maybes: Iterable[Maybe[T]]) -> Maybe[list[T]]:
    """Just of every value, or Nothing at the first Nothing."""
    return aggregate.sequence_with(maybes, success=Just, failure=lambda _: Nothing())


def partition(maybes: Iterable[Maybe[T]]) -> Partition[T, None]:
    """Just values in ``successes`` (alias ``justs``); one None per Nothing in ``failures``."""
    return aggregate.partition(maybes)

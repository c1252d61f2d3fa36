"""Pipe-friendly Result combinators and list aggregators.

Each combinator takes its configuration first and returns a one-argument
function of the Result, so it slots into ``pipe``:

    >>> from holo_fn import pipe
    >>> pipe(Ok(5), map(lambda x: x * 2), unwrap_or(0))
    10
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, TypeVar

from ..core import aggregate
from .result import Err, Ok, Result

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..core import Partition

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


def map(fn: Callable[[T], U]) -> Callable[[Result[T, E]], Result[U, E]]:  # noqa: A001
    return lambda result: result.map(fn)


def map_err(fn: Callable[[E], F]) -> Callable[[Result[T, E]], Result[T, F]]:
    return lambda result: result.map_err(fn)


def chain(fn: Callable[[T], Result[U, E]]) -> Callable[[Result[T, E]], Result[U, E]]:
    return lambda result: result.chain(fn)


def validate(predicate: Callable[[T], bool], error: E) -> Callable[[Result[T, E]], Result[T, E]]:
    return lambda result: result.validate(predicate, error)


def unwrap_or(default: T) -> Callable[[Result[T, E]], T]:
    return lambda result: result.unwrap_or(default)


def match(*, ok: Callable[[T], U], err: Callable[[E], U]) -> Callable[[Result[T, E]], U]:
    return lambda result: result.match(ok=ok, err=err)


def equals(other: Result[T, E]) -> Callable[[Result[T, E]], bool]:
    return lambda result: result.equals(other)


# ═══════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═══════════════════════════════════════════════════════════════════════════════


def all_(results: Iterable[Result[T, E]]) -> Result[list[T], list[E]]:
    """[Result[T,E]] → Result[[T], [E]]. Collects ALL errors (not fail-fast).

    Example:
        >>> all_([Ok(1), Err("e1"), Ok(3), Err("e2")])
        Err(['e1', 'e2'])
    """
    return aggregate.all_with(results, success=Ok, failure=Err)


def sequence(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """[Result[T,E]] → Result[[T], E]. Fail-fast on first Err."""
    return aggregate.sequence_with(results, success=Ok, failure=Err)


def partition(results: Iterable[Result[T, E]]) -> Partition[T, E]:
    """Split into Ok values and Err values: ``oks, errs = partition(results)``."""
    return aggregate.partition(results)

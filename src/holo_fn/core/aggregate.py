"""Aggregation of container lists: collect-all, fail-fast, and partition.

The functions here know nothing about Result, Either or Maybe. They read
each element through the ``Container`` protocol and build the output with
the success/failure constructors the caller passes in, so one
implementation serves every family:

    >>> from holo_fn.result import Ok, Err
    >>> all_with([Ok(1), Err("a"), Err("b")], success=Ok, failure=Err)
    Err(['a', 'b'])
    >>> sequence_with([Ok(1), Err("a"), Err("b")], success=Ok, failure=Err)
    Err('a')

Every call is a single forward pass and allocates fresh output lists;
inputs are only read.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .protocols import Container

V = TypeVar("V")
F = TypeVar("F")
R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class Partition(Generic[V, F]):
    """Successes and failures split out of one input list, each in input order.
    
    Unpacks as a pair: ``oks, errs = partition(results)``.
    """
    
    successes: list[V] = field(default_factory=list)
    failures: list[F] = field(default_factory=list)
    
    def __iter__(self) -> Iterator[list[V] | list[F]]:
        yield self.successes
        yield self.failures
    
    # Family-named views
    oks = property(lambda self: self.successes)
    errs = property(lambda self: self.failures)
    rights = property(lambda self: self.successes)
    lefts = property(lambda self: self.failures)
    justs = property(lambda self: self.successes)


def all_with(
    containers: Iterable[Container[V, F]],
    *,
    success: Callable[[list[V]], R],
    failure: Callable[[list[F]], R],
) -> R:
    """Collect every value, or every failure if there is at least one.
    
    No short-circuit: each element lands in one of the two accumulators.
    The failure payload is always a list, even for a single failure.
    Empty input yields ``success([])``.
    """
    values: list[V] = []
    errors: list[F] = []
    for c in containers:
        if c.is_failure():
            errors.append(c.extract())  # type: ignore[arg-type]
        else:
            values.append(c.extract())  # type: ignore[arg-type]
    return failure(errors) if errors else success(values)


def sequence_with(
    containers: Iterable[Container[V, F]],
    *,
    success: Callable[[list[V]], R],
    failure: Callable[[F], R],
) -> R:
    """Collect every value, or stop at the first failure and return it alone.
    
    Elements after the first failure are never touched.
    Empty input yields ``success([])``.
    """
    values: list[V] = []
    for c in containers:
        if c.is_failure():
            return failure(c.extract())  # type: ignore[arg-type]
        values.append(c.extract())  # type: ignore[arg-type]
    return success(values)


def partition(containers: Iterable[Container[V, F]]) -> Partition[V, F]:
    """Split into success payloads and failure payloads. Never fails, never stops early."""
    values: list[V] = []
    errors: list[F] = []
    for c in containers:
        (errors if c.is_failure() else values).append(c.extract())  # type: ignore[arg-type]
    return Partition(values, errors)


__all__ = ["Partition", "all_with", "partition", "sequence_with"]

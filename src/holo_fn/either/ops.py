"""Pipe-friendly Either combinators and list aggregators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, TypeVar

from ..core import aggregate
from .either import Either, Left, Right

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..core import Partition

L = TypeVar("L")
R = TypeVar("R")
U = TypeVar("U")
M = TypeVar("M")


def map(fn: Callable[[R], U]) -> Callable[[Either[L, R]], Either[L, U]]:  # noqa: A001
    return lambda either: either.map(fn)


def map_left(fn: Callable[[L], M]) -> Callable[[Either[L, R]], Either[M, R]]:
    return lambda either: either.map_left(fn)


def chain(fn: Callable[[R], Either[L, U]]) -> Callable[[Either[L, R]], Either[L, U]]:
    return lambda either: either.chain(fn)


def validate(predicate: Callable[[R], bool], left_value: L) -> Callable[[Either[L, R]], Either[L, R]]:
    return lambda either: either.validate(predicate, left_value)


def unwrap_or(default: R) -> Callable[[Either[L, R]], R]:
    return lambda either: either.unwrap_or(default)


def match(*, left: Callable[[L], U], right: Callable[[R], U]) -> Callable[[Either[L, R]], U]:
    return lambda either: either.match(left=left, right=right)


def equals(other: Either[L, R]) -> Callable[[Either[L, R]], bool]:
    return lambda either: either.equals(other)


# ═══════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═══════════════════════════════════════════════════════════════════════════════


def all_(eithers: Iterable[Either[L, R]]) -> Either[list[L], list[R]]:
    """Right of every value, or Left of every Left value in input order."""
    return aggregate.all_with(eithers, success=Right, failure=Left)


def sequence(eithers: Iterable[Either[L, R]]) -> Either[L, list[R]]:
    """Right of every value, or the first Left unchanged."""
    return aggregate.sequence_with(eithers, success=Right, failure=Left)


def partition(eithers: Iterable[Either[L, R]]) -> Partition[R, L]:
    """Rights in ``successes``, Lefts in ``failures``. Also exposed as ``.rights`` / ``.lefts``."""
    return aggregate.partition(eithers)

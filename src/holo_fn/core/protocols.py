"""Capability every container exposes so the aggregators can read it."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

V_co = TypeVar("V_co", covariant=True)
F_co = TypeVar("F_co", covariant=True)


@runtime_checkable
class Container(Protocol[V_co, F_co]):
    """Two-state value: success carrying ``V`` or failure carrying ``F``.
    
    Both methods are pure reads. ``extract`` returns whichever payload the
    container currently holds; callers check ``is_failure`` first to know
    which one that is.
    """
    
    def is_failure(self) -> bool: ...
    def extract(self) -> V_co | F_co: ...

"""Left-to-right function application."""

from __future__ import annotations

from typing import Any, Callable


def pipe(value: Any, *fns: Callable[[Any], Any]) -> Any:
    """Thread value through fns in order: ``pipe(x, f, g) == g(f(x))``.
    
    Example:
        >>> from holo_fn import result as R
        >>> pipe(R.Ok(2), R.map(lambda x: x + 1), R.unwrap_or(0))
        3
    """
    for fn in fns:
        value = fn(value)
    return value

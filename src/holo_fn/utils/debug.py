"""Side-effect helpers that pass values through a pipe unchanged.

``inspect`` logs through the stdlib ``logging`` module; the logger name,
level and text/json format come from ``holo_fn.config`` settings. The
library installs no handlers; at the default WARNING level records still
reach stderr through logging's last-resort handler.
"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

import orjson

from ..config import get_settings

T = TypeVar("T")


def tap(fn: Callable[[T], object]) -> Callable[[T], T]:
    """Call fn for its side effect and return the value untouched.
    
    Example:
        >>> seen = []
        >>> tap(seen.append)(42)
        42
    """
    def _tap(value: T) -> T:
        fn(value)
        return value
    return _tap


def inspect(label: str | None = None) -> Callable[[T], T]:
    """Log the value (optionally labeled) and return it untouched.
    
    Example:
        pipe(R.Ok(42), inspect("before"), R.map(lambda x: x * 2))  # logs "before: Ok(42)"
    """
    def _inspect(value: T) -> T:
        cfg = get_settings().inspect
        log = logging.getLogger(cfg.logger_name)
        if log.isEnabledFor(cfg.levelno):
            log.log(cfg.levelno, _render(label, value, cfg.format))
        return value
    return _inspect


def _render(label: str | None, value: object, fmt: str) -> str:
    if fmt == "json":
        return orjson.dumps({"label": label, "value": value}, default=repr, option=orjson.OPT_NON_STR_KEYS).decode()
    return f"{label}: {value!r}" if label else repr(value)

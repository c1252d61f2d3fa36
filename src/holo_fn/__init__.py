"""Maybe, Either and Result containers with pipe-friendly combinators.

Each family lives in its own subpackage with the same surface: the
container, its constructors, curried combinators for ``pipe``, and the
list aggregators ``all_`` (collect every failure), ``sequence`` (stop at
the first failure) and ``partition`` (split without failing).

Example:
    >>> from holo_fn import pipe, result as R
    >>> R.all_([R.Ok(1), R.Err("e1"), R.Err("e2")])
    Err(['e1', 'e2'])
    >>> R.sequence([R.Ok(1), R.Err("e1"), R.Err("e2")])
    Err('e1')
    >>> oks, errs = R.partition([R.Ok(1), R.Err("e1"), R.Ok(2)])
    >>> pipe(R.Ok(5), R.validate(lambda x: x > 0, "neg"), R.unwrap_or(0))
    5
"""

from . import either, maybe, result
from .core import Container, Partition
from .either import Either, Left, Right
from .errors import ErrorCode, HoloError, HoloException, UnwrapError
from .maybe import Just, Maybe, Nothing, from_nullable
from .result import Err, Ok, Result
from .utils import inspect, pipe, tap

__version__ = "1.0.0"

__all__ = [
    # Family namespaces
    "result", "either", "maybe",
    # Containers
    "Result", "Ok", "Err",
    "Either", "Left", "Right",
    "Maybe", "Just", "Nothing", "from_nullable",
    # Aggregation
    "Container", "Partition",
    # Helpers
    "pipe", "tap", "inspect",
    # Errors
    "ErrorCode", "HoloError", "HoloException", "UnwrapError",
]

"""Result/Ok/Err: success-or-error container.

Example:
    >>> from holo_fn import result as R
    >>> R.sequence([R.Ok(1), R.Ok(2)])
    Ok([1, 2])
"""

from .ops import all_, chain, equals, map, map_err, match, partition, sequence, unwrap_or, validate
from .result import Err, Ok, Result, err, from_async, from_awaitable, from_throwable, ok

__all__ = [
    # Core types
    "Result", "Ok", "Err", "ok", "err",
    # Adapters
    "from_throwable", "from_awaitable", "from_async",
    # Pipe combinators
    "map", "map_err", "chain", "validate", "unwrap_or", "match", "equals",
    # Collection ops
    "all_", "sequence", "partition",
]

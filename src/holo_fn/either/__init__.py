"""Either/Left/Right: disjoint union with Right as the success track."""

from .either import Either, Left, Right, from_async, from_awaitable, left, right, try_catch
from .ops import all_, chain, equals, map, map_left, match, partition, sequence, unwrap_or, validate

__all__ = [
    "Either", "Left", "Right", "left", "right",
    "try_catch", "from_awaitable", "from_async",
    "map", "map_left", "chain", "validate", "unwrap_or", "match", "equals",
    "all_", "sequence", "partition",
]

"""Maybe/Just/Nothing: optional values without None checks."""

from .maybe import Just, Maybe, Nothing, from_nullable, just, nothing
from .ops import all_, chain, equals, filter, map, match, partition, sequence, unwrap_or

__all__ = [
    "Maybe", "Just", "Nothing", "just", "nothing", "from_nullable",
    "map", "chain", "filter", "unwrap_or", "match", "equals",
    "all_", "sequence", "partition",
]

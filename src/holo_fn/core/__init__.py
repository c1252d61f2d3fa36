"""Family-agnostic container protocol and list aggregators."""

from .aggregate import Partition, all_with, partition, sequence_with
from .protocols import Container

__all__ = ["Container", "Partition", "all_with", "partition", "sequence_with"]

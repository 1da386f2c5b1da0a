"""
  Partition and binary search algorithms over generic sequences
"""
__version__ = "0.1.0"

from .algo import (
    IndexRange,
    binary_search,
    equal_range,
    identity,
    is_partitioned,
    lower_bound,
    partition,
    partition_bidirectional,
    partition_copy,
    partition_forward,
    partition_point,
    sorted_range,
    upper_bound,
)
from .sequence import Forward, Bidirectional, RandomAccess, SequenceView, as_view

from .compare import ComparisonCounter, by_key, by_subtraction, counting, reverse
from .convert import to_concrete_sequence, to_deferred_sequence
from .sequence import concat, filter_sequence, head, length, map_sequence
from .sort import Partitioned, partition_sort, partition_sort_writer

__all__ = (
    # Conversion
    "to_concrete_sequence",
    "to_deferred_sequence",
    # Sequence ops
    "concat",
    "filter_sequence",
    "head",
    "length",
    "map_sequence",
    # Comparators
    "ComparisonCounter",
    "by_key",
    "by_subtraction",
    "counting",
    "reverse",
    # Sort
    "Partitioned",
    "partition_sort",
    # DeferredWriter
    "partition_sort_writer",
)

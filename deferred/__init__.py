"""
Deferred evaluation combinators.

A value can be represented as a zero-argument computation instead of a
datum, and transformed without being forced.

Architecture:
- Deferred / defer / suspend: the primitive (forced by calling it)
- map_value, bind_value, apply_value: combinators
- to_deferred_sequence / to_concrete_sequence: two-level deferred sequences
- partition_sort: recursive quicksort over deferred sequences
- Writer (*_writer functions): the same operations with a trace log
"""

# Core types
from ._types import Comparator, Lazy, LazySeq, Predicate, Selector
from .lazy import Deferred, as_deferred, defer, suspend

# Internal helpers (for custom combinators)
from . import _helpers

# Lift helpers
from . import lift

# Writer monad
from . import writer
from .writer import DeferredWriter, Log, WriterResult, writer_of

# Combinators
from .transform import apply_value, bind_value, map_value, tap, tap_writer, zip_with

# Sequences, comparators, sorting
from .collection import (
    ComparisonCounter,
    Partitioned,
    by_key,
    by_subtraction,
    concat,
    counting,
    filter_sequence,
    head,
    length,
    map_sequence,
    partition_sort,
    partition_sort_writer,
    reverse,
    to_concrete_sequence,
    to_deferred_sequence,
)

# Errors
from ._errors import DeferredError, EmptySequenceError, ForcingError

__all__ = (
    # Types
    "Comparator",
    "Lazy",
    "LazySeq",
    "Predicate",
    "Selector",
    # Primitive
    "Deferred",
    "as_deferred",
    "defer",
    "suspend",
    # Internal helpers (for custom combinators)
    "_helpers",
    # Lift module
    "lift",
    # Writer module
    "writer",
    "DeferredWriter",
    "Log",
    "WriterResult",
    "writer_of",
    # Combinators
    "apply_value",
    "bind_value",
    "map_value",
    "tap",
    "tap_writer",
    "zip_with",
    # Sequences
    "concat",
    "filter_sequence",
    "head",
    "length",
    "map_sequence",
    "to_concrete_sequence",
    "to_deferred_sequence",
    # Comparators
    "ComparisonCounter",
    "by_key",
    "by_subtraction",
    "counting",
    "reverse",
    # Sort
    "Partitioned",
    "partition_sort",
    "partition_sort_writer",
    # Errors
    "DeferredError",
    "EmptySequenceError",
    "ForcingError",
)

"""
Core type definitions for deferred values.

Type aliases used across the library.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

# ============================================================================
# Type aliases
# ============================================================================

# Lazy = anything callable with no arguments; calling it forces the value
type Lazy[T] = Callable[[], T]

# LazySeq = two-level deferral: the container and each element
type LazySeq[T] = Lazy[Sequence[Lazy[T]]]

# Comparator = sign of the forced result orders the two handles
# (negative: a first, zero: same rank, positive: b first)
type Comparator[T] = Callable[[Lazy[T], Lazy[T]], Lazy[int | float]]

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Selector = function that extracts a key for comparison/sorting
type Selector[T, K] = Callable[[T], K]

__all__ = (
    "Lazy",
    "LazySeq",
    "Comparator",
    "Predicate",
    "Selector",
)

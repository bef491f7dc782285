"""
Partition sort
==============

Pivot-partition sort (quicksort) over deferred sequences, driven by an
explicit work stack instead of Python recursion.

- The pivot is always the first handle, no randomization: sorted input
  is the O(n²) worst case, n partition levels deep
- Element handles are never forced by the sort itself, only comparator
  results are (each one exactly once)
- Every step builds new sequences; inputs are left untouched
- Not stable
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .._types import Comparator, Lazy, LazySeq
from ..lazy import Deferred, as_deferred, defer
from ..writer import DeferredWriter, writer_of
from .compare import by_subtraction


@dataclass(frozen=True, slots=True)
class Partitioned:
    """Trace entry: one partition step at a partition depth."""

    depth: int
    size: int
    not_greater: int
    greater: int


# Called for every partition step
type OnPartition = Callable[[Partitioned], None]


def _partition[T](
    pool: Sequence[Lazy[T]],
    pivot: Lazy[T],
    comparator: Comparator[T],
) -> tuple[list[Lazy[T]], list[Lazy[T]]]:
    not_greater: list[Lazy[T]] = []
    greater: list[Lazy[T]] = []
    for handle in pool:
        # NaN fails both tests; it lands with "greater" so no element is lost
        if comparator(handle, pivot)() <= 0:
            not_greater.append(handle)
        else:
            greater.append(handle)
    return not_greater, greater


@dataclass(frozen=True, slots=True)
class _Pool:
    """Unsorted handles waiting on the work stack."""

    handles: Sequence[Lazy[object]]
    depth: int


def _sort[T](
    seq: LazySeq[T],
    comparator: Comparator[T],
    on_partition: OnPartition | None,
) -> LazySeq[T]:
    handles = seq()
    if not handles:
        return seq

    # Pools and placed pivots, popped so the output reads
    # not_greater ++ [pivot] ++ greater at every level
    stack: list[_Pool | Lazy[T]] = [_Pool(tuple(handles), 0)]
    ordered: list[Lazy[T]] = []
    while stack:
        item = stack.pop()
        if not isinstance(item, _Pool):
            ordered.append(item)
            continue
        if not item.handles:
            continue

        pivot, *rest = item.handles
        not_greater, greater = _partition(rest, pivot, comparator)
        if on_partition is not None:
            on_partition(Partitioned(item.depth, len(item.handles), len(not_greater), len(greater)))

        stack.append(_Pool(tuple(greater), item.depth + 1))
        stack.append(pivot)
        stack.append(_Pool(tuple(not_greater), item.depth + 1))
    return defer(tuple(ordered))


def partition_sort[T](
    seq: LazySeq[T],
    comparator: Comparator[T] = by_subtraction,
) -> Deferred[Sequence[Lazy[T]]]:
    """
    Sort seq non-decreasingly by comparator.

    Partitioning happens now: comparator failures raise from this call.
    An empty seq is returned as is (as Deferred) without calling the
    comparator.
    """
    return as_deferred(_sort(seq, comparator, None))


def partition_sort_writer[T](
    seq: LazySeq[T],
    comparator: Comparator[T] = by_subtraction,
) -> DeferredWriter[Deferred[Sequence[Lazy[T]]], Partitioned]:
    """partition_sort, logging one Partitioned entry per partition step."""
    trace: list[Partitioned] = []
    result = _sort(seq, comparator, trace.append)
    return writer_of(as_deferred(result), *trace)


__all__ = (
    "Partitioned",
    "partition_sort",
    "partition_sort_writer",
)

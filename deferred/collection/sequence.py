"""
Sequence combinators
====================

Operations over deferred sequences. None of them force anything at call
time; forcing the result forces the outer layer of the inputs, and
element handles only where the operation needs element values.
"""

from __future__ import annotations

from collections.abc import Callable

from .._errors import EmptySequenceError
from .._types import Lazy, LazySeq, Predicate
from ..lazy import Deferred
from ..transform import map_value


def map_sequence[T, U](
    seq: LazySeq[T],
    f: Callable[[T], U],
) -> Deferred[tuple[Deferred[U], ...]]:
    """Map every element handle. Elements stay unforced."""

    def producer() -> tuple[Deferred[U], ...]:
        return tuple(map_value(handle, f) for handle in seq())

    return Deferred(producer)


def filter_sequence[T](
    seq: LazySeq[T],
    predicate: Predicate[T],
) -> Deferred[tuple[Lazy[T], ...]]:
    """
    Keep handles whose value passes predicate.

    Every element is forced to test it; the kept handles are the
    original ones, not the forced values.
    """

    def producer() -> tuple[Lazy[T], ...]:
        return tuple(handle for handle in seq() if predicate(handle()))

    return Deferred(producer)


def concat[T](*seqs: LazySeq[T]) -> Deferred[tuple[Lazy[T], ...]]:
    """Handles of all seqs, in order. Only outer layers are forced."""

    def producer() -> tuple[Lazy[T], ...]:
        return tuple(handle for seq in seqs for handle in seq())

    return Deferred(producer)


def head[T](seq: LazySeq[T]) -> Deferred[T]:
    """First element. Forcing an empty sequence's head raises EmptySequenceError."""

    def producer() -> T:
        handles = seq()
        if not handles:
            raise EmptySequenceError()
        return handles[0]()

    return Deferred(producer)


def length[T](seq: LazySeq[T]) -> Deferred[int]:
    """Element count. Forces only the outer layer."""

    def producer() -> int:
        return len(seq())

    return Deferred(producer)


__all__ = (
    "map_sequence",
    "filter_sequence",
    "concat",
    "head",
    "length",
)

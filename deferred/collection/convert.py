"""Conversion between concrete and deferred sequences."""

from __future__ import annotations

from collections.abc import Iterable

from .._helpers import force_all
from .._types import LazySeq
from ..lazy import Deferred, defer


def to_deferred_sequence[T](items: Iterable[T]) -> Deferred[tuple[Deferred[T], ...]]:
    """
    Two-level deferral of a concrete sequence.

    Each element gets its own handle; the tuple of handles sits behind
    one more. Items are read now, so later changes to a mutable source
    are not seen.
    """
    return defer(tuple(defer(item) for item in items))


def to_concrete_sequence[T](seq: LazySeq[T]) -> list[T]:
    """Force the outer layer, then every element, in order."""
    return force_all(seq())


__all__ = ("to_deferred_sequence", "to_concrete_sequence")

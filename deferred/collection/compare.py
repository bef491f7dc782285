"""Comparators

Functions of two element handles returning a deferred sign:
negative when the first precedes, zero for equal rank, positive
when the first follows. A comparator decides itself when to force
its arguments; these all force them when their result is forced."""

from __future__ import annotations

import operator
from dataclasses import dataclass

from .._types import Comparator, Lazy, Selector
from ..lazy import Deferred
from ..transform import map_value, tap, zip_with


def by_subtraction(a: Lazy[float], b: Lazy[float]) -> Deferred[int | float]:
    """
    a() - b(). The default comparator for numbers and booleans.

    Non-numeric values raise TypeError on force; NaN yields a NaN sign.
    """
    return zip_with(a, b, operator.sub)


def by_key[T, K](selector: Selector[T, K]) -> Comparator[T]:
    """Order by selector(value) for any totally ordered key."""

    def comparator(a: Lazy[T], b: Lazy[T]) -> Deferred[int]:
        def compare(left: T, right: T) -> int:
            x, y = selector(left), selector(right)
            return (x > y) - (x < y)  # type: ignore[operator]

        return zip_with(a, b, compare)

    return comparator


def reverse[T](comparator: Comparator[T]) -> Comparator[T]:
    """Flip the sign of comparator."""

    def reversed_comparator(a: Lazy[T], b: Lazy[T]) -> Deferred[int | float]:
        return map_value(comparator(a, b), operator.neg)

    return reversed_comparator


@dataclass(slots=True)
class ComparisonCounter:
    """How often a counted comparator was called and how often its result was forced."""

    calls: int = 0
    forced: int = 0

    def reset(self) -> None:
        self.calls = 0
        self.forced = 0


def counting[T](comparator: Comparator[T]) -> tuple[Comparator[T], ComparisonCounter]:
    """Wrap comparator so calls and result forces are counted."""
    counter = ComparisonCounter()

    def on_force(_: int | float) -> None:
        counter.forced += 1

    def counted(a: Lazy[T], b: Lazy[T]) -> Deferred[int | float]:
        counter.calls += 1
        return tap(comparator(a, b), on_force)

    return counted, counter


__all__ = (
    "by_subtraction",
    "by_key",
    "reverse",
    "ComparisonCounter",
    "counting",
)

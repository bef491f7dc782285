"""Internal helpers for deferred values.

Common functions used across multiple combinator modules.
These are not part of the public API but can be used for writing custom combinators."""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from ._types import Lazy


# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def constant[T](value: T) -> Lazy[T]:
    """Producer that always yields an already evaluated value."""
    def producer() -> T:
        return value
    return producer


def force_all[T](handles: Iterable[Lazy[T]]) -> list[T]:
    """Force every handle in order."""
    return [handle() for handle in handles]


class Once[T]:
    """
    Memo cell behind Deferred.cache().

    Runs the producer on the first successful call and keeps the result.
    The producer reference is released once the value is realized.
    A producer that raises stays in place, so the next call retries it.
    """

    __slots__ = ("_producer", "_value", "_realized")

    def __init__(self, producer: Callable[[], T], /) -> None:
        self._producer: Callable[[], T] | None = producer
        self._value: T | None = None
        self._realized = False

    @property
    def is_realized(self) -> bool:
        return self._realized

    def __call__(self) -> T:
        if self._realized:
            return typing.cast(T, self._value)
        producer = typing.cast(Callable[[], T], self._producer)
        self._value = producer()
        self._realized = True
        self._producer = None
        return self._value

    def __repr__(self) -> str:
        if self._realized:
            return f"Once(realized={self._value!r})"
        return "Once(pending)"


def once[T](producer: Callable[[], T], /) -> Once[T]:
    """Wrap producer into a forced-once cell."""
    return Once(producer)


__all__ = (
    "identity",
    "constant",
    "force_all",
    "Once",
    "once",
)

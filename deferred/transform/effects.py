"""Side effects combinators

Effects execute for observation only (tracing, counting, debugging)
and don't change the forced value."""

from __future__ import annotations

from collections.abc import Callable

from .._types import Lazy
from ..lazy import Deferred
from ..writer import DeferredWriter, Log, WriterResult


def tap[T](d: Lazy[T], effect: Callable[[T], None]) -> Deferred[T]:
    """On every force: force d, pass the value to effect, yield it."""

    def producer() -> T:
        value = d()
        effect(value)
        return value

    return Deferred(producer)


def tap_writer[T, W](d: Lazy[T], entry: Callable[[T], W]) -> DeferredWriter[T, W]:
    """Force d and log entry(value) next to it."""

    def producer() -> WriterResult[T, Log[W]]:
        value = d()
        return WriterResult(value, Log.of(entry(value)))

    return DeferredWriter(producer)


def zip_with[A, B, U](a: Lazy[A], b: Lazy[B], f: Callable[[A, B], U]) -> Deferred[U]:
    """Deferred f(a(), b()). a is forced before b, both on every force."""

    def producer() -> U:
        left = a()
        right = b()
        return f(left, right)

    return Deferred(producer)


__all__ = ("tap", "tap_writer", "zip_with")

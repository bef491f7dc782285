"""Deferred value

A value represented as a zero-argument producer instead of a datum.

- Construction never runs the producer
- Calling the instance forces it
- Forcing is NOT memoized: every call re-runs the producer (see cache())

Functor/monad laws, with equality meaning "equal when forced":
- Identity: d.map(identity) ≡ d
- Composition: d.map(f).map(g) ≡ d.map(x => g(f(x)))
- Left identity: pure(a).then(f) ≡ f(a)
"""

from __future__ import annotations

from collections.abc import Callable

from ._helpers import constant, once
from ._types import Lazy


class Deferred[T]:
    """Zero-argument computation standing in for a value of type T."""

    __slots__ = ("_value",)

    def __init__(self, value: Callable[[], T], /) -> None:
        """Create Deferred from a producer. The producer is not called."""
        self._value = value

    @staticmethod
    def pure[V](value: V) -> Deferred[V]:
        """
        Capture an already evaluated value.

        Defers presentation, not computation: whatever produced `value`
        has already run.
        """
        return Deferred(constant(value))

    @staticmethod
    def suspend[V](producer: Callable[[], V]) -> Deferred[V]:
        """Postpone the computation itself until forced."""
        return Deferred(producer)

    # Functor operations

    def map[U](self, f: Callable[[T], U], /) -> Deferred[U]:
        """
        Apply f to the forced value.

        Nothing runs now. Failures of self or of f surface when the
        result is forced.
        """

        def producer() -> U:
            return f(self())

        return Deferred(producer)

    # Monad operations

    def then[U](self, f: Callable[[T], Lazy[U]], /) -> Deferred[U]:
        """
        Monadic bind (>>=).

        Forces self immediately, exactly once, and hands the value to f.
        The deferred value f returns is the result: forcing it later never
        forces self again.
        """
        return as_deferred(f(self()))

    def apply[U](self, f: Lazy[Callable[[T], U]], /) -> Deferred[U]:
        """
        Apply a deferred function.

        Both f and self are forced (in that order) only when the result is.
        """

        def producer() -> U:
            fn = f()
            return fn(self())

        return Deferred(producer)

    # Utility operations

    def cache(self) -> Deferred[T]:
        """Call-by-need: the producer runs at most once on success."""
        return Deferred(once(self._value))

    # Protocol methods

    def __call__(self) -> T:
        """Force the value."""
        return self._value()

    def __repr__(self) -> str:
        return f"Deferred({self._value!r})"


def as_deferred[T](value: Lazy[T]) -> Deferred[T]:
    """Adapt any zero-argument callable to Deferred without adding a layer."""
    if isinstance(value, Deferred):
        return value
    return Deferred(value)


def defer[T](value: T) -> Deferred[T]:
    """Wrap an evaluated value. Inert: no computation runs at call time."""
    return Deferred.pure(value)


def suspend[T](producer: Callable[[], T]) -> Deferred[T]:
    """Wrap a thunk. The thunk runs on every force."""
    return Deferred.suspend(producer)


__all__ = (
    "Deferred",
    "as_deferred",
    "defer",
    "suspend",
)

"""DeferredWriter Monad

Combined monad unifying:
- Deferred (zero-argument producer, forced on call)
- Writer[Log[W]] (trace accumulation)

Same forcing rules as Deferred: nothing runs until the writer is called,
and every call re-runs the producer unless cache() is used."""

from __future__ import annotations

from collections.abc import Callable

from .._helpers import once
from .._types import Lazy
from ..lazy import Deferred
from .log import Log
from .result import WriterResult


class DeferredWriter[T, W]:
    """Deferred Writer Monad.

    Combines: Deferred + Writer[Log[W]]

    Monadic laws (equality of forced WriterResult):
    - Left identity: pure(a).then(f) ≡ f(a)
    - Right identity: m.then(pure) ≡ m
    - Associativity: m.then(f).then(g) ≡ m.then(x => f(x).then(g))
    """

    __slots__ = ("_value",)

    def __init__(
        self,
        value: Callable[[], WriterResult[T, Log[W]]],
        /,
    ) -> None:
        """Create DeferredWriter from a producer of WriterResult."""
        self._value = value

    @staticmethod
    def pure[V, LogT](value: V, log_type: type[LogT]) -> DeferredWriter[V, LogT]:
        """Lift a value into the monad with empty log."""
        _ = log_type  # Used only for type inference

        def producer() -> WriterResult[V, Log[LogT]]:
            return WriterResult(value, Log[LogT]())

        return DeferredWriter(producer)

    @staticmethod
    def tell[LogEntry](*entries: LogEntry) -> DeferredWriter[None, LogEntry]:
        """Write entries to the log without producing a value."""

        def producer() -> WriterResult[None, Log[LogEntry]]:
            return WriterResult(None, Log.of(*entries))

        return DeferredWriter(producer)

    @staticmethod
    def from_deferred[V, LogT](d: Lazy[V], log_type: type[LogT]) -> DeferredWriter[V, LogT]:
        """Lift a plain deferred value with empty log. d is forced with the writer."""
        _ = log_type

        def producer() -> WriterResult[V, Log[LogT]]:
            return WriterResult(d(), Log[LogT]())

        return DeferredWriter(producer)

    # Functor operations

    def map[U](self, f: Callable[[T], U], /) -> DeferredWriter[U, W]:
        """Functor fmap - apply function to the value, preserve log."""

        def producer() -> WriterResult[U, Log[W]]:
            wr = self()
            return WriterResult(f(wr.value), wr.log)

        return DeferredWriter(producer)

    def map_log[V](self, f: Callable[[Log[W]], Log[V]], /) -> DeferredWriter[T, V]:
        """Transform the log."""

        def producer() -> WriterResult[T, Log[V]]:
            wr = self()
            return WriterResult(wr.value, f(wr.log))

        return DeferredWriter(producer)

    # Monad operations

    def then[U](self, f: Callable[[T], DeferredWriter[U, W]], /) -> DeferredWriter[U, W]:
        """
        Monadic bind (>>=). Logs of both steps are combined in order.

        Unlike Deferred.then, nothing is forced here: the log of self is
        only known once self runs, so binding waits for the force.
        """

        def producer() -> WriterResult[U, Log[W]]:
            wr = self()
            next_wr = f(wr.value)()
            return WriterResult(next_wr.value, wr.log.combine(next_wr.log))

        return DeferredWriter(producer)

    # Writer operations

    def with_log(self, *entries: W) -> DeferredWriter[T, W]:
        """Add entries to log without changing computation."""

        def producer() -> WriterResult[T, Log[W]]:
            wr = self()
            return WriterResult(wr.value, wr.log.combine(Log.of(*entries)))

        return DeferredWriter(producer)

    def listen(self) -> DeferredWriter[tuple[T, Log[W]], W]:
        """Get access to the log along with the value."""

        def producer() -> WriterResult[tuple[T, Log[W]], Log[W]]:
            wr = self()
            return WriterResult((wr.value, wr.log), wr.log)

        return DeferredWriter(producer)

    def censor(self, f: Callable[[Log[W]], Log[W]], /) -> DeferredWriter[T, W]:
        """Modify the log after computation."""

        def producer() -> WriterResult[T, Log[W]]:
            wr = self()
            return WriterResult(wr.value, f(wr.log))

        return DeferredWriter(producer)

    # Utility operations

    def cache(self) -> DeferredWriter[T, W]:
        """Cache the result - only compute once."""
        return DeferredWriter(once(self._value))

    def unwrap(self) -> T:
        """Force and return the value. Loses the log!"""
        return self().value

    def to_deferred(self) -> Deferred[tuple[T, Log[W]]]:
        """Convert to Deferred, including log in the value."""

        def producer() -> tuple[T, Log[W]]:
            wr = self()
            return wr.value, wr.log

        return Deferred(producer)

    # Protocol methods

    def __call__(self) -> WriterResult[T, Log[W]]:
        """Force the writer."""
        return self._value()

    def __repr__(self) -> str:
        return f"DeferredWriter({self._value!r})"


# Convenience Constructors
def writer_of[T, W](value: T, *log_entries: W) -> DeferredWriter[T, W]:
    """Create DeferredWriter with value and optional log entries."""

    def producer() -> WriterResult[T, Log[W]]:
        return WriterResult(value, Log.of(*log_entries))

    return DeferredWriter(producer)


__all__ = (
    "DeferredWriter",
    "writer_of",
)

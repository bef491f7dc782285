"""
Log - monoidal accumulator for the Writer
=========================================
"""

from __future__ import annotations


class Log[A](list[A]):
    """
    Trace accumulator for DeferredWriter.

    A list with monoid operations:
    - empty: Log()
    - combine: concatenation, never in place

    Laws:
    - Left identity: Log().combine(x) == x
    - Right identity: x.combine(Log()) == x
    - Associativity: (x.combine(y)).combine(z) == x.combine(y.combine(z))
    """

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        """Create log with items."""
        return Log(items)

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        Concatenate two logs into a new one.

        Example:
            Log.of("a", "b").combine(Log.of("c"))  # Log(["a", "b", "c"])
        """
        return Log([*self, *other])

    def tell(self, item: A, /) -> Log[A]:
        """New log with item appended."""
        return self.combine(Log.of(item))


__all__ = ("Log",)

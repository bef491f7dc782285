"""
Deferred function calls.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import partial, wraps

from ..lazy import Deferred


def call[T, **P](func: Callable[P, T], *args: P.args, **kwargs: P.kwargs) -> Deferred[T]:
    """
    Defer func(*args, **kwargs). The call is made on every force.

    Example:
        from deferred import lift as L

        total = L.call(sum, [1, 2, 3])
        total()  # 6
    """
    return Deferred(partial(func, *args, **kwargs))


def lifted[T, **P](func: Callable[P, T]) -> Callable[P, Deferred[T]]:
    """
    Decorator: calling func returns a Deferred call instead of running it.

    Example:
        from deferred import lift as L

        @L.lifted
        def load(path: str) -> bytes: ...

        data = load("a.bin")  # nothing read yet
    """

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Deferred[T]:
        return call(func, *args, **kwargs)

    return wrapper


__all__ = ("call", "lifted")

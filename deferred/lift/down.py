"""
Forcing deferred values.

The only place failures are turned into values: everything else in the
library lets them propagate from the force.
"""

from __future__ import annotations

from kungfu import Error, Ok, Result

from .._types import Lazy


def force[T](d: Lazy[T]) -> T:
    """
    Force d. Failures raise as they are.

    Example:
        from deferred import lift as L

        L.down.force(L.up.pure(5))  # 5
    """
    return d()


def to_result[T](d: Lazy[T]) -> Result[T, Exception]:
    """
    Force d, capturing any Exception as Error.

    Example:
        from deferred import lift as L

        L.down.to_result(L.up.suspend(lambda: 1 / 0))
        # Error(ZeroDivisionError(...))
    """
    try:
        return Ok(d())
    except Exception as exc:
        return Error(exc)


def or_else[T](d: Lazy[T], default: T) -> T:
    """Force d, falling back to default on any Exception."""
    match to_result(d):
        case Ok(value):
            return value
        case Error(_):
            return default


__all__ = (
    "force",
    "to_result",
    "or_else",
)

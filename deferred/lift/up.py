"""
Lifting values into Deferred.

Plain values, thunks and kungfu Results become deferred values.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, Ok, Result

from .._errors import ForcingError
from ..lazy import Deferred


def pure[T](value: T) -> Deferred[T]:
    """
    Lift an evaluated value.

    Example:
        from deferred import lift as L

        five = L.up.pure(5)
        L.down.force(five)  # 5

    NOTE: Nothing is postponed but access. For postponed computation,
          use suspend with a thunk.
    """
    return Deferred.pure(value)


def suspend[T](producer: Callable[[], T]) -> Deferred[T]:
    """
    Lift a thunk. It runs on every force.

    Example:
        from deferred import lift as L

        now = L.up.suspend(time.monotonic)
    """
    return Deferred.suspend(producer)


def from_result[T, E](result: Result[T, E]) -> Deferred[T]:
    """
    Lift an already computed kungfu Result.

    Forcing yields the Ok value or raises the Error payload. A payload
    that is not an exception is raised wrapped in ForcingError. Each force
    raises with a fresh traceback.
    """

    def producer() -> T:
        match result:
            case Ok(value):
                return value
            case Error(err):
                if isinstance(err, BaseException):
                    raise err.with_traceback(None)
                raise ForcingError(err)

    return Deferred(producer)


__all__ = (
    "pure",
    "suspend",
    "from_result",
)

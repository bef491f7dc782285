"""Map combinators

map, bind and apply over any zero-argument callable.

Forcing discipline:
- map_value / apply_value force nothing until their result is forced
- bind_value forces its source immediately, once per call, because the
  continuation needs the value to pick the next deferred value
"""

from __future__ import annotations

from collections.abc import Callable

from .._types import Lazy
from ..lazy import Deferred, as_deferred


def map_value[T, U](d: Lazy[T], f: Callable[[T], U]) -> Deferred[U]:
    """Deferred f(d()). A failing f surfaces on force, not here."""
    return as_deferred(d).map(f)


def bind_value[T, U](d: Lazy[T], f: Callable[[T], Lazy[U]]) -> Deferred[U]:
    """Force d now and return the deferred value f builds from it."""
    return as_deferred(d).then(f)


def apply_value[T, U](d: Lazy[T], f: Lazy[Callable[[T], U]]) -> Deferred[U]:
    """Deferred f()(d()). Neither input is forced at call time."""
    return as_deferred(d).apply(f)


__all__ = ("map_value", "bind_value", "apply_value")

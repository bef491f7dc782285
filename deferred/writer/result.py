"""
WriterResult - forced value with accumulated log
================================================
"""

from __future__ import annotations


class WriterResult[T, W]:
    """
    What forcing a DeferredWriter yields.

    Failures are not represented here: they propagate as exceptions
    from the force, like any other deferred value.
    """

    __slots__ = ("_value", "_log")
    __match_args__ = ("value", "log")

    def __init__(self, value: T, log: W) -> None:
        self._value = value
        self._log = log

    @property
    def value(self) -> T:
        return self._value

    @property
    def log(self) -> W:
        return self._log

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WriterResult):
            return NotImplemented
        return self._value == other._value and self._log == other._log

    def __repr__(self) -> str:
        return f"WriterResult({self._value!r}, log={self._log!r})"


__all__ = ("WriterResult",)

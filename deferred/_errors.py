from __future__ import annotations


class DeferredError(Exception):
    """Base class for failures raised by the library itself."""


class EmptySequenceError(DeferredError):
    """head() forced on a sequence with no elements."""

    def __init__(self) -> None:
        super().__init__("Sequence is empty")


class ForcingError(DeferredError):
    """Lifted Error payload that is not an exception."""

    payload: object

    def __init__(self, payload: object) -> None:
        self.payload = payload
        super().__init__(f"Forced an error value: {payload!r}")


__all__ = ("DeferredError", "EmptySequenceError", "ForcingError")

"""
Writer Monad
============

DeferredWriter - combined monad:
- Deferred (forced on call)
- Writer[Log[W]] (trace accumulation)

This is how the library traces what was forced and when.
"""

from .log import Log
from .result import WriterResult
from .monad import DeferredWriter, writer_of

__all__ = (
    "Log",
    "WriterResult",
    "DeferredWriter",
    "writer_of",
)

"""
Lift helpers with semantic namespaces.

    from deferred import lift as L

- L.up.*    - lifting values into Deferred
- L.down.*  - forcing Deferred into values
- L.call()  - deferred function calls

Examples:
    from deferred import lift as L

    five = L.up.pure(5)
    later = L.up.suspend(expensive)
    total = L.call(sum, [1, 2, 3])

    L.down.force(five)            # 5
    L.down.to_result(later)       # Ok(...) or Error(exc)
    L.down.or_else(later, 0)

    @L.lifted
    def load(path: str) -> bytes: ...
"""

from __future__ import annotations

from . import down, up

from .call import call, lifted
from .down import force, or_else, to_result
from .up import from_result, pure, suspend

__all__ = (
    # Namespaces (L.up.*, L.down.*)
    "up",
    "down",
    # Up
    "pure",
    "suspend",
    "from_result",
    # Call
    "call",
    "lifted",
    # Down
    "force",
    "to_result",
    "or_else",
)

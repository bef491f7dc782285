from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(slots=True)
class Probe:
    """Counts how many times a producer ran."""

    name: str
    runs: int = 0

    def wrap[T](self, producer: Callable[[], T]) -> Callable[[], T]:
        def counted() -> T:
            self.runs += 1
            return producer()
        return counted


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], None]) -> None:  # pragma: no cover (examples only)
    main()

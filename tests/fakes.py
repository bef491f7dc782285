from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass(slots=True)
class CountingProducer:
    """Zero-argument producer that records every run."""

    value: object
    runs: int = 0

    def __call__(self) -> object:
        self.runs += 1
        return self.value


@dataclass(slots=True)
class FailingProducer:
    """Producer that always raises the given exception."""

    error: Exception
    runs: int = 0

    def __call__(self) -> object:
        self.runs += 1
        raise self.error


@dataclass(slots=True)
class Recorder:
    """Collects side effects in order."""

    events: list[object] = field(default_factory=list)

    def record(self, name: str) -> Callable[[object], None]:
        def effect(value: object) -> None:
            self.events.append((name, value))
        return effect


class Boom(Exception):
    pass

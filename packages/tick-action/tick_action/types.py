"""Shared type aliases and protocols for timed actions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Protocol

StepFn = Callable[[float], None]
Callback = Callable[[], None]
ProgressCallback = Callable[[float], None]


@dataclass(frozen=True, slots=True)
class TickHandle:
    id: int


class TickSource(Protocol):
    """Anything that can call a step once per tick with the elapsed delta."""

    def register(self, step: StepFn) -> TickHandle: ...

    def cancel(self, handle: TickHandle) -> None: ...


class ActionState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    ENDED = "ended"

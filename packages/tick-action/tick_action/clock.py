"""Clock for the reference tick loop."""

from __future__ import annotations


class Clock:
    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0
        self._elapsed = 0.0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed(self) -> float:
        return self._elapsed

    def advance(self, dt: float | None = None) -> int:
        if dt is None:
            dt = self._dt
        elif dt < 0:
            raise ValueError("dt must be non-negative")
        self._tick_number += 1
        self._elapsed += dt
        return self._tick_number

    def reset(self, tick_number: int = 0, elapsed: float = 0.0) -> None:
        self._tick_number = tick_number
        self._elapsed = elapsed

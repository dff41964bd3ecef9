"""TickLoop - a minimal in-process tick source with pacing."""

from __future__ import annotations

import itertools
import logging
import time

from tick_action.clock import Clock
from tick_action.types import StepFn, TickHandle

logger = logging.getLogger(__name__)


class TickLoop:
    """Calls registered steps once per tick, in registration order.

    Steps registered while a tick is in progress first run on the next
    tick. Steps cancelled while a tick is in progress are skipped for the
    rest of that tick.
    """

    def __init__(self, tps: int = 60) -> None:
        self._clock = Clock(tps)
        self._steps: dict[int, StepFn] = {}
        self._ids = itertools.count(1)
        self._stop_requested: bool = False

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def active(self) -> int:
        return len(self._steps)

    def register(self, step: StepFn) -> TickHandle:
        handle = TickHandle(next(self._ids))
        self._steps[handle.id] = step
        logger.debug("registered step %d", handle.id)
        return handle

    def cancel(self, handle: TickHandle) -> None:
        if self._steps.pop(handle.id, None) is not None:
            logger.debug("cancelled step %d", handle.id)

    def is_registered(self, handle: TickHandle) -> bool:
        return handle.id in self._steps

    def stop(self) -> None:
        self._stop_requested = True

    def step(self, dt: float | None = None) -> None:
        self._clock.advance(dt)
        if dt is None:
            dt = self._clock.dt
        for step_id, fn in list(self._steps.items()):
            if step_id in self._steps:
                fn(dt)

    def run(self, n: int, dt: float | None = None) -> None:
        self._stop_requested = False
        for _ in range(n):
            self.step(dt)
            if self._stop_requested:
                break

    def run_until_idle(self, max_ticks: int, dt: float | None = None) -> int:
        """Tick until nothing is registered. Returns the number of ticks run."""
        self._stop_requested = False
        ticks = 0
        while self._steps and ticks < max_ticks:
            self.step(dt)
            ticks += 1
            if self._stop_requested:
                break
        return ticks

    def run_forever(self) -> None:
        self._stop_requested = False
        dt = self._clock.dt
        while not self._stop_requested:
            start = time.monotonic()
            self.step()
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

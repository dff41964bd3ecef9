"""TimedAction - a callback run every tick over a fixed duration."""

from __future__ import annotations

import logging

from tick_action.types import (
    ActionState,
    Callback,
    ProgressCallback,
    TickHandle,
    TickSource,
)


class TimedAction:
    """Reports normalized progress from 0.0 to 1.0 over ``duration`` seconds.

    The action registers its :meth:`advance` step with a tick source on
    :meth:`start` and :meth:`resume`, and cancels that registration on
    :meth:`pause`, :meth:`stop` and natural completion. Misuse (pausing
    twice, resuming a running action, starting without a tick source) is
    logged and ignored; nothing here raises on its own.

    Callbacks are plain attributes and may be reassigned at any time:

    - ``on_start()`` before the first registration of a run
    - ``over_time(progress)`` once with the starting value on the first tick
      after each start/resume, then once per tick with the new value
    - ``on_end()`` once when progress reaches 1.0
    - ``on_pause()``, ``on_resume()``, ``on_stop()`` on the matching call
    """

    def __init__(
        self,
        tick_source: TickSource | None = None,
        duration: float = 1.0,
        *,
        on_start: Callback | None = None,
        over_time: ProgressCallback | None = None,
        on_end: Callback | None = None,
        on_pause: Callback | None = None,
        on_resume: Callback | None = None,
        on_stop: Callback | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.duration = duration
        self.on_start = on_start
        self.over_time = over_time
        self.on_end = on_end
        self.on_pause = on_pause
        self.on_resume = on_resume
        self.on_stop = on_stop

        self._tick_source = tick_source
        self._handle: TickHandle | None = None
        self._primed: bool = False
        self._logger = logger or logging.getLogger(__name__)
        self._reset()

    @property
    def tick_source(self) -> TickSource | None:
        return self._tick_source

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def is_paused(self) -> bool:
        return self._is_paused

    @property
    def has_started(self) -> bool:
        return self._has_started

    @property
    def has_ended(self) -> bool:
        return self._has_ended

    @property
    def is_running(self) -> bool:
        return self._handle is not None

    @property
    def state(self) -> ActionState:
        if self._has_ended:
            return ActionState.ENDED
        if self._is_paused:
            return ActionState.PAUSED
        if self._handle is not None:
            return ActionState.RUNNING
        return ActionState.IDLE

    def bind(self, tick_source: TickSource | None) -> None:
        """Switch tick sources. A running action keeps running on the new one."""
        was_running = self._handle is not None
        self._cancel()
        self._tick_source = tick_source
        if was_running and self._has_source("bind"):
            self._register()

    def start(self) -> None:
        """Start or restart ticking from the current progress."""
        if not self._has_source("start"):
            return

        self._cancel()

        if self.on_start is not None:
            self.on_start()

        self._has_started = True
        self._has_ended = False
        self._is_paused = False
        self._primed = False
        self._register()

    def pause(self) -> None:
        if self._is_paused:
            self._logger.warning("TimedAction.pause() called on an already paused action")
            return
        if self._handle is None:
            self._logger.warning("TimedAction.pause() called on an action that is not running")
            return

        self._cancel()
        self._is_paused = True

        if self.on_pause is not None:
            self.on_pause()

    def resume(self) -> None:
        if not self._is_paused:
            self._logger.warning("TimedAction.resume() called on an action that is not paused")
            return
        if not self._has_source("resume"):
            return

        if self.on_resume is not None:
            self.on_resume()
            # on_resume may have stopped, restarted or unbound the action
            if not self._is_paused or self._handle is not None:
                return
            if not self._has_source("resume"):
                return

        self._is_paused = False
        self._primed = False
        self._register()

    def stop(self) -> None:
        """Cancel ticking and return to the initial state. Always safe."""
        self._cancel()

        if self.on_stop is not None:
            self.on_stop()
            # stop always ends idle, even if on_stop restarted the action
            self._cancel()

        self._reset()

    def advance(self, dt: float) -> None:
        """Tick step. Does nothing unless the action is running."""
        handle = self._handle
        if handle is None or self._has_ended:
            return

        if not self._primed:
            self._primed = True
            # duration <= 0 completes on the first tick
            if self.duration <= 0:
                self._progress = 1.0
            self._emit(self._progress)
            if self._handle is not handle:
                return
            if self._progress >= 1.0:
                self._finish()
                return

        if self.duration <= 0:
            progress = 1.0
        else:
            progress = self._progress + max(0.0, dt) / self.duration
        self._progress = min(max(progress, 0.0), 1.0)

        self._emit(self._progress)
        if self._handle is not handle:
            return
        if self._progress >= 1.0:
            self._finish()

    def _emit(self, progress: float) -> None:
        if self.over_time is not None:
            self.over_time(progress)

    def _finish(self) -> None:
        self._cancel()
        self._has_ended = True
        self._logger.debug("TimedAction ended after %.3fs", self.duration)

        if self.on_end is not None:
            self.on_end()

    def _has_source(self, operation: str) -> bool:
        if self._tick_source is None:
            self._logger.error("TimedAction.%s() called without a tick source", operation)
            return False
        return True

    def _register(self) -> None:
        if not self._has_source("register"):
            return
        self._handle = self._tick_source.register(self.advance)

    def _cancel(self) -> None:
        if self._handle is None:
            return
        handle = self._handle
        self._handle = None
        if self._tick_source is not None:
            self._tick_source.cancel(handle)

    def _reset(self) -> None:
        self._progress = 0.0
        self._is_paused = False
        self._has_started = False
        self._has_ended = False
        self._primed = False

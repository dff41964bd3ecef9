"""tick-action - Timed callbacks driven by a recurring tick loop."""

from tick_action.action import TimedAction
from tick_action.clock import Clock
from tick_action.loop import TickLoop
from tick_action.types import ActionState, TickHandle, TickSource

__all__ = [
    "TimedAction",
    "TickLoop",
    "Clock",
    "ActionState",
    "TickHandle",
    "TickSource",
]

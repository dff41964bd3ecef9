"""Fade -- a two second timed action driven by a tick loop.

Demonstrates:
- Binding a TimedAction to a TickLoop
- Reporting progress through over_time
- Reacting to completion through on_end
- Pausing and resuming mid-run

Run: python -m examples.fade
"""

import logging

from tick_action import TickLoop, TimedAction


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    print("=== Fade ===\n")

    # 10 ticks per second, so each tick advances 0.1s.
    loop = TickLoop(tps=10)

    action = TimedAction(
        loop,
        duration=2.0,
        over_time=lambda progress: print(f"  fade at {progress * 100:.0f}%"),
        on_pause=lambda: print("  -- paused --"),
        on_resume=lambda: print("  -- resumed --"),
        on_end=lambda: print("  fade has ended"),
    )
    action.start()

    loop.run(8)
    action.pause()

    # Paused actions are not ticked; progress holds.
    loop.run(5)
    action.resume()

    ticks = loop.run_until_idle(max_ticks=100)
    print(f"\nDone after {loop.clock.tick_number} ticks ({ticks} after resume).")

    # Misuse is logged, never raised.
    action.resume()


if __name__ == "__main__":
    main()

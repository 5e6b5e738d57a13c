"""Frame timer helpers.

``Timer`` is an immutable countdown measured in seconds. ``tick_timer``
returns a new timer; its ``finished`` flag is set only on the tick that
crossed a period boundary, which lets systems react once per period without
tracking edges themselves.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Timer:
    """Countdown timer.

    Attributes:
        duration: Period length in seconds (> 0).
        repeating: Restart after finishing if True; otherwise stay finished.
        elapsed: Seconds accumulated in the current period.
        finished: True only on the tick where the period completed.
        times_finished: Periods completed on the most recent tick (a large
            ``dt`` may complete several).
    """

    duration: float
    repeating: bool = True
    elapsed: float = 0.0
    finished: bool = False
    times_finished: int = 0


def tick_timer(timer: Timer, dt: float) -> Timer:
    """Advance ``timer`` by ``dt`` seconds."""
    if timer.duration <= 0:
        raise ValueError(f"Timer duration must be positive: {timer.duration}")
    if dt < 0:
        raise ValueError(f"Cannot tick timer backwards: {dt}")

    if not timer.repeating and timer.elapsed >= timer.duration:
        # One-shot timers report completion only once.
        return replace(timer, finished=False, times_finished=0)

    elapsed = timer.elapsed + dt
    if elapsed < timer.duration:
        return replace(timer, elapsed=elapsed, finished=False, times_finished=0)

    if not timer.repeating:
        return replace(
            timer, elapsed=timer.duration, finished=True, times_finished=1
        )

    times = int(elapsed // timer.duration)
    return replace(
        timer,
        elapsed=elapsed - times * timer.duration,
        finished=True,
        times_finished=times,
    )

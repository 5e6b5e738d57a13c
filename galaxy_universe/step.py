"""Frame reducer.

Wires the per-frame systems together in a fixed order. The exported
:func:`step` is pure: it returns a *new* :class:`galaxy_universe.state.State`.

Ordering:

1. ``time_system`` advances the scene clock.
2. ``greet_system`` ticks the greet timer and logs greetings.
3. ``oscillating_system`` recomputes transforms from the updated clock.
"""

from galaxy_universe.state import State
from galaxy_universe.systems.greet import greet_system
from galaxy_universe.systems.oscillating import oscillating_system
from galaxy_universe.systems.time import time_system


def step(state: State, dt: float) -> State:
    """Advance the scene by one frame of ``dt`` seconds.

    Args:
        state (State): Previous immutable scene state.
        dt (float): Frame duration in seconds.

    Returns:
        State: Next state snapshot.

    Raises:
        ValueError: If ``dt`` is negative.
    """
    state = time_system(state, dt)
    state = greet_system(state, dt)
    state = oscillating_system(state)
    return state

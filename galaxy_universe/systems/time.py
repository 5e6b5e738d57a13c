"""Scene clock system."""

from dataclasses import replace

from galaxy_universe.state import State


def time_system(state: State, dt: float) -> State:
    """Advance ``elapsed`` by ``dt`` seconds and bump the frame counter."""
    if dt < 0:
        raise ValueError(f"Frame delta must be non-negative: {dt}")
    return replace(state, elapsed=state.elapsed + dt, frame=state.frame + 1)

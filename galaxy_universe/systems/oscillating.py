"""Oscillation system.

Drives one coordinate of every ``Oscillating`` entity from the scene clock:
``base + (cos(frequency * elapsed) + 1) * amplitude``. The remaining
coordinates are left untouched, so an entity may still be placed freely on
the other axes.
"""

import math
from dataclasses import replace

from galaxy_universe.components import Oscillating, Position
from galaxy_universe.state import State
from galaxy_universe.types import UpAxis


def oscillated_coordinate(oscillating: Oscillating, elapsed: float) -> float:
    """Return the driven coordinate at time ``elapsed``."""
    swing = (math.cos(oscillating.frequency * elapsed) + 1.0) * oscillating.amplitude
    return oscillating.base + swing


def oscillating_system(state: State) -> State:
    """Update positions of all oscillating entities for the current clock."""
    state_position = state.position

    for entity_id, oscillating in state.oscillating.items():
        pos = state_position.get(entity_id)
        if pos is None:
            continue
        coordinate = oscillated_coordinate(oscillating, state.elapsed)
        if oscillating.axis == UpAxis.Y:
            next_pos = replace(pos, y=coordinate)
        else:
            next_pos = replace(pos, z=coordinate)
        state_position = state_position.set(entity_id, next_pos)

    return replace(state, position=state_position)

"""Greet system.

Ticks the scene's repeating greet timer and, every time it finishes, logs a
greeting for each named person in ascending entity-id order.
"""

import logging
from dataclasses import replace

from galaxy_universe.state import State
from galaxy_universe.utils.ecs import entities_with_components
from galaxy_universe.utils.timer import tick_timer

logger = logging.getLogger(__name__)


def greet_system(state: State, dt: float) -> State:
    """Advance the greet timer by ``dt`` and greet people if it finished."""
    greet_timer = tick_timer(state.greet_timer, dt)
    if greet_timer.finished:
        for person_id in entities_with_components(state, state.person, state.name):
            logger.info("hello %s!", state.name[person_id].value)
    return replace(state, greet_timer=greet_timer)

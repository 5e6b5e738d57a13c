"""Demo scene assembly.

Builds the prototype's starting scene: three named people greeted on a
timer, a cube that bobs up and down, and a spiral galaxy. Placement helpers
follow the same pattern: allocate ids, extend the relevant component maps,
return a new ``State``.
"""

import logging
import random
from dataclasses import replace
from typing import List, Optional, Tuple

from galaxy_universe.components import Name, Oscillating, Person, Position
from galaxy_universe.config import GalaxyConfig
from galaxy_universe.entity import Entity, new_entity_id
from galaxy_universe.state import State, create_empty_state
from galaxy_universe.systems.galaxy import spawn_galaxy
from galaxy_universe.types import EntityID, UpAxis

logger = logging.getLogger(__name__)

DEFAULT_PEOPLE: List[str] = ["Elaina Proctor", "Renzo Hume", "Zayna Nieves"]

DEFAULT_CUBE_POSITION: Tuple[float, float, float] = (0.0, 0.5, 0.0)


def place_people(state: State, names: List[str]) -> State:
    state_entity = state.entity
    state_person = state.person
    state_name = state.name
    for name in names:
        person_id: EntityID = new_entity_id()
        state_entity = state_entity.set(person_id, Entity())
        state_person = state_person.set(person_id, Person())
        state_name = state_name.set(person_id, Name(name))
    return replace(state, entity=state_entity, person=state_person, name=state_name)


def place_oscillator(
    state: State,
    position: Tuple[float, float, float],
    oscillating: Oscillating,
) -> Tuple[State, EntityID]:
    entity_id: EntityID = new_entity_id()
    return (
        replace(
            state,
            entity=state.entity.set(entity_id, Entity()),
            position=state.position.set(entity_id, Position(*position)),
            oscillating=state.oscillating.set(entity_id, oscillating),
        ),
        entity_id,
    )


def make_demo_state(
    galaxy: Optional[GalaxyConfig] = None,
    people: Optional[List[str]] = None,
    seed: Optional[int] = None,
) -> State:
    """Assemble the demo scene.

    Args:
        galaxy (GalaxyConfig | None): Galaxy to spawn; the reference galaxy
            when omitted.
        people (list[str] | None): Names to greet; :data:`DEFAULT_PEOPLE` when
            omitted.
        seed (int | None): Overrides ``galaxy.seed`` when given.

    Returns:
        State: Scene with people, a bobbing cube and the galaxy's stars.
    """
    if galaxy is None:
        galaxy = GalaxyConfig()
    if seed is not None:
        galaxy = replace(galaxy, seed=seed)
    if people is None:
        people = DEFAULT_PEOPLE

    state = create_empty_state(seed=galaxy.seed)
    state = place_people(state, people)
    state, cube_id = place_oscillator(
        state,
        DEFAULT_CUBE_POSITION,
        Oscillating(base=0.5, amplitude=0.5, frequency=2.0, axis=UpAxis.Y),
    )
    state = spawn_galaxy(state, galaxy, random.Random(galaxy.seed))
    logger.debug("Demo scene ready: %s (cube=%d)", dict(state.description), cube_id)
    return state

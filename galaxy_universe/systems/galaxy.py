"""Galaxy spawning system.

Bridges the pure galaxy generator and the ECS ``State``: every generated star
becomes an entity carrying ``Position`` and ``Star`` components. The entity
id is the sink's return value, i.e. the handle later systems use to update a
star's transform.
"""

import logging
import random
from dataclasses import replace
from typing import List, Optional

from galaxy_universe.components import Position, Star
from galaxy_universe.config import GalaxyConfig
from galaxy_universe.entity import Entity, new_entity_id
from galaxy_universe.galaxy import StarDescriptor, generate
from galaxy_universe.state import State
from galaxy_universe.types import EntityID

logger = logging.getLogger(__name__)


def spawn_galaxy(
    state: State, config: GalaxyConfig, rng: Optional[random.Random] = None
) -> State:
    """Spawn one star entity per generated star.

    Args:
        state (State): Scene to extend.
        config (GalaxyConfig): Galaxy parameters.
        rng (random.Random | None): Optional caller-owned random source;
            defaults to one seeded from ``config.seed``.

    Returns:
        State: New state containing the additional star entities.

    Raises:
        InvalidParameter: If ``config`` is invalid; ``state`` is not modified.
    """
    state_entity = state.entity.evolver()
    state_position = state.position.evolver()
    state_star = state.star.evolver()
    spawned: List[EntityID] = []

    def sink(descriptor: StarDescriptor) -> EntityID:
        star_id: EntityID = new_entity_id()
        state_entity.set(star_id, Entity())
        state_position.set(star_id, Position.from_vector(descriptor.position))
        state_star.set(
            star_id, Star(radius=descriptor.radius, color=descriptor.color)
        )
        spawned.append(star_id)
        return star_id

    generate(config, sink, rng)
    logger.debug(
        "Spawned %d stars on %d branches (seed=%d)",
        len(spawned),
        config.branch_count,
        config.seed,
    )
    return replace(
        state,
        entity=state_entity.persistent(),
        position=state_position.persistent(),
        star=state_star.persistent(),
    )

"""ECS convenience queries.

Helper functions for querying entity/component relationships without
introducing iteration logic into systems. All functions are pure and operate
on the immutable :class:`galaxy_universe.state.State` snapshot.
"""

from typing import List, Mapping

from galaxy_universe.state import State
from galaxy_universe.types import EntityID


def entities_with_components(
    state: State, *component_stores: Mapping[EntityID, object]
) -> List[EntityID]:
    """Return IDs possessing all provided component stores, ascending."""
    ids = set(state.entity.keys())
    for store in component_stores:
        ids &= set(store.keys())
    return sorted(ids)


def star_entities(state: State) -> List[EntityID]:
    """Return IDs of spawned stars (entities with both Star and Position)."""
    return entities_with_components(state, state.star, state.position)

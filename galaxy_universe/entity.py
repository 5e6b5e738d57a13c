"""Entity primitives & ID generation.

The engine models each *thing* as an ``EntityID`` (an integer) plus zero or
more component dataclasses stored in persistent maps on :class:`State`.

This module provides:
* ``Entity``: Thin marker dataclass registered in ``State.entity``.
* A process-local monotonic ID generator.

Examples
--------
>>> from galaxy_universe.entity import new_entity_id, new_entity_ids
>>> eid = new_entity_id()  # allocate a single ID
>>> eids = new_entity_ids(3)  # allocate batch

IDs are *not* recycled. Galaxy spawning allocates one ID per star, in
generation order, so star IDs ascend along branches and star indices.
"""

from dataclasses import dataclass
from typing import Iterator, List

from galaxy_universe.types import EntityID


@dataclass(frozen=True)
class Entity:
    pass


def entity_id_generator() -> Iterator[EntityID]:
    """Yield an infinite sequence of monotonically increasing entity IDs."""
    eid = 0
    while True:
        yield eid
        eid += 1


_entity_id_gen = entity_id_generator()


def new_entity_id() -> EntityID:
    """Return a newly allocated unique entity ID.

    Galaxy spawning calls this once per emitted star, so the returned ids
    double as star handles and preserve generation order.
    """
    return next(_entity_id_gen)


def new_entity_ids(n: int) -> List[EntityID]:
    """Return ``n`` fresh entity IDs as a list."""
    return [new_entity_id() for _ in range(n)]

"""Core immutable ECS `State` dataclass.

This module defines the frozen :class:`State` object that represents the
whole scene at a single frame. Systems are pure functions that take a
previous ``State`` plus inputs (e.g. the frame delta) and return a *new*
``State``; no mutation happens in-place.

Design notes:

* Component stores are **persistent maps** (``pyrsistent.PMap``) keyed by
    ``EntityID``. Absence of a key means the entity does not currently possess
    that component.
* Stars spawned from a galaxy carry ``Position`` + ``Star``. Their entity id
    is the handle returned to the galaxy generator's sink.
* The scene clock (``elapsed``, ``frame``) and the greet timer are plain
    fields; the random source used to build the scene is *not* stored, only
    its ``seed``.
"""

from dataclasses import dataclass
from typing import Any, Optional
from pyrsistent import PMap, pmap

from galaxy_universe.entity import Entity
from galaxy_universe.components.properties import (
    Name,
    Oscillating,
    Person,
    Position,
    Star,
)
from galaxy_universe.types import EntityID
from galaxy_universe.utils.timer import Timer

GREET_PERIOD = 2.0


@dataclass(frozen=True)
class State:
    """Immutable ECS scene state.

    Attributes:
        entity (PMap[EntityID, Entity]): Registry of live entities.
        name (PMap[EntityID, Name]): Display names.
        oscillating (PMap[EntityID, Oscillating]): Entities bobbed each frame.
        person (PMap[EntityID, Person]): Greetable people.
        position (PMap[EntityID, Position]): World-space positions.
        star (PMap[EntityID, Star]): Galaxy star descriptors.
        elapsed (float): Seconds since the scene started.
        frame (int): Frame counter (0-based).
        greet_timer (Timer): Repeating timer driving the greet system.
        seed (int | None): Seed the scene was built from.
    """

    # Entity
    entity: PMap[EntityID, Entity] = pmap()

    # Components
    name: PMap[EntityID, Name] = pmap()
    oscillating: PMap[EntityID, Oscillating] = pmap()
    person: PMap[EntityID, Person] = pmap()
    position: PMap[EntityID, Position] = pmap()
    star: PMap[EntityID, Star] = pmap()

    # Clock
    elapsed: float = 0.0
    frame: int = 0
    greet_timer: Timer = Timer(duration=GREET_PERIOD)

    # RNG
    seed: Optional[int] = None

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of non-empty fields.

        Component maps are summarized by their size; scalars are included
        when truthy. Useful for logging a scene without dumping thousands of
        star entries.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if isinstance(value, type(pmap())):
                if len(value) == 0:
                    continue
                value = len(value)
            elif not value:
                continue
            description = description.set(field, value)
        return description


def create_empty_state(
    seed: Optional[int] = None, greet_period: float = GREET_PERIOD
) -> State:
    """Return a scene with no entities and a fresh clock."""
    if greet_period <= 0:
        raise ValueError(f"Greet period must be positive: {greet_period}")
    return State(greet_timer=Timer(duration=greet_period), seed=seed)

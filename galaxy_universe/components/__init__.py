"""galaxy_universe.components
=================================

Aggregate import surface for all ECS component dataclasses used by the engine.

All component classes are frozen ``@dataclass`` value objects; they carry no
behavior beyond their fields and are manipulated by systems during the frame
pipeline, e.g.::

    from galaxy_universe.components import Position, Star

See the ``systems`` package documentation for transformation logic.
"""

from .properties import Color, RED, GREEN, BLUE, STAR_PALETTE
from .properties import Name
from .properties import Oscillating
from .properties import Person
from .properties import Position
from .properties import Star

__all__ = [
    "Color",
    "RED",
    "GREEN",
    "BLUE",
    "STAR_PALETTE",
    "Name",
    "Oscillating",
    "Person",
    "Position",
    "Star",
]

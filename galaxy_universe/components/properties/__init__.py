"""Property component aggregates.

This module re-exports the *property* components: immutable attributes that
describe an entity (:class:`Position`, :class:`Star`, :class:`Name`, ...).
Systems read these dataclasses to drive greetings, per-frame transform
updates and galaxy bookkeeping. Changing an entity means storing a new
instance in the relevant ``State`` map.
"""

from .color import Color, RED, GREEN, BLUE, STAR_PALETTE
from .name import Name
from .oscillating import Oscillating
from .person import Person
from .position import Position
from .star import Star

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

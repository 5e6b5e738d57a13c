"""Position component.

World-space translation of an entity in three dimensions. Stored in
``State.position`` keyed by entity id; per-frame systems (e.g. oscillation)
replace it wholesale rather than mutating it.
"""

from dataclasses import dataclass

from galaxy_universe.types import Vec3


@dataclass(frozen=True)
class Position:
    """World coordinate.

    Attributes:
        x: Horizontal axis.
        y: Vertical axis (up in Y-up scenes).
        z: Depth axis (up in Z-up scenes).
    """

    x: float
    y: float
    z: float

    @classmethod
    def from_vector(cls, vec: Vec3) -> "Position":
        return cls(*vec)

    def as_vector(self) -> Vec3:
        return (self.x, self.y, self.z)

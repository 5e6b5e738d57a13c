"""Star component.

Attached to every entity spawned from a generated galaxy. The star's location
lives in the sibling :class:`Position` store; ``Star`` carries the remaining
descriptor data needed by a (future) renderer.
"""

from dataclasses import dataclass

from galaxy_universe.components.properties.color import Color


@dataclass(frozen=True)
class Star:
    """Point-star descriptor.

    Attributes:
        radius: Visual radius of the star.
        color: Branch color taken from the star palette.
    """

    radius: float
    color: Color

"""Common type aliases and enumerations.

``StarSink`` is the extension point through which generated stars leave the
galaxy generator; ``UpAxis`` selects which world axis is orthogonal to the
galactic plane.
"""

from enum import StrEnum, auto
from typing import Any, Callable, Tuple, TYPE_CHECKING


# Forward declaration for StarSink typing to avoid circular imports:
if TYPE_CHECKING:
    from galaxy_universe.galaxy import StarDescriptor

EntityID = int

Vec3 = Tuple[float, float, float]

# The sink may return an opaque handle (e.g. an entity id); the generator ignores it.
StarSink = Callable[["StarDescriptor"], Any]


class UpAxis(StrEnum):
    """World axis orthogonal to the galactic plane (carries depth jitter)."""

    Y = auto()
    Z = auto()

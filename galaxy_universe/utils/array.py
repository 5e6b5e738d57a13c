"""NumPy export of star data.

Converts star descriptors (or star entities in a ``State``) into dense
``float32`` arrays, the layout a GPU instancing buffer or an analysis script
expects. Rows follow the input order.
"""

from typing import Iterable

import numpy as np

from galaxy_universe.galaxy import StarDescriptor
from galaxy_universe.state import State
from galaxy_universe.utils.ecs import star_entities


def positions_array(stars: Iterable[StarDescriptor]) -> np.ndarray:
    """Return an ``(n, 3)`` float32 array of star positions."""
    data = [star.position for star in stars]
    if not data:
        return np.zeros((0, 3), dtype=np.float32)
    return np.asarray(data, dtype=np.float32)


def colors_array(stars: Iterable[StarDescriptor]) -> np.ndarray:
    """Return an ``(n, 3)`` float32 array of RGB star colors."""
    data = [(star.color.r, star.color.g, star.color.b) for star in stars]
    if not data:
        return np.zeros((0, 3), dtype=np.float32)
    return np.asarray(data, dtype=np.float32)


def state_positions_array(state: State) -> np.ndarray:
    """Return star entity positions in ascending entity-id order."""
    rows = [state.position[eid].as_vector() for eid in star_entities(state)]
    if not rows:
        return np.zeros((0, 3), dtype=np.float32)
    return np.asarray(rows, dtype=np.float32)

"""Oscillation component.

``Oscillating`` entities have one coordinate driven by the scene clock each
frame: ``base + (cos(frequency * elapsed) + 1) * amplitude``. The coordinate
therefore sweeps between ``base`` and ``base + 2 * amplitude``.
"""

from dataclasses import dataclass

from galaxy_universe.types import UpAxis


@dataclass(frozen=True)
class Oscillating:
    """Periodic bobbing definition.

    Attributes:
        base: Lowest coordinate reached on ``axis``.
        amplitude: Half of the peak-to-peak travel.
        frequency: Angular frequency in radians per second.
        axis: Axis whose coordinate is driven.
    """

    base: float = 0.5
    amplitude: float = 0.5
    frequency: float = 2.0
    axis: UpAxis = UpAxis.Y

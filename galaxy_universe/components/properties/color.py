"""Color component value and the star palette."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Color:
    """Linear RGB color with channels in ``[0, 1]``."""

    r: float
    g: float
    b: float


RED = Color(1.0, 0.0, 0.0)
GREEN = Color(0.0, 1.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)

# Branch ``b`` uses ``STAR_PALETTE[b % len(STAR_PALETTE)]``.
STAR_PALETTE: Tuple[Color, ...] = (RED, GREEN, BLUE)

"""Galaxy generation configuration.

:class:`GalaxyConfig` is a frozen value object consumed once per generation
call. Defaults reproduce the reference scenario (three arms, 2000 stars) so
``GalaxyConfig()`` is a ready-to-use golden configuration; use
``dataclasses.replace`` to derive variants.

Validation is explicit (:func:`validate_config`) and runs before any random
draw, so a malformed configuration never produces a partial galaxy.
"""

import math
from dataclasses import dataclass

from galaxy_universe.types import UpAxis

# Seeds are unsigned 64-bit values.
MAX_SEED = 2**64 - 1


class InvalidParameter(ValueError):
    """Raised when a :class:`GalaxyConfig` field is outside its valid range."""


@dataclass(frozen=True)
class GalaxyConfig:
    """Parameters of a procedurally generated spiral galaxy.

    Attributes:
        seed: Unsigned 64-bit RNG seed; identical seed and fields give identical output.
        branch_count: Number of spiral arms (at least 1).
        elem_count: Total number of stars across all arms. Remainder stars of
            ``elem_count // branch_count`` are dropped.
        init_radius: Distance of each arm's innermost star from the origin.
        expansion_rate: Radial growth per revolution travelled along an arm.
        revolution_count: Rotations swept by an arm over its star sequence (> 0).
        depth_std_dev: Standard deviation of jitter along ``up_axis`` (> 0).
        lat_offset_std_dev: Standard deviation of radial jitter (> 0).
        star_radius: Radius attached to every emitted star.
        up_axis: Axis orthogonal to the galactic plane.
    """

    seed: int = 12345678
    branch_count: int = 3
    elem_count: int = 2000
    init_radius: float = 0.05
    expansion_rate: float = 1.0
    revolution_count: float = 2.5
    depth_std_dev: float = 0.15
    lat_offset_std_dev: float = 0.05
    star_radius: float = 0.01
    up_axis: UpAxis = UpAxis.Z


def _check_std_dev(name: str, value: float) -> None:
    if not math.isfinite(value) or value <= 0:
        raise InvalidParameter(f"{name} must be a positive finite number, got {value}")


def validate_config(config: GalaxyConfig) -> None:
    """Raise :class:`InvalidParameter` if ``config`` cannot drive generation.

    Degenerate but valid configurations (e.g. ``elem_count < branch_count``)
    pass; they simply produce an empty galaxy.
    """
    if config.branch_count < 1:
        raise InvalidParameter(
            f"branch_count must be at least 1, got {config.branch_count}"
        )
    if config.elem_count < 0:
        raise InvalidParameter(
            f"elem_count must be non-negative, got {config.elem_count}"
        )
    if not 0 <= config.seed <= MAX_SEED:
        raise InvalidParameter(
            f"seed must be in [0, {MAX_SEED}], got {config.seed}"
        )
    if not math.isfinite(config.revolution_count) or config.revolution_count <= 0:
        raise InvalidParameter(
            f"revolution_count must be positive, got {config.revolution_count}"
        )
    _check_std_dev("depth_std_dev", config.depth_std_dev)
    _check_std_dev("lat_offset_std_dev", config.lat_offset_std_dev)

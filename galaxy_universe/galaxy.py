"""Procedural spiral galaxy generation.

Stars are laid out along ``branch_count`` spiral arms spaced evenly around
the origin. Along an arm the angle advances one full turn every
``systems_per_revolution`` stars while the distance from the origin grows
linearly with the number of revolutions travelled. Each star is then jittered
radially (lateral offset) and along the up axis (depth) with normally
distributed noise.

Output order and RNG draw order are fixed: branches ascending, stars within a
branch ascending, and for every star the depth sample is drawn before the
lateral sample. Together with :class:`random.Random` (MT19937) and
:meth:`random.Random.normalvariate` this makes a given :class:`GalaxyConfig`
reproduce the exact same star list on every run.

Examples
--------
>>> from galaxy_universe.config import GalaxyConfig
>>> from galaxy_universe.galaxy import generate_stars
>>> stars = generate_stars(GalaxyConfig(branch_count=3, elem_count=10))
>>> len(stars)  # 10 // 3 stars per arm, remainder dropped
9
"""

import math
import random
from dataclasses import dataclass
from typing import Iterator, List, Optional

from galaxy_universe.components import Color, STAR_PALETTE
from galaxy_universe.config import GalaxyConfig, validate_config
from galaxy_universe.types import StarSink, Vec3
from galaxy_universe.utils.math import (
    embed_planar,
    frac,
    vector_add,
    vector_normalize,
    vector_scale,
)

TAU = 2.0 * math.pi


@dataclass(frozen=True)
class StarDescriptor:
    """One generated star.

    Attributes:
        position: World-space position.
        radius: Visual radius.
        color: Branch color from :data:`STAR_PALETTE`.
    """

    position: Vec3
    radius: float
    color: Color


def systems_per_branch(config: GalaxyConfig) -> int:
    """Stars per arm; the remainder of ``elem_count / branch_count`` is dropped."""
    return config.elem_count // config.branch_count


def systems_per_revolution(config: GalaxyConfig) -> int:
    """Stars making up one full turn of an arm.

    ``revolution_count`` is truncated to an integer divisor. Both the divisor
    and the result are clamped to at least 1 so short arms (fewer stars than
    revolutions) still advance instead of dividing by zero.
    """
    revolutions = max(1, int(config.revolution_count))
    return max(1, systems_per_branch(config) // revolutions)


def branch_angle(config: GalaxyConfig, branch: int) -> float:
    """Initial angle of ``branch``; arms are evenly spaced around the origin."""
    return branch * (TAU / config.branch_count)


def branch_color(branch: int) -> Color:
    return STAR_PALETTE[branch % len(STAR_PALETTE)]


def revolution_angle(init_angle: float, revolution_ratio: float) -> float:
    """Angle reached after ``revolution_ratio`` turns, wrapped every revolution."""
    return init_angle + frac(revolution_ratio) * TAU


def center_distance(config: GalaxyConfig, revolution_ratio: float) -> float:
    """Distance from the origin; independent of the arm's initial angle."""
    return config.init_radius + config.expansion_rate * revolution_ratio


def ideal_position(config: GalaxyConfig, angle: float, distance: float) -> Vec3:
    """Noise-free point on the galactic plane at ``angle`` and ``distance``."""
    direction = embed_planar(math.cos(angle), math.sin(angle), 0.0, config.up_axis)
    return vector_scale(direction, distance)


def _star_stream(
    config: GalaxyConfig, rng: random.Random
) -> Iterator[StarDescriptor]:
    per_branch = systems_per_branch(config)
    per_revolution = systems_per_revolution(config)
    up = embed_planar(0.0, 0.0, 1.0, config.up_axis)

    for branch in range(config.branch_count):
        init_angle = branch_angle(config, branch)
        color = branch_color(branch)
        for i in range(per_branch):
            revolution_ratio = i / per_revolution
            angle = revolution_angle(init_angle, revolution_ratio)
            perfect_pos = ideal_position(
                config, angle, center_distance(config, revolution_ratio)
            )

            # Draw order (depth, then lateral) is part of the reproducibility contract.
            depth = rng.normalvariate(0.0, config.depth_std_dev)
            lateral_dist = rng.normalvariate(0.0, config.lat_offset_std_dev)

            offset = vector_add(
                vector_scale(vector_normalize(perfect_pos), lateral_dist),
                vector_scale(up, depth),
            )
            yield StarDescriptor(
                position=vector_add(perfect_pos, offset),
                radius=config.star_radius,
                color=color,
            )


def iter_stars(
    config: GalaxyConfig, rng: Optional[random.Random] = None
) -> Iterator[StarDescriptor]:
    """Return a lazy iterator over the stars of ``config``.

    Validation happens immediately, before the iterator is returned, so an
    invalid configuration raises without consuming any randomness. Stars are
    produced one at a time; stopping iteration early simply leaves the
    remaining RNG draws unused.

    Args:
        config (GalaxyConfig): Galaxy parameters.
        rng (random.Random | None): Caller-owned random source. When omitted a
            fresh ``random.Random(config.seed)`` is created for this call. A
            shared instance must not be used by concurrent generations.

    Returns:
        Iterator[StarDescriptor]: Stars ordered by branch, then by index.

    Raises:
        InvalidParameter: If ``config`` fails :func:`validate_config`.
    """
    validate_config(config)
    if rng is None:
        rng = random.Random(config.seed)
    return _star_stream(config, rng)


def generate_stars(
    config: GalaxyConfig, rng: Optional[random.Random] = None
) -> List[StarDescriptor]:
    """Return the full ordered star list of ``config``."""
    return list(iter_stars(config, rng))


def generate(
    config: GalaxyConfig, sink: StarSink, rng: Optional[random.Random] = None
) -> None:
    """Generate the galaxy described by ``config`` and emit every star to ``sink``.

    ``sink`` is called once per star in generation order. Whatever it returns
    (typically a handle to the created scene object) is ignored here.

    Raises:
        InvalidParameter: Before any emission if ``config`` is invalid.
    """
    for star in iter_stars(config, rng):
        sink(star)

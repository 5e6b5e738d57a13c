"""Vector and scalar math utilities used by galaxy generation."""

import math
from typing import Tuple

from galaxy_universe.types import UpAxis, Vec3

ZERO: Vec3 = (0.0, 0.0, 0.0)


def frac(x: float) -> float:
    """Return the fractional part ``x - floor(x)`` (always in ``[0, 1)``)."""
    return x - math.floor(x)


def vector_add(vec1: Vec3, vec2: Vec3) -> Vec3:
    """Return ``vec1 + vec2`` element-wise."""
    return (vec1[0] + vec2[0], vec1[1] + vec2[1], vec1[2] + vec2[2])


def vector_scale(vec: Vec3, factor: float) -> Vec3:
    """Return ``vec * factor``."""
    return (vec[0] * factor, vec[1] * factor, vec[2] * factor)


def vector_length(vec: Vec3) -> float:
    return math.sqrt(vec[0] * vec[0] + vec[1] * vec[1] + vec[2] * vec[2])


def vector_normalize(vec: Vec3) -> Vec3:
    """Return the unit vector along ``vec``.

    The zero vector has no direction; it normalizes to itself instead of
    producing NaN components.
    """
    length = vector_length(vec)
    if length == 0.0:
        return ZERO
    return (vec[0] / length, vec[1] / length, vec[2] / length)


def embed_planar(a: float, b: float, up: float, axis: UpAxis) -> Vec3:
    """Place planar coordinates ``(a, b)`` and ``up`` on world axes.

    For ``UpAxis.Z`` the plane is XY and the result is ``(a, b, up)``; for
    ``UpAxis.Y`` the plane is XZ and the result is ``(a, up, b)``.
    """
    if axis == UpAxis.Y:
        return (a, up, b)
    return (a, b, up)


def planar_components(vec: Vec3, axis: UpAxis) -> Tuple[float, float]:
    """Inverse of :func:`embed_planar` for the in-plane part of ``vec``."""
    if axis == UpAxis.Y:
        return (vec[0], vec[2])
    return (vec[0], vec[1])

import math

import pytest

from galaxy_universe.types import UpAxis
from galaxy_universe.utils.math import (
    ZERO,
    embed_planar,
    frac,
    planar_components,
    vector_add,
    vector_length,
    vector_normalize,
    vector_scale,
)


@pytest.mark.parametrize(
    "x, expected",
    [(0.0, 0.0), (1.25, 0.25), (2.0, 0.0), (-0.25, 0.75)],
)
def test_frac(x: float, expected: float) -> None:
    assert frac(x) == pytest.approx(expected)


def test_vector_arithmetic() -> None:
    assert vector_add((1.0, 2.0, 3.0), (0.5, -2.0, 1.0)) == (1.5, 0.0, 4.0)
    assert vector_scale((1.0, -2.0, 0.5), 2.0) == (2.0, -4.0, 1.0)
    assert vector_length((3.0, 4.0, 0.0)) == 5.0


def test_normalize_unit_length() -> None:
    n = vector_normalize((0.0, 3.0, 4.0))
    assert n == pytest.approx((0.0, 0.6, 0.8))
    assert vector_length(n) == pytest.approx(1.0)


def test_normalize_zero_vector_falls_back_to_zero() -> None:
    n = vector_normalize((0.0, 0.0, 0.0))
    assert n == ZERO
    assert not any(math.isnan(c) for c in n)


@pytest.mark.parametrize(
    "axis, expected",
    [(UpAxis.Z, (1.0, 2.0, 3.0)), (UpAxis.Y, (1.0, 3.0, 2.0))],
)
def test_embed_planar(axis: UpAxis, expected: tuple) -> None:
    vec = embed_planar(1.0, 2.0, 3.0, axis)
    assert vec == expected
    assert planar_components(vec, axis) == (1.0, 2.0)

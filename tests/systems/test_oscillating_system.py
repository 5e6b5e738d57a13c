import math
from dataclasses import replace

import pytest
from pyrsistent import pmap

from galaxy_universe.components import Oscillating, Position
from galaxy_universe.step import step
from galaxy_universe.systems.oscillating import oscillated_coordinate, oscillating_system
from galaxy_universe.types import UpAxis
from tests.test_utils import make_oscillator_state

BOB = Oscillating(base=0.5, amplitude=0.5, frequency=2.0, axis=UpAxis.Y)


@pytest.mark.parametrize(
    "elapsed, expected",
    [
        (0.0, 1.5),
        (math.pi / 4, 1.0),
        (math.pi / 2, 0.5),
        (math.pi, 1.5),
    ],
)
def test_oscillated_coordinate_follows_cosine(elapsed: float, expected: float) -> None:
    assert oscillated_coordinate(BOB, elapsed) == pytest.approx(expected)


def test_system_only_moves_driven_axis() -> None:
    state, eid = make_oscillator_state((2.0, 0.5, -3.0), BOB, elapsed=math.pi / 2)
    pos = oscillating_system(state).position[eid]
    assert (pos.x, pos.z) == (2.0, -3.0)
    assert pos.y == pytest.approx(0.5)


def test_z_axis_oscillation() -> None:
    wave = Oscillating(base=0.0, amplitude=1.0, frequency=1.0, axis=UpAxis.Z)
    state, eid = make_oscillator_state((1.0, 1.0, 0.0), wave)
    state = oscillating_system(state)
    assert state.position[eid] == Position(1.0, 1.0, 2.0)


def test_step_drives_bobbing() -> None:
    state, eid = make_oscillator_state((0.0, 0.5, 0.0), BOB)
    state = step(state, math.pi / 4)
    assert state.position[eid].y == pytest.approx(1.0)
    state = step(state, math.pi / 4)
    assert state.position[eid].y == pytest.approx(0.5)
    assert state.frame == 2


def test_entity_without_position_is_skipped() -> None:
    state, eid = make_oscillator_state((0.0, 0.0, 0.0), BOB)
    state = replace(state, position=pmap())
    assert oscillating_system(state).position == state.position

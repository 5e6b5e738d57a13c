import pytest
from pyrsistent import pmap

from galaxy_universe.components import Name, Person
from galaxy_universe.entity import Entity, new_entity_ids
from galaxy_universe.state import GREET_PERIOD, State, create_empty_state


def test_create_empty_state() -> None:
    state = create_empty_state(seed=3)
    assert len(state.entity) == 0
    assert state.elapsed == 0.0
    assert state.frame == 0
    assert state.greet_timer.duration == GREET_PERIOD
    assert state.seed == 3


def test_invalid_greet_period() -> None:
    with pytest.raises(ValueError):
        create_empty_state(greet_period=0.0)


def test_description_skips_empty_stores() -> None:
    a, b = new_entity_ids(2)
    state = State(
        entity=pmap({a: Entity(), b: Entity()}),
        person=pmap({a: Person()}),
        name=pmap({a: Name("Ada")}),
    )
    description = state.description
    assert description["entity"] == 2
    assert description["person"] == 1
    assert "star" not in description
    assert "elapsed" not in description
    assert "greet_timer" in description

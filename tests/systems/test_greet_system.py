import logging

import pytest

from galaxy_universe.systems.greet import greet_system
from tests.test_utils import make_people_state

GREET_LOGGER = "galaxy_universe.systems.greet"


def _greetings(caplog: pytest.LogCaptureFixture) -> list[str]:
    return [r.getMessage() for r in caplog.records if r.name == GREET_LOGGER]


def test_greets_everyone_when_timer_finishes(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger=GREET_LOGGER)
    state, _ = make_people_state(["Elaina Proctor", "Renzo Hume", "Zayna Nieves"])

    state = greet_system(state, 1.0)
    assert _greetings(caplog) == []
    assert not state.greet_timer.finished

    state = greet_system(state, 1.0)
    assert state.greet_timer.finished
    assert _greetings(caplog) == [
        "hello Elaina Proctor!",
        "hello Renzo Hume!",
        "hello Zayna Nieves!",
    ]


def test_greets_once_per_period(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger=GREET_LOGGER)
    state, _ = make_people_state(["Ada"], greet_period=0.5)
    for _ in range(10):
        state = greet_system(state, 0.25)
    assert _greetings(caplog) == ["hello Ada!"] * 5


def test_no_people_no_greetings(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger=GREET_LOGGER)
    state, _ = make_people_state([])
    state = greet_system(state, 5.0)
    assert state.greet_timer.finished
    assert _greetings(caplog) == []

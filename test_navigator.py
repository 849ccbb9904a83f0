"""Tests for cursor navigation."""

import itertools

import pytest

from logic.navigator import step_toward
from logic.turn_engine import CURSOR_STEPS, GameInput

CELLS = [(x, y) for y in range(3) for x in range(3)]


@pytest.mark.parametrize("current, target, expected", [
    ((0, 0), (2, 0), GameInput.RIGHT),
    ((2, 1), (0, 1), GameInput.LEFT),
    ((1, 2), (1, 0), GameInput.UP),
    ((1, 0), (1, 2), GameInput.DOWN),
    ((0, 0), (2, 1), GameInput.RIGHT),
    ((2, 2), (0, 1), GameInput.LEFT),
    # Ties move vertically
    ((0, 0), (1, 1), GameInput.DOWN),
    ((2, 2), (0, 0), GameInput.UP),
])
def test_step_direction(current, target, expected):
    assert step_toward(current, target) == expected


def test_no_step_when_already_there():
    with pytest.raises(ValueError):
        step_toward((1, 1), (1, 1))


def test_every_target_reached_within_four_steps():
    for start, target in itertools.product(CELLS, CELLS):
        position = start
        steps = 0
        while position != target:
            dx, dy = CURSOR_STEPS[step_toward(position, target)]
            position = (position[0] + dx, position[1] + dy)
            steps += 1

            assert position in CELLS
            assert steps <= 4

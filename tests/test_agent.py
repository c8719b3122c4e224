import pytest

from langton_ca.model.agent import Agent, Heading, turn
from langton_ca.model.grid import GridStore


@pytest.mark.parametrize("heading, value, expected", [
    (0, 0, 1), (1, 0, 2), (2, 0, 3), (3, 0, 0),
    (0, 1, 3), (1, 1, 0), (2, 1, 1), (3, 1, 2),
])
def test_turn_rule(heading, value, expected):
    assert turn(heading, value) == expected


def test_classic_first_step():
    grid = GridStore()
    ant = Agent(0, 0, Heading.UP)
    ant.step(grid)
    assert grid.get(0, 0) == 1
    assert ant.as_tuple() == (1, 0, 1)


def test_revisited_cell_flips_back():
    grid = GridStore()
    ant = Agent(0, 0, 0)
    for _ in range(5):
        ant.step(grid)
    # (0, 0) was visited twice, the three corners of the square once each
    assert grid.get(0, 0) == 0
    assert grid.get(1, 0) == 1
    assert grid.get(1, 1) == 1
    assert grid.get(0, 1) == 1
    assert ant.as_tuple() == (-1, 0, 3)


def test_set_cell_turns_counter_clockwise():
    grid = GridStore()
    grid.set(0, 0, 1)
    ant = Agent(0, 0, Heading.LEFT)
    ant.step(grid)
    assert ant.heading == 2
    assert ant.position == (0, 1)
    assert grid.get(0, 0) == 0

"""Agent implementation with the Langton's ant turning rule."""

from enum import IntEnum
from typing import Tuple

from .grid import GridStore


class Heading(IntEnum):
    """Direction codes; +1 is a clockwise quarter turn."""
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


# Screen space: "up" decreases y
HEADING_OFFSETS = {
    Heading.UP: (0, -1),
    Heading.RIGHT: (1, 0),
    Heading.DOWN: (0, 1),
    Heading.LEFT: (-1, 0),
}


def turn(heading: int, cell_value: int) -> int:
    """Clockwise on a 0 cell, counter-clockwise on a 1 cell."""
    return (heading + (1 if cell_value == 0 else 3)) % 4


class Agent:
    """
    A single ant: an integer position plus one of four headings.

    The rule applied by step() is deterministic:
    1. read the current cell v
    2. turn right if v == 0, left if v == 1
    3. flip the current cell
    4. move one cell along the new heading
    """

    __slots__ = ('x', 'y', 'heading')

    def __init__(self, x: int, y: int, heading: int):
        self.x = x
        self.y = y
        self.heading = heading

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def step(self, grid: GridStore) -> None:
        """Apply one turn-flip-move update against the shared grid."""
        value = grid.flip(self.x, self.y)
        self.heading = turn(self.heading, value)
        dx, dy = HEADING_OFFSETS[self.heading]
        self.x += dx
        self.y += dy

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.x, self.y, self.heading)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Agent):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    __hash__ = None

    def __repr__(self) -> str:
        return f"Agent(x={self.x}, y={self.y}, heading={self.heading})"

# grid.py
from enum import Enum
from typing import Tuple

from .config import GRID_WIDTH, GRID_HEIGHT

Cell = Tuple[int, int]


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def vector(self) -> Tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


def wrap(cell: Cell) -> Cell:
    """Fold a cell back onto the grid; leaving one edge re-enters at the other."""
    x, y = cell
    # Python's % is floor modulo, so -1 maps to the last column/row.
    return (x % GRID_WIDTH, y % GRID_HEIGHT)


def step(cell: Cell, direction: Direction) -> Cell:
    dx, dy = direction.vector
    return wrap((cell[0] + dx, cell[1] + dy))


def center() -> Cell:
    return (GRID_WIDTH // 2, GRID_HEIGHT // 2)

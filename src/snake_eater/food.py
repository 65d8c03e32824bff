# food.py
import logging
import random
from typing import Optional

from .config import GRID_WIDTH, GRID_HEIGHT, CFG
from .grid import Cell
from .snake import Snake

logger = logging.getLogger(__name__)


def place_food(
    snake: Snake,
    rng: random.Random,
    fallback: Optional[Cell] = None,
    max_attempts: int = CFG.max_food_attempts,
) -> Cell:
    """
    Pick a uniformly random cell the snake does not occupy.

    Sampling is bounded by max_attempts; after that the free cells are
    enumerated. A completely filled grid returns ``fallback`` (normally the
    previous food cell).
    """
    for _ in range(max_attempts):
        cell = (rng.randrange(GRID_WIDTH), rng.randrange(GRID_HEIGHT))
        if not snake.occupies(cell):
            return cell

    free = [
        (x, y)
        for y in range(GRID_HEIGHT)
        for x in range(GRID_WIDTH)
        if not snake.occupies((x, y))
    ]
    if free:
        return rng.choice(free)

    if fallback is None:
        raise RuntimeError("no free cell for food and no previous food to keep")
    logger.warning("Grid is full; keeping food at %s", fallback)
    return fallback

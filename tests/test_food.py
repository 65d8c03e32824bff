import random

import pytest

from snake_eater.config import GRID_WIDTH, GRID_HEIGHT
from snake_eater.food import place_food
from snake_eater.snake import Snake


def full_grid_except(*free):
    return [
        (x, y)
        for y in range(GRID_HEIGHT)
        for x in range(GRID_WIDTH)
        if (x, y) not in free
    ]


def test_food_never_on_snake():
    rng = random.Random(7)
    snake = Snake([(x, 10) for x in range(30)])
    for _ in range(200):
        cell = place_food(snake, rng)
        assert not snake.occupies(cell)
        assert 0 <= cell[0] < GRID_WIDTH and 0 <= cell[1] < GRID_HEIGHT


def test_scan_finds_last_free_cell_when_sampling_gives_up():
    snake = Snake(full_grid_except((4, 4)))
    assert place_food(snake, random.Random(0), max_attempts=0) == (4, 4)


def test_full_grid_keeps_previous_food():
    snake = Snake(full_grid_except())
    assert place_food(snake, random.Random(0), fallback=(3, 3), max_attempts=5) == (3, 3)


def test_full_grid_without_fallback_raises():
    snake = Snake(full_grid_except())
    with pytest.raises(RuntimeError):
        place_food(snake, random.Random(0), max_attempts=5)

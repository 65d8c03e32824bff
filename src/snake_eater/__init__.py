"""Snake Eater: a toroidal-grid snake arcade game."""

from .grid import Cell, Direction, wrap, step
from .snake import Snake
from .food import place_food
from .game import GamePhase, SnakeEaterGame

__all__ = [
    "Cell",
    "Direction",
    "wrap",
    "step",
    "Snake",
    "place_food",
    "GamePhase",
    "SnakeEaterGame",
]

# config.py
from dataclasses import dataclass
from typing import Optional

# ----- Grid & window -----
GRID_WIDTH, GRID_HEIGHT = 30, 20
TILE_SIZE = 25
WIDTH, HEIGHT = GRID_WIDTH * TILE_SIZE, GRID_HEIGHT * TILE_SIZE

# ----- Gameplay -----
TICK_MS = 150
FEED_POINTS = 50

# ----- Colors -----
BG     = (0, 0, 0)
GREEN  = (0, 255, 0)
RED    = (220, 0, 0)
PINK   = (230, 80, 120)
TEXT   = (255, 255, 255)
BUTTON = (0, 0, 255)
BUTTON_TEXT = (0, 0, 0)

# ----- Assets (optional; shapes are drawn when missing) -----
FOOD_IMAGE = "banana.png"
HEAD_IMAGE = "lips.jpg"

# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None     # None -> nondeterministic food
    tick_ms: int = TICK_MS
    feed_points: int = FEED_POINTS
    max_food_attempts: int = 1000  # random samples before scanning the grid
    asset_dir: str = "."

CFG = Config()

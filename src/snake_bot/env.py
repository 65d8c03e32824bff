# src/snake_bot/env.py
from __future__ import annotations
from dataclasses import dataclass
import random

import numpy as np  # type: ignore
import pygame       # type: ignore

from snake_eater.config import CFG, GRID_WIDTH, GRID_HEIGHT, TILE_SIZE
from snake_eater.game import GamePhase, SnakeEaterGame
from snake_eater.grid import Direction, step

# -----------------------------------------------------------------------------
# Actions: integers -> grid directions
# -----------------------------------------------------------------------------
ACTIONS = {
    0: Direction.UP,
    1: Direction.DOWN,
    2: Direction.LEFT,
    3: Direction.RIGHT,
}

# -----------------------------------------------------------------------------
# Small geometry helpers
# -----------------------------------------------------------------------------
def left_of(direction: Direction) -> Direction:
    """Rotate a direction 90° CCW (screen coordinates, y grows downward)."""
    dx, dy = direction.vector
    return Direction((dy, -dx))

def right_of(direction: Direction) -> Direction:
    """Rotate a direction 90° CW (screen coordinates, y grows downward)."""
    dx, dy = direction.vector
    return Direction((-dy, dx))

def would_hit(game: SnakeEaterGame, direction: Direction) -> bool:
    """
    True if the next tick in 'direction' would end the game.
    The tail cell is safe: it moves away on the same tick.
    """
    cells = game.current_snake()
    return step(cells[0], direction) in cells[:-1]

# -----------------------------------------------------------------------------
# Observation function
# -----------------------------------------------------------------------------
def observe(game: SnakeEaterGame) -> np.ndarray:
    """
    9-D observation vector:
      0: hx_n  - head x normalized in [0, 1]
      1: hy_n  - head y normalized in [0, 1]
      2: fx_n  - food x normalized in [0, 1]
      3: fy_n  - food y normalized in [0, 1]
      4: dx    - current direction x component in {-1, 0, 1}
      5: dy    - current direction y component in {-1, 0, 1}
      6: danger_ahead
      7: danger_left
      8: danger_right
    """
    hx, hy = game.current_snake()[0]
    fx, fy = game.current_food()
    direction = game.current_direction()

    denom_w = max(GRID_WIDTH - 1, 1)
    denom_h = max(GRID_HEIGHT - 1, 1)
    dx, dy = direction.vector

    return np.array(
        [
            hx / denom_w, hy / denom_h, fx / denom_w, fy / denom_h,
            float(dx), float(dy),
            float(would_hit(game, direction)),
            float(would_hit(game, left_of(direction))),
            float(would_hit(game, right_of(direction))),
        ],
        dtype=np.float32,
    )

# -----------------------------------------------------------------------------
# Environment
# -----------------------------------------------------------------------------
@dataclass
class SnakeEnv:
    """
    Gym-like wrapper: one step() is one direction command plus one tick.

    Rewards:
      + eat_reward   when food is eaten
      + death_reward on self-collision
      + step_penalty otherwise
    """
    step_penalty: float = -0.001
    eat_reward: float   = 1.0
    death_reward: float = -1.0
    seed_value: int     = 0
    render_enabled: bool = False

    def __post_init__(self):
        self.rng = random.Random(self.seed_value)
        np.random.seed(self.seed_value)
        self.game = SnakeEaterGame(CFG, rng=self.rng)

        self.screen = None
        self.clock = None
        if self.render_enabled:
            pygame.init()
            self.screen = pygame.display.set_mode((GRID_WIDTH * TILE_SIZE, GRID_HEIGHT * TILE_SIZE))
            pygame.display.set_caption("Snake Eater (bot)")
            self.clock = pygame.time.Clock()

    # Gym-like API -------------------------------------------------------------
    def reset(self, seed: int | None = None) -> np.ndarray:
        """Start a new episode and return the first observation."""
        if seed is not None:
            self.rng.seed(seed)
            np.random.seed(seed)

        phase = self.game.current_phase()
        if phase is GamePhase.NOT_STARTED:
            self.game.submit_start()
        elif phase is GamePhase.ENDED:
            self.game.submit_reset()
        else:
            # an episode cut short while still alive
            self.game = SnakeEaterGame(CFG, rng=self.rng, high_score=self.game.high_score())
            self.game.submit_start()
        return observe(self.game)

    def step(self, action: int):
        """
        Apply an action (0..3), advance exactly one tick, and return:
          (obs, reward, done, info)
        """
        if self.game.current_phase() is not GamePhase.RUNNING:
            raise ValueError("Call reset() first.")
        if action not in ACTIONS:
            raise ValueError(f"Invalid action {action}")

        before = self.game.current_score()
        self.game.submit_direction(ACTIONS[action])
        self.game.on_tick()

        done = self.game.current_phase() is GamePhase.ENDED
        score = self.game.current_score()
        if done:
            reward = self.death_reward
        elif score > before:
            reward = self.eat_reward
        else:
            reward = self.step_penalty

        info = {
            "score": score,
            "high_score": self.game.high_score(),
            "length": len(self.game.current_snake()),
        }
        return observe(self.game), reward, done, info

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------
    def render(self) -> None:
        """Draw the board; no-op unless render_enabled=True."""
        if not self.render_enabled or self.screen is None:
            return

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit()
                raise SystemExit

        self.screen.fill((0, 0, 0))
        cells = self.game.current_snake()
        for i, (x, y) in enumerate(cells):
            color = (0, 255, 0) if i == 0 else (0, 180, 0)
            pygame.draw.rect(self.screen, color, pygame.Rect(x * TILE_SIZE, y * TILE_SIZE, TILE_SIZE, TILE_SIZE))

        fx, fy = self.game.current_food()
        pygame.draw.rect(self.screen, (220, 0, 0), pygame.Rect(fx * TILE_SIZE, fy * TILE_SIZE, TILE_SIZE, TILE_SIZE))

        pygame.display.flip()
        if self.clock is not None:
            self.clock.tick(15)

    def close(self) -> None:
        if self.render_enabled:
            pygame.quit()

    @property
    def action_space_n(self) -> int:
        return len(ACTIONS)

    @property
    def observation_space_shape(self):
        return (9,)

# src/snake_bot/policies/greedy.py
import numpy as np # type: ignore

from snake_eater.config import GRID_WIDTH, GRID_HEIGHT
from snake_eater.grid import Direction
from snake_bot.env import ACTIONS, left_of, right_of


def wrapped_delta(src: int, dst: int, size: int) -> int:
    """Signed shortest offset from src to dst on a ring of `size` cells."""
    d = (dst - src) % size
    return d - size if d > size // 2 else d


def best_move_toward_food(hx: int, hy: int, fx: int, fy: int):
    """
    Preference ordering of all four directions, shortest toroidal path to
    food first. Does NOT check collisions.
    """
    dx = wrapped_delta(hx, fx, GRID_WIDTH)
    dy = wrapped_delta(hy, fy, GRID_HEIGHT)

    prefs = []
    if dx < 0:
        prefs.append(Direction.LEFT)
    elif dx > 0:
        prefs.append(Direction.RIGHT)
    if dy < 0:
        prefs.append(Direction.UP)
    elif dy > 0:
        prefs.append(Direction.DOWN)
    # larger axis first
    if len(prefs) == 2 and abs(dy) > abs(dx):
        prefs.reverse()
    for d in Direction:
        if d not in prefs:
            prefs.append(d)
    return prefs


def dir_to_action(direction: Direction) -> int:
    for a, d in ACTIONS.items():
        if d is direction:
            return a
    raise ValueError(f"No action for {direction}")


def decode_obs(obs: np.ndarray):
    """
    Inverse of env.observe() (9 dims):
    [hx_n, hy_n, fx_n, fy_n, dx, dy, danger_ahead, danger_left, danger_right]
    """
    hx_n, hy_n, fx_n, fy_n, dx, dy, dan_f, dan_l, dan_r = obs.tolist()
    hx = int(round(hx_n * (GRID_WIDTH - 1)))
    hy = int(round(hy_n * (GRID_HEIGHT - 1)))
    fx = int(round(fx_n * (GRID_WIDTH - 1)))
    fy = int(round(fy_n * (GRID_HEIGHT - 1)))
    return hx, hy, fx, fy, Direction((int(dx), int(dy))), bool(dan_f), bool(dan_l), bool(dan_r)


def policy_greedy(obs: np.ndarray, env) -> int:
    """
    Greedy on toroidal food distance with simple safety:
    - prefer moves that shorten the path to food
    - skip moves flagged dangerous
    - if every move is dangerous, keep going straight
    """
    hx, hy, fx, fy, forward, dan_f, dan_l, dan_r = decode_obs(obs)

    danger = {
        forward: dan_f,
        left_of(forward): dan_l,
        right_of(forward): dan_r,
        forward.opposite: True,  # reversal is ignored by the game anyway
    }

    for d in best_move_toward_food(hx, hy, fx, fy):
        if not danger[d]:
            return dir_to_action(d)

    return dir_to_action(forward)

# src/snake_bot/policies/random.py
import numpy as np # type: ignore


def policy_random(obs: np.ndarray, env) -> int:
    """Random policy: pick a uniformly random action."""
    return int(np.random.randint(env.action_space_n))

# src/snake_bot/policies/__init__.py
"""Scripted policies that drive SnakeEnv."""

from snake_bot.policies.random import policy_random
from snake_bot.policies.greedy import policy_greedy

__all__ = ["policy_random", "policy_greedy"]

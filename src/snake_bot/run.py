# src/snake_bot/run.py
from __future__ import annotations
import argparse
import csv
import logging
import os
import time
from typing import Tuple

from snake_bot.env import SnakeEnv
from snake_bot.policies import policy_random, policy_greedy

POLICIES = {
    "random": policy_random,
    "greedy": policy_greedy,
}

MAX_STEPS = 10_000


def run_episode(env: SnakeEnv, policy: str, render_delay: float = 0.0) -> Tuple[int, float, int]:
    """
    Run one episode with a scripted policy.

    Returns:
        steps: number of ticks taken
        total: sum of rewards
        score: final game score
    """
    try:
        choose = POLICIES[policy]
    except KeyError:
        raise ValueError(f"Unknown policy: {policy}") from None

    obs = env.reset()
    total = 0.0
    steps = 0
    score = 0

    while True:
        obs, r, done, info = env.step(choose(obs, env))
        total += r
        steps += 1
        score = info["score"]

        if env.render_enabled:
            env.render()
            time.sleep(render_delay)

        if done or steps >= MAX_STEPS:
            break

    return steps, total, score


def main():
    parser = argparse.ArgumentParser(description="Run Snake Eater episodes with a scripted policy.")
    parser.add_argument("--episodes", type=int, default=50)
    parser.add_argument("--policy", type=str, default="greedy", choices=sorted(POLICIES))
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--outdir", type=str, default="data/runs", help="CSV is saved here")
    parser.add_argument("--render", action="store_true", help="watch the episodes in a window")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    os.makedirs(args.outdir, exist_ok=True)
    out_csv = os.path.join(args.outdir, f"bot_{args.policy}.csv")

    env = SnakeEnv(seed_value=args.seed, render_enabled=args.render)
    print(f"Running {args.episodes} episode(s) with policy={args.policy}")
    print("ep,steps,return,score")

    rows = [("ep", "steps", "return", "score")]
    for ep in range(1, args.episodes + 1):
        steps, ret, score = run_episode(env, args.policy, render_delay=0.05)
        print(f"{ep},{steps},{ret:.3f},{score}")
        rows.append((ep, steps, float(f"{ret:.6f}"), score))
    env.close()

    with open(out_csv, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerows(rows)

    print(f"\nHigh score: {env.game.high_score()}")
    print(f"Saved results → {out_csv}")


if __name__ == "__main__":
    main()

import numpy as np
import pytest

from snake_bot.env import SnakeEnv, left_of, observe, right_of
from snake_bot.policies.greedy import best_move_toward_food, policy_greedy, wrapped_delta
from snake_bot.run import run_episode
from snake_eater.grid import Direction


def test_step_before_reset_raises():
    env = SnakeEnv()
    with pytest.raises(ValueError):
        env.step(0)


def test_invalid_action_raises():
    env = SnakeEnv()
    env.reset()
    with pytest.raises(ValueError):
        env.step(7)


def test_reset_observation_shape():
    env = SnakeEnv()
    obs = env.reset()
    assert obs.shape == env.observation_space_shape
    assert obs.dtype == np.float32
    # heading right, no danger on a length-1 snake
    assert obs[4] == 1.0 and obs[5] == 0.0
    assert not obs[6:].any()


def test_eating_gives_reward():
    env = SnakeEnv()
    env.reset()
    env.game.load_state([(15, 10)], Direction.RIGHT, food=(16, 10))
    _, reward, done, info = env.step(3)
    assert reward == env.eat_reward
    assert not done
    assert info["score"] == 50 and info["length"] == 2


def test_death_gives_penalty_and_done():
    env = SnakeEnv()
    env.reset()
    env.game.load_state([(5, 5), (5, 6), (6, 6), (6, 5), (6, 4)], Direction.UP, food=(0, 0))
    _, reward, done, _ = env.step(3)
    assert done
    assert reward == env.death_reward
    env.reset()
    assert len(env.game.current_snake()) == 1


def test_high_score_survives_cut_off_episode():
    env = SnakeEnv()
    env.reset()
    env.game.load_state([(5, 5), (5, 6), (6, 6), (6, 5), (6, 4)], Direction.UP, food=(0, 0), score=300)
    _, _, done, info = env.step(3)
    assert done and info["high_score"] == 300

    env.reset()
    env.game.load_state([(15, 10)], Direction.RIGHT, food=(16, 10))
    _, _, done, info = env.step(3)
    assert not done
    # score 50 while alive does not touch the high score
    assert info["score"] == 50 and info["high_score"] == 300

    env.reset()  # cut off while alive
    assert env.game.high_score() == 300
    _, _, _, info = env.step(3)
    assert info["high_score"] == 300


def test_high_score_waits_for_game_over():
    env = SnakeEnv()
    env.reset()
    env.game.load_state([(15, 10)], Direction.RIGHT, food=(16, 10))
    _, _, done, info = env.step(3)
    assert not done
    assert info["score"] == 50 and info["high_score"] == 0


def test_danger_flags():
    env = SnakeEnv()
    env.reset()
    env.game.load_state([(5, 5), (5, 6), (6, 6), (6, 5), (6, 4)], Direction.UP, food=(0, 0))
    obs = observe(env.game)
    # ahead (5,4) free, left (4,5) free, right (6,5) body
    assert obs[6:].tolist() == [0.0, 0.0, 1.0]


def test_rotations():
    assert left_of(Direction.RIGHT) is Direction.UP
    assert right_of(Direction.RIGHT) is Direction.DOWN
    assert left_of(Direction.UP) is Direction.LEFT


def test_wrapped_delta_takes_short_way_round():
    assert wrapped_delta(1, 28, 30) == -3
    assert wrapped_delta(28, 1, 30) == 3
    assert wrapped_delta(5, 5, 30) == 0


def test_best_move_prefers_wrapping():
    prefs = best_move_toward_food(1, 10, 28, 10)
    assert prefs[0] is Direction.LEFT
    assert len(prefs) == 4


def test_greedy_heads_for_food():
    env = SnakeEnv()
    env.reset()
    env.game.load_state([(10, 10)], Direction.RIGHT, food=(10, 5))
    assert policy_greedy(observe(env.game), env) == 0  # UP


def test_greedy_episode_scores():
    env = SnakeEnv(seed_value=1)
    steps, total, score = run_episode(env, "greedy")
    assert steps > 0
    assert score > 0


def test_unknown_policy():
    with pytest.raises(ValueError):
        run_episode(SnakeEnv(), "nope")

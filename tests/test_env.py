# tests/test_env.py
import numpy as np
import pytest

from wrapsnake.config import Board, Direction
from wrapsnake.agents.autoplay import run_episode
from wrapsnake.agents.env import SnakeEnv, left_of, observe, right_of, torus_distance
from wrapsnake.agents.policies import policy_eps_greedy, policy_greedy, policy_random
from wrapsnake.agents.policies.greedy import best_moves_toward_fruit


def test_rotations():
    assert left_of(Direction.RIGHT) == Direction.UP
    assert right_of(Direction.RIGHT) == Direction.DOWN
    assert left_of(Direction.UP) == Direction.LEFT
    assert right_of(Direction.LEFT) == Direction.UP


def test_torus_distance(board):
    assert torus_distance((0, 0), (14, 0), board) == 1
    assert torus_distance((0, 0), (7, 7), board) == 14
    assert torus_distance((2, 3), (2, 3), board) == 0


def test_reset_observation():
    env = SnakeEnv(seed_value=3)
    obs = env.reset()
    assert obs.shape == env.observation_space_shape
    assert obs.dtype == np.float32
    # heading right, nothing in the way
    assert obs[4] == 1.0 and obs[5] == 0.0
    assert obs[6:].tolist() == [0.0, 0.0, 0.0]


def test_step_requires_reset():
    env = SnakeEnv()
    with pytest.raises(AssertionError):
        env.step(0)


def test_invalid_action():
    env = SnakeEnv()
    env.reset()
    with pytest.raises(ValueError):
        env.step(7)


def test_eating_is_rewarded():
    env = SnakeEnv()
    env.reset()
    env.state.fruit = (4, 1)
    _, reward, done, info = env.step(1)   # RIGHT
    assert not done
    assert info["score"] == 1
    assert reward > 0.5


def test_death_terminates():
    env = SnakeEnv()
    env.reset()
    state = env.state
    state.x, state.y = 2, 2
    state.direction = Direction.UP
    state.body = [(0, 1), (1, 1), (2, 1), (3, 1), (3, 2)]
    state.fruit = (10, 10)
    _, reward, done, info = env.step(2)   # UP into own body
    assert done
    assert reward == env.death_reward
    assert info["reason"] == "death"


def test_danger_flag_in_observation():
    board = Board()
    env = SnakeEnv(board=board)
    env.reset()
    env.state.body.append((4, 1))  # cell straight ahead
    obs = observe(env.state, board)
    assert obs[6] == 1.0


def test_greedy_prefers_short_way_round(board):
    # fruit is 2 cells to the left through the edge, 13 to the right
    prefs = best_moves_toward_fruit((1, 5), (14, 5), board)
    assert prefs[0] == Direction.LEFT
    assert sorted(prefs) == sorted(Direction)


def test_policies_return_valid_actions():
    env = SnakeEnv(seed_value=1)
    obs = env.reset()
    for policy in (policy_random, policy_greedy, policy_eps_greedy):
        assert 0 <= policy(obs, env, 0.5) < env.action_space_n


def test_greedy_episode_scores():
    env = SnakeEnv(seed_value=0)
    steps, total, score = run_episode(env, "greedy", 0.0, max_steps=300, seed=0)
    assert 0 < steps <= 300
    assert score >= 1


def test_unknown_policy():
    with pytest.raises(ValueError):
        run_episode(SnakeEnv(), "dqn", 0.0)

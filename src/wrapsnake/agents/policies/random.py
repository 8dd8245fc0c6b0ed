# src/wrapsnake/agents/policies/random.py
import numpy as np # type: ignore


def policy_random(obs: np.ndarray, env, epsilon: float = 0.0) -> int:
    """
    Random policy: pick a uniformly random action.
    Reversals are ignored by the game, so some picks just keep going straight.
    """
    return int(env.rng.integers(env.action_space_n))

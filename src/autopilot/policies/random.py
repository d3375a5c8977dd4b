# src/autopilot/policies/random.py
import numpy as np # type: ignore


def policy_random(obs: np.ndarray, env, epsilon: float = 0.0) -> int:
    """
    Random policy: pick a uniformly random action.
    Reversals are dropped by the game, so roughly a quarter of the picks do nothing.
    """
    return int(np.random.randint(env.action_space_n))

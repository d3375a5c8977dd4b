# src/autopilot/policies/eps_greedy.py
import numpy as np # type: ignore
from autopilot.policies.random import policy_random
from autopilot.policies.greedy import policy_greedy


def policy_eps_greedy(obs: np.ndarray, env, epsilon: float = 0.1) -> int:
    """
    Mostly greedy, but with probability epsilon a random action instead.
    A random pick that would reverse the snake is dropped by the game, so the
    snake just carries on for that tick.
    """
    explore = np.random.rand() < epsilon
    return (policy_random if explore else policy_greedy)(obs, env)

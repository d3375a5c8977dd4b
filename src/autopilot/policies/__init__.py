# src/autopilot/policies/__init__.py
"""Policies that pick an action for SnakeEnv from an observation."""

from autopilot.policies.random import policy_random
from autopilot.policies.greedy import policy_greedy
from autopilot.policies.eps_greedy import policy_eps_greedy

POLICIES = {
    "random": policy_random,
    "greedy": policy_greedy,
    "eps-greedy": policy_eps_greedy,
}

__all__ = ["policy_random", "policy_greedy", "policy_eps_greedy", "POLICIES"]

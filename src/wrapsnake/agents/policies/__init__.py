# src/wrapsnake/agents/policies/__init__.py
"""Fixed (non-learning) policies for the headless environment."""

from wrapsnake.agents.policies.random import policy_random
from wrapsnake.agents.policies.greedy import policy_greedy
from wrapsnake.agents.policies.eps_greedy import policy_eps_greedy

POLICIES = {
    "random": policy_random,
    "greedy": policy_greedy,
    "eps-greedy": policy_eps_greedy,
}

__all__ = ["policy_random", "policy_greedy", "policy_eps_greedy", "POLICIES"]

# src/wrapsnake/agents/policies/greedy.py
from typing import List

import numpy as np # type: ignore

from wrapsnake.config import Board, Direction
from wrapsnake.agents.env import ACTIONS, would_hit


def axis_toward(head: int, target: int, length: int, lower: Direction, upper: Direction) -> List[Direction]:
    """Direction along one axis that reaches target fastest, going round the edge if shorter."""
    if head == target:
        return []
    forward = (target - head) % length      # steps going towards 'upper'
    return [upper] if forward <= length - forward else [lower]


def best_moves_toward_fruit(head, fruit, board: Board) -> List[Direction]:
    """
    Preference ordering of all four directions: the ones that shorten the
    wrapped distance to the fruit first. Does NOT check collisions.
    """
    prefs = axis_toward(head[0], fruit[0], board.width, Direction.LEFT, Direction.RIGHT)
    prefs += axis_toward(head[1], fruit[1], board.height, Direction.UP, Direction.DOWN)
    for d in (Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN):
        if d not in prefs:
            prefs.append(d)
    return prefs


def dir_to_action(direction: Direction) -> int:
    for a, d in ACTIONS.items():
        if d == direction:
            return a
    raise ValueError(f"No action for {direction!r}")


def policy_greedy(obs: np.ndarray, env, epsilon: float = 0.0) -> int:
    """
    Greedy on fruit distance with simple safety:
    - prefer moves that shorten the wrapped Manhattan distance
    - skip reversals (the game would ignore them) and fatal cells
    - if every move is fatal, keep going straight
    """
    state = env.state
    for d in best_moves_toward_fruit(state.head, state.fruit, env.board):
        if d == state.direction.opposite:
            continue
        if not would_hit(state, d, env.board):
            return dir_to_action(d)
    # boxed in
    return dir_to_action(state.direction)

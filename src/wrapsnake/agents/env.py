# src/wrapsnake/agents/env.py
from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Optional

import numpy as np  # type: ignore

from wrapsnake.config import BOARD, Board, Direction
from wrapsnake.grid import Cell, is_dead, step
from wrapsnake.loop import Renderer
from wrapsnake.player import PlayerState, new_player_state, tick
from wrapsnake.render import build_scene

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Actions: integers -> directions
# -----------------------------------------------------------------------------
ACTIONS = {
    0: Direction.LEFT,
    1: Direction.RIGHT,
    2: Direction.UP,
    3: Direction.DOWN,
}

_BY_DELTA = {d.delta: d for d in Direction}

# -----------------------------------------------------------------------------
# Small geometry helpers
# -----------------------------------------------------------------------------
def left_of(direction: Direction) -> Direction:
    """Rotate a direction 90° counter-clockwise on screen (y grows downwards)."""
    dx, dy = direction.delta
    return _BY_DELTA[(dy, -dx)]

def right_of(direction: Direction) -> Direction:
    """Rotate a direction 90° clockwise on screen."""
    dx, dy = direction.delta
    return _BY_DELTA[(-dy, dx)]

def would_hit(state: PlayerState, direction: Direction, board: Board) -> bool:
    """True if moving the head one (wrapped) cell in 'direction' is fatal."""
    nx, ny = step(state.head, direction, board)
    return is_dead(nx, ny, state.body, board)

def torus_distance(a: Cell, b: Cell, board: Board) -> int:
    """Manhattan distance where each axis may go the short way round."""
    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    return min(dx, board.width - dx) + min(dy, board.height - dy)

# -----------------------------------------------------------------------------
# Observation function
# -----------------------------------------------------------------------------
def observe(state: PlayerState, board: Board) -> np.ndarray:
    """
    Compact 9-D observation vector.

    Features:
      0: hx_n  - head x normalized in [0, 1]
      1: hy_n  - head y normalized in [0, 1]
      2: fx_n  - fruit x normalized in [0, 1]
      3: fy_n  - fruit y normalized in [0, 1]
      4: dx    - current direction x component in {-1, 0, 1}
      5: dy    - current direction y component in {-1, 0, 1}
      6: danger_ahead  - 1.0 if the next cell forward would be fatal
      7: danger_left   - 1.0 if the next cell to the left would be fatal
      8: danger_right  - 1.0 if the next cell to the right would be fatal
    """
    denom_w = max(board.width - 1, 1)
    denom_h = max(board.height - 1, 1)
    fx, fy = state.fruit
    dx, dy = state.direction.delta

    return np.array(
        [
            state.x / denom_w, state.y / denom_h, fx / denom_w, fy / denom_h,
            float(dx), float(dy),
            float(would_hit(state, state.direction, board)),
            float(would_hit(state, left_of(state.direction), board)),
            float(would_hit(state, right_of(state.direction), board)),
        ],
        dtype=np.float32,
    )

# -----------------------------------------------------------------------------
# Headless environment
# -----------------------------------------------------------------------------
@dataclass
class SnakeEnv:
    """
    Gym-like environment over the game's own tick(); one step is one tick.

    Rewards:
      + eat_reward  when fruit is eaten
      + shaping_coef * (d_before - d_after) per step (closer -> positive)
      + step_penalty per step
      + death_reward on death
    """
    board: Board        = BOARD
    step_penalty: float = -0.001
    eat_reward: float   = 1.0
    death_reward: float = -1.0
    shaping_coef: float = 0.01
    seed_value: int     = 0
    renderer: Optional[Renderer] = None

    def __post_init__(self):
        self.rng = np.random.default_rng(self.seed_value)
        self.state: PlayerState | None = None

    # Gym-like API -------------------------------------------------------------
    def reset(self, seed: int | None = None) -> np.ndarray:
        """Start a new episode. Returns the initial observation."""
        if seed is not None:
            self.rng = np.random.default_rng(seed)
        self.state = new_player_state(self.board, self.rng)
        return observe(self.state, self.board)

    def step(self, action: int):
        """
        Apply an action (0..3), advance exactly one tick, and return:
          (obs, reward, terminated, info)
        """
        assert self.state is not None, "Call reset() first."
        if action not in ACTIONS:
            raise ValueError(f"Invalid action {action}")

        state = self.state
        state.next_move = ACTIONS[action]
        d_before = torus_distance(state.head, state.fruit, self.board)
        score_before = state.score

        if not tick(state, self.board, self.rng):
            info = {"reason": "death", "score": state.score}
            return observe(state, self.board), self.death_reward, True, info

        reward = self.step_penalty
        if state.score > score_before:
            reward += self.eat_reward
        d_after = torus_distance(state.head, state.fruit, self.board)
        reward += self.shaping_coef * (d_before - d_after)
        logger.debug("distance %d -> %d, reward %.4f", d_before, d_after, reward)

        return observe(state, self.board), reward, False, {"score": state.score}

    def render(self) -> None:
        if self.renderer is None or self.state is None:
            return
        self.renderer.draw(build_scene(self.state, self.board))

    @property
    def action_space_n(self) -> int:
        return len(ACTIONS)

    @property
    def observation_space_shape(self):
        # 9 features defined in observe()
        return (9,)

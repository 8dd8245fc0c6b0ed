# player.py
from dataclasses import dataclass
import logging
from typing import List

from .config import Board, Direction, START_BODY, START_DIRECTION, START_HEAD
from .fruit import Rng, place_fruit
from .grid import Cell, is_dead, is_opposite, step

logger = logging.getLogger(__name__)


# ---------- State ----------
@dataclass
class PlayerState:
    x: int
    y: int
    direction: Direction
    next_move: Direction           # latest input, committed on the next tick
    body: List[Cell]               # tail first, head excluded
    fruit: Cell
    killed: bool = False
    score: int = 0
    next_update: float = 0.0       # elapsed seconds of the next scheduled tick

    @property
    def head(self) -> Cell:
        return (self.x, self.y)

    @property
    def alive(self) -> bool:
        return not self.killed


@dataclass
class GameState:
    """Player state plus frame/time counters used for scheduling and diagnostics."""
    state: PlayerState
    frames: int = 0
    time: float = 0.0              # total_time at the last diagnostic report
    total_time: float = 0.0


def new_player_state(board: Board, rng: Rng) -> PlayerState:
    body = list(START_BODY)
    return PlayerState(
        x=START_HEAD[0],
        y=START_HEAD[1],
        direction=START_DIRECTION,
        next_move=START_DIRECTION,
        body=body,
        fruit=place_fruit(START_HEAD, body, board, rng),
        next_update=board.tick_interval,
    )


def new_game_state(board: Board, rng: Rng) -> GameState:
    return GameState(state=new_player_state(board, rng))


# ---------- Update ----------
def resolve_direction(current: Direction, requested: Direction) -> Direction:
    """Commit the requested direction unless it is a 180° turn."""
    if is_opposite(requested, current):
        return current
    return requested


def tick(state: PlayerState, board: Board, rng: Rng) -> bool:
    """
    Advance the snake by exactly one cell.
    The body is checked for collision before the tail moves, so stepping into
    the cell the tail is about to leave is still fatal.
    Returns True if alive, False once the snake has died. A dead state is
    never modified.
    """
    if state.killed:
        return False

    state.direction = resolve_direction(state.direction, state.next_move)
    nx, ny = step(state.head, state.direction, board)

    eaten = (nx, ny) == state.fruit
    state.killed = is_dead(nx, ny, state.body, board)
    if state.killed:
        logger.info("Snake died at (%d, %d) with score %d", nx, ny, state.score)
        return False

    # Move / grow
    state.body.append(state.head)
    if eaten:
        state.score += 1
        state.fruit = place_fruit((nx, ny), state.body, board, rng)
    else:
        state.body.pop(0)

    state.x, state.y = nx, ny
    return True

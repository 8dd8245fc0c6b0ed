# loop.py
"""
Frame loop driver: input capture, fixed-timestep scheduling, reset/quit,
diagnostics and render hand-off. One frame runs to completion before the
clock is asked for the next one.
"""
import logging
from typing import Protocol, Tuple

from .config import Board, Command, Direction, INPUT_PRIORITY
from .fruit import Rng
from .player import GameState, PlayerState, new_game_state, tick
from .render import Scene, build_scene

logger = logging.getLogger(__name__)


# ---------- Collaborators ----------
class InputSource(Protocol):
    def poll(self) -> None: ...
    def is_down(self, direction: Direction) -> bool: ...
    def was_pressed(self, command: Command) -> bool: ...


class Renderer(Protocol):
    def draw(self, scene: Scene) -> None: ...


class Clock(Protocol):
    def frame_time(self) -> float: ...


# ---------- Per-frame pieces ----------
def sample_direction(inputs: InputSource, current: Direction) -> Direction:
    """First held direction in priority order; keep the current one if none is held."""
    for direction in INPUT_PRIORITY:
        if inputs.is_down(direction):
            return direction
    return current


def schedule(state: PlayerState, now: float, board: Board, rng: Rng) -> bool:
    """
    Run one tick if it is due. The next slot is measured from the slot that
    was due, not from now, so late frames do not push the cadence back.
    Returns True if a tick ran.
    """
    if state.killed or now < state.next_update:
        return False
    state.next_update = now + board.tick_interval - (now - state.next_update)
    tick(state, board, rng)
    return True


def report(game: GameState, report_every: float) -> bool:
    if game.total_time - game.time <= report_every:
        return False
    logger.debug(
        "frames=%d total_time=%.3f head=(%d, %d)",
        game.frames, game.total_time, game.state.x, game.state.y,
    )
    game.time = game.total_time
    game.frames = 0
    return True


def step_frame(
    game: GameState,
    dt: float,
    inputs: InputSource,
    renderer: Renderer,
    board: Board,
    rng: Rng,
    report_every: float = 1.0,
) -> Tuple[GameState, bool]:
    """
    Process one frame. Returns (game, running); game is a fresh object after
    a reset, and running is False once quit was requested.
    """
    inputs.poll()
    game.total_time += dt

    if inputs.was_pressed(Command.RESET):
        logger.info("Reset requested (score was %d)", game.state.score)
        game = new_game_state(board, rng)
    if inputs.was_pressed(Command.QUIT):
        logger.info("Quit requested")
        return game, False

    state = game.state
    state.next_move = sample_direction(inputs, state.next_move)
    schedule(state, game.total_time, board, rng)

    game.frames += 1
    report(game, report_every)

    renderer.draw(build_scene(state, board))
    return game, True


def run(
    board: Board,
    inputs: InputSource,
    renderer: Renderer,
    clock: Clock,
    rng: Rng,
    report_every: float = 1.0,
) -> GameState:
    """Drive frames until quit. Returns the final game state."""
    game = new_game_state(board, rng)
    running = True
    dt = 0.0
    while running:
        game, running = step_frame(game, dt, inputs, renderer, board, rng, report_every)
        if running:
            dt = clock.frame_time()
    return game

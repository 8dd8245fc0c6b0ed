# tests/test_display.py
from collections import defaultdict

import pygame # type: ignore
import pytest

from wrapsnake.agents.autoplay import PacedRenderer
from wrapsnake.config import HEAD, Command, Direction
from wrapsnake.display import PygameClock, PygameInput, PygameRenderer
from wrapsnake.player import PlayerState
from wrapsnake.render import build_scene


@pytest.fixture
def window(monkeypatch, board):
    # no real screen needed
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    pygame.init()
    renderer = PygameRenderer(board)
    pygame.event.clear()
    yield renderer
    pygame.quit()


def make_state(**overrides):
    fields = dict(x=3, y=1, direction=Direction.RIGHT, next_move=Direction.RIGHT,
                  body=[(0, 1), (1, 1), (2, 1)], fruit=(5, 6), score=2)
    fields.update(overrides)
    return PlayerState(**fields)


def key_down(key):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=key))


def test_escape_resets_for_one_frame_only(window):
    inputs = PygameInput()
    key_down(pygame.K_ESCAPE)

    inputs.poll()
    assert inputs.was_pressed(Command.RESET)
    assert not inputs.was_pressed(Command.QUIT)

    inputs.poll()
    assert not inputs.was_pressed(Command.RESET)


def test_window_close_quits(window):
    inputs = PygameInput()
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    inputs.poll()
    assert inputs.was_pressed(Command.QUIT)


def test_q_quits(window):
    inputs = PygameInput()
    key_down(pygame.K_q)
    inputs.poll()
    assert inputs.was_pressed(Command.QUIT)
    assert not inputs.was_pressed(Command.RESET)


def test_other_keys_are_not_commands(window):
    inputs = PygameInput()
    key_down(pygame.K_SPACE)
    inputs.poll()
    assert not inputs.was_pressed(Command.QUIT)
    assert not inputs.was_pressed(Command.RESET)


def test_is_down_reads_arrow_keys(window, monkeypatch):
    held = defaultdict(bool, {pygame.K_UP: True, pygame.K_LEFT: True})
    monkeypatch.setattr(pygame.key, "get_pressed", lambda: held)
    inputs = PygameInput()
    assert not inputs.is_down(Direction.UP)   # nothing read before the first poll

    inputs.poll()
    assert inputs.is_down(Direction.UP)
    assert inputs.is_down(Direction.LEFT)
    assert not inputs.is_down(Direction.RIGHT)
    assert not inputs.is_down(Direction.DOWN)


def test_clock_returns_seconds(window):
    clock = PygameClock(fps=1000)
    dt = clock.frame_time()
    assert isinstance(dt, float)
    assert dt >= 0.0


def test_renderer_draws_scene(window, board):
    window.draw(build_scene(make_state(), board))
    window.draw(build_scene(make_state(killed=True), board))
    # head cell is painted with the head colour
    assert tuple(window.screen.get_at((20 + 3 * 20 + 5, 20 + 1 * 20 + 5)))[:3] == HEAD


def test_autoplay_draws_until_window_closed(window, board):
    paced = PacedRenderer(window, PygameClock(fps=1000))
    paced.draw(build_scene(make_state(), board))

    pygame.event.post(pygame.event.Event(pygame.QUIT))
    with pytest.raises(SystemExit):
        paced.draw(build_scene(make_state(), board))

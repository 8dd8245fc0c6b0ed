# display.py
from typing import Dict, Set, Tuple

import pygame # type: ignore

from .config import Board, Command, Direction, window_size
from .render import Circle, Rect, Scene, Text

KEYS: Dict[Direction, int] = {
    Direction.LEFT: pygame.K_LEFT,
    Direction.RIGHT: pygame.K_RIGHT,
    Direction.UP: pygame.K_UP,
    Direction.DOWN: pygame.K_DOWN,
}

COMMAND_KEYS: Dict[int, Command] = {
    pygame.K_ESCAPE: Command.RESET,
    pygame.K_q: Command.QUIT,
}


class PygameInput:
    """Held-key queries for arrows, edge-triggered presses for reset/quit."""

    def __init__(self):
        self.pressed: Set[Command] = set()
        self.held = None

    def poll(self) -> None:
        self.pressed.clear()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.pressed.add(Command.QUIT)
            elif event.type == pygame.KEYDOWN and event.key in COMMAND_KEYS:
                self.pressed.add(COMMAND_KEYS[event.key])
        self.held = pygame.key.get_pressed()

    def is_down(self, direction: Direction) -> bool:
        return bool(self.held is not None and self.held[KEYS[direction]])

    def was_pressed(self, command: Command) -> bool:
        return command in self.pressed


class PygameClock:
    def __init__(self, fps: int):
        self.fps = fps
        self.clock = pygame.time.Clock()

    def frame_time(self) -> float:
        # blocks until the next frame is due
        return self.clock.tick(self.fps) / 1000.0


class PygameRenderer:
    def __init__(self, board: Board, caption: str = "Snake"):
        self.screen = pygame.display.set_mode(window_size(board))
        pygame.display.set_caption(caption)
        self.fonts: Dict[int, pygame.font.Font] = {}

    def font(self, size: int) -> pygame.font.Font:
        if size not in self.fonts:
            self.fonts[size] = pygame.font.SysFont(None, size)
        return self.fonts[size]

    def draw(self, scene: Scene) -> None:
        self.screen.fill(scene.background)
        for shape in scene.shapes:
            if isinstance(shape, Rect):
                pygame.draw.rect(
                    self.screen, shape.color,
                    pygame.Rect(int(shape.x), int(shape.y), int(shape.w), int(shape.h)),
                )
            elif isinstance(shape, Circle):
                pygame.draw.circle(
                    self.screen, shape.color, (int(shape.x), int(shape.y)), int(shape.radius)
                )
        for text in scene.texts:
            self.blit_text(text)
        pygame.display.flip()

    def blit_text(self, text: Text) -> None:
        surf = self.font(text.size).render(text.text, True, text.color)
        pos: Tuple[int, int] = (int(text.x), int(text.y))
        if text.centered:
            rect = surf.get_rect(center=pos)
        else:
            rect = surf.get_rect(bottomleft=pos)
        self.screen.blit(surf, rect)

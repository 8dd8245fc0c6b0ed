# config.py
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple


# ----- Starting position (heading right) -----
START_HEAD = (3, 1)
START_BODY = ((0, 1), (1, 1), (2, 1))   # tail first

# The first move right must land on a free cell without wrapping onto the tail.
MIN_WIDTH = START_HEAD[0] + 2
MIN_HEIGHT = max(y for _, y in START_BODY + (START_HEAD,)) + 1


# ----- Board -----
@dataclass(frozen=True)
class Board:
    width: int = 15
    height: int = 15
    tick_interval: float = 0.075   # seconds between snake moves

    def __post_init__(self):
        if self.width < MIN_WIDTH or self.height < MIN_HEIGHT:
            raise ValueError(
                f"Board must be at least {MIN_WIDTH}x{MIN_HEIGHT}, got {self.width}x{self.height}"
            )
        if self.tick_interval <= 0:
            raise ValueError(f"tick_interval must be positive, got {self.tick_interval}")


BOARD = Board()

# ----- Drawing geometry (pixels) -----
DRAW_OFFSET = 20.0
DRAW_FIELD_SIZE = 20.0


def window_size(board: Board) -> Tuple[int, int]:
    return (
        int(board.width * DRAW_FIELD_SIZE + 2 * DRAW_OFFSET),
        int(board.height * DRAW_FIELD_SIZE + 2 * DRAW_OFFSET),
    )


# ----- Colors -----
BG       = (50, 255, 150)
FIELD    = (0, 0, 0)
BODY     = (102, 191, 255)
HEAD     = (0, 121, 241)
FRUIT    = (253, 249, 0)
TEXT     = (80, 80, 80)
OVERLAY  = (240, 240, 250)


# ----- Directions -----
class Direction(IntEnum):
    LEFT = 1
    RIGHT = 2
    UP = 3
    DOWN = 4

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_DELTAS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}

_OPPOSITES = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}

# Order in which held keys are checked each frame; first held wins.
INPUT_PRIORITY = (Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN)


class Command(Enum):
    RESET = "reset"
    QUIT = "quit"


START_DIRECTION = Direction.RIGHT


# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None     # None -> derived from the clock at startup
    fps: int = 60
    report_every: float = 1.0      # seconds between diagnostic reports

    def __post_init__(self):
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.report_every <= 0:
            raise ValueError(f"report_every must be positive, got {self.report_every}")


CFG = Config()

# grid.py
from typing import Iterable, Tuple

from .config import Board, Direction

Cell = Tuple[int, int]


def wrap(coordinate: int, axis_length: int) -> int:
    """Map -1 to the last cell and axis_length to 0; a single step never goes further."""
    if coordinate < 0:
        return axis_length - 1
    if coordinate >= axis_length:
        return 0
    return coordinate


def step(position: Cell, direction: Direction, board: Board) -> Cell:
    dx, dy = direction.delta
    return (
        wrap(position[0] + dx, board.width),
        wrap(position[1] + dy, board.height),
    )


def is_opposite(a: Direction, b: Direction) -> bool:
    return a.opposite == b


def in_bounds(x: int, y: int, board: Board) -> bool:
    return 0 <= x < board.width and 0 <= y < board.height


def is_dead(x: int, y: int, body: Iterable[Cell], board: Board) -> bool:
    """
    True if (x, y) is off the board or already taken by a body segment.
    The bounds branch cannot fire once wrap() has been applied.
    """
    if not in_bounds(x, y, board):
        return True
    return (x, y) in body

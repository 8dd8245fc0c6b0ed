# fruit.py
from typing import Iterable, Protocol

from .config import Board
from .grid import Cell


class Rng(Protocol):
    """Subset of numpy.random.Generator the game needs."""

    def integers(self, low: int, high: int) -> int: ...


def place_fruit(head: Cell, body: Iterable[Cell], board: Board, rng: Rng) -> Cell:
    # Rejection sampling; never terminates on a board with no free cell.
    occupied = set(body)
    while True:
        fx = int(rng.integers(0, board.width))
        fy = int(rng.integers(0, board.height))
        if (fx, fy) != head and (fx, fy) not in occupied:
            return (fx, fy)

# tests/conftest.py
from typing import Iterable, List, Set

import pytest

from wrapsnake.config import Board, Command, Direction


class ScriptedRng:
    """Returns the given integers in order, then keeps repeating the last one."""

    def __init__(self, values: Iterable[int]):
        self.values: List[int] = list(values)
        self.calls: List[tuple] = []

    def integers(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        if len(self.values) > 1:
            return self.values.pop(0)
        return self.values[0]


class FakeInput:
    def __init__(self):
        self.held: Set[Direction] = set()
        self.pressed: Set[Command] = set()
        self.polls = 0

    def poll(self) -> None:
        self.polls += 1

    def is_down(self, direction: Direction) -> bool:
        return direction in self.held

    def was_pressed(self, command: Command) -> bool:
        return command in self.pressed


class FakeRenderer:
    def __init__(self):
        self.scenes = []

    def draw(self, scene) -> None:
        self.scenes.append(scene)


@pytest.fixture
def board() -> Board:
    return Board(width=15, height=15, tick_interval=0.075)


@pytest.fixture
def far_fruit_rng() -> ScriptedRng:
    # every fruit lands on (10, 10), away from the starting snake
    return ScriptedRng([10])

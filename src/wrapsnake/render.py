# render.py
from dataclasses import dataclass, field
from typing import List, Tuple, Union

from .config import (
    Board, DRAW_FIELD_SIZE, DRAW_OFFSET,
    BG, FIELD, BODY, HEAD, FRUIT, TEXT, OVERLAY,
    window_size,
)
from .player import PlayerState

Color = Tuple[int, int, int]


# ---------- Payload ----------
@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    w: float
    h: float
    color: Color


@dataclass(frozen=True)
class Circle:
    x: float
    y: float
    radius: float
    color: Color


@dataclass(frozen=True)
class Text:
    text: str
    x: float          # left edge
    y: float          # baseline
    size: int
    color: Color
    centered: bool = False


Shape = Union[Rect, Circle]


@dataclass
class Scene:
    """Everything the renderer needs for one frame; drawn in order, no diffing."""
    background: Color
    shapes: List[Shape] = field(default_factory=list)
    texts: List[Text] = field(default_factory=list)


# ---------- Helpers ----------
def cell_rect(gx: int, gy: int, color: Color) -> Rect:
    return Rect(
        DRAW_OFFSET + gx * DRAW_FIELD_SIZE,
        DRAW_OFFSET + gy * DRAW_FIELD_SIZE,
        DRAW_FIELD_SIZE,
        DRAW_FIELD_SIZE,
        color,
    )


def build_scene(state: PlayerState, board: Board) -> Scene:
    scene = Scene(background=BG)
    scene.shapes.append(
        Rect(DRAW_OFFSET, DRAW_OFFSET,
             board.width * DRAW_FIELD_SIZE, board.height * DRAW_FIELD_SIZE, FIELD)
    )
    for x, y in state.body:
        scene.shapes.append(cell_rect(x, y, BODY))
    scene.shapes.append(cell_rect(state.x, state.y, HEAD))

    # fruit circle sits in the middle of its cell
    fx, fy = state.fruit
    scene.shapes.append(
        Circle(
            DRAW_OFFSET * 1.5 + fx * DRAW_FIELD_SIZE,
            DRAW_OFFSET * 1.5 + fy * DRAW_FIELD_SIZE,
            DRAW_FIELD_SIZE / 2.0,
            FRUIT,
        )
    )

    scene.texts.append(Text(f"Score: {state.score}", 20.0, 15.0, 20, TEXT))

    if state.killed:
        w, h = window_size(board)
        scene.texts.append(Text("GAME OVER", w / 2, h / 2, 32, OVERLAY, centered=True))
        scene.texts.append(
            Text("Esc to restart, Q to quit", w / 2, h / 2 + 28, 20, OVERLAY, centered=True)
        )
    return scene

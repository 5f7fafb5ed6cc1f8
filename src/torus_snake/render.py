# render.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from .config import CELL_SIZE, EDGE_BUFFER, SNAKE_COLOR, HEAD_COLOR, DEAD_COLOR, FOOD_COLOR
from .game import GameState, Position, RunState, occupied_cells

Color = Tuple[int, int, int, int]


@dataclass(frozen=True)
class DrawRect:
    rect: Tuple[int, int, int, int]  # x, y, w, h in pixels
    color: Color


def cell_rect(pos: Position, cell_size: int = CELL_SIZE, edge: int = EDGE_BUFFER) -> Tuple[int, int, int, int]:
    gx, gy = pos
    return (gx * cell_size + edge, gy * cell_size + edge, cell_size - 2 * edge, cell_size - 2 * edge)

def connector_rect(a: Position, b: Position, cell_size: int = CELL_SIZE,
                   edge: int = EDGE_BUFFER) -> Optional[Tuple[int, int, int, int]]:
    """
    Fill the gap between two grid-adjacent cells so the body reads as one
    piece. Cells that are not direct neighbours (including pairs split by a
    wrap) get no connector.
    """
    dx, dy = b[0] - a[0], b[1] - a[1]
    if abs(dx) + abs(dy) != 1:
        return None

    inner = cell_size - 2 * edge
    if dx != 0:
        left = min(a[0], b[0])
        return ((left + 1) * cell_size - edge, a[1] * cell_size + edge, 2 * edge, inner)
    top = min(a[1], b[1])
    return (a[0] * cell_size + edge, (top + 1) * cell_size - edge, inner, 2 * edge)


def project_frame(state: GameState, cell_size: int = CELL_SIZE, edge: int = EDGE_BUFFER) -> Iterator[DrawRect]:
    """Yield the rectangles that make up one frame: snake cells, connectors, then food."""
    body = occupied_cells(state)
    head_color = DEAD_COLOR if state.run_state is RunState.GAME_OVER else HEAD_COLOR

    yield DrawRect(cell_rect(body[0], cell_size, edge), head_color)
    for segment in body[1:]:
        yield DrawRect(cell_rect(segment, cell_size, edge), SNAKE_COLOR)

    for a, b in zip(body, body[1:]):
        rect = connector_rect(a, b, cell_size, edge)
        if rect is not None:
            yield DrawRect(rect, SNAKE_COLOR)

    yield DrawRect(cell_rect(state.food, cell_size, edge), FOOD_COLOR)

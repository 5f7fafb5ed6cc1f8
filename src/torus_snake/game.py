# game.py
from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, List, Optional, Tuple
import logging

import numpy as np  # type: ignore

from .config import (
    GRID_W, GRID_H,
    UP, DOWN, LEFT, RIGHT, STILL,
    INITIAL_HEAD, INITIAL_FOOD,
    CFG,
)

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


class Direction(Enum):
    NORTH = UP
    SOUTH = DOWN
    EAST = RIGHT
    WEST = LEFT
    NONE = STILL

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class RunState(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


# ---------- Helpers ----------
def is_opposite(a: Direction, b: Direction) -> bool:
    """True for the forbidden pairs East/West and North/South. None has no opposite."""
    if a is Direction.NONE or b is Direction.NONE:
        return False
    return a.dx == -b.dx and a.dy == -b.dy

def wrap(pos: Position, width: int = GRID_W, height: int = GRID_H) -> Position:
    x, y = pos
    return ((x % width + width) % width, (y % height + height) % height)

def in_grid(pos: Position, width: int = GRID_W, height: int = GRID_H) -> bool:
    return 0 <= pos[0] < width and 0 <= pos[1] < height


# ---------- State ----------
@dataclass
class GameState:
    head: Position
    prev_head: Position
    direction: Direction
    pending: Direction
    tail: Deque[Position]          # nearest-to-head first
    growth: int                    # number of tail segments
    food: Position
    run_state: RunState = RunState.RUNNING
    width: int = GRID_W
    height: int = GRID_H
    rng: np.random.Generator = field(
        default_factory=lambda: np.random.default_rng(CFG.seed),
        repr=False, compare=False,
    )

    def __post_init__(self):
        for pos in (self.head, self.prev_head, self.food, *self.tail):
            assert in_grid(pos, self.width, self.height), f"position off the grid: {pos}"

def new_game_state(rng: Optional[np.random.Generator] = None) -> GameState:
    if rng is None:
        rng = np.random.default_rng(CFG.seed)
    logger.info("New game: head=%s food=%s", INITIAL_HEAD, INITIAL_FOOD)
    return GameState(
        head=INITIAL_HEAD,
        prev_head=INITIAL_HEAD,
        direction=Direction.NONE,
        pending=Direction.NONE,
        tail=deque(),
        growth=0,
        food=INITIAL_FOOD,
        run_state=RunState.RUNNING,
        rng=rng,
    )

def occupied_cells(state: GameState) -> List[Position]:
    return [state.head, *state.tail]

def spawn_food(state: GameState) -> Position:
    """
    Pick a uniformly random cell outside the tail, the previous head and the
    current head. If every cell is taken the food stays where it is.
    """
    blocked = np.zeros((state.height, state.width), dtype=bool)
    for x, y in (*state.tail, state.prev_head, state.head):
        blocked[y, x] = True

    free = np.flatnonzero(~blocked)
    if free.size == 0:
        logger.warning("Grid is full; food left at %s", state.food)
        return state.food

    idx = int(state.rng.choice(free))
    return (idx % state.width, idx // state.width)


# ---------- Tick steps ----------
def shift_tail(state: GameState) -> None:
    if state.growth > 0:
        state.tail.appendleft(state.head)
        state.tail.pop()

def arbitrate_direction(state: GameState) -> None:
    if not is_opposite(state.pending, state.direction):
        state.direction = state.pending

def move_head(state: GameState) -> None:
    hx, hy = state.head
    state.prev_head = state.head
    state.head = wrap((hx + state.direction.dx, hy + state.direction.dy), state.width, state.height)

def eat_food(state: GameState) -> bool:
    if state.head != state.food:
        return False
    state.food = spawn_food(state)
    state.growth += 1
    # grow into the cell just vacated, not under the new head
    state.tail.appendleft(state.prev_head)
    logger.info("Food eaten at %s; score=%d, next food at %s", state.head, state.growth, state.food)
    return True

def check_self_collision(state: GameState) -> bool:
    if state.head in state.tail:
        state.run_state = RunState.GAME_OVER
        logger.info("Game over at %s with score %d", state.head, state.growth)
        return True
    return False

def step_game(state: GameState) -> bool:
    """
    Advance the game by one tick.
    Only a running game moves; paused and finished games are left untouched.
    Returns True while the snake is alive, False once the game is over.
    """
    if state.run_state is not RunState.RUNNING:
        return state.run_state is not RunState.GAME_OVER

    shift_tail(state)
    arbitrate_direction(state)
    move_head(state)
    eat_food(state)
    check_self_collision(state)

    logger.debug("Tick: head=%s dir=%s len=%d", state.head, state.direction.name, state.growth)
    return state.run_state is RunState.RUNNING


# ---------- Run-state transitions ----------
def toggle_pause(state: GameState) -> None:
    if state.run_state is RunState.RUNNING:
        state.run_state = RunState.PAUSED
        logger.info("Paused")
    elif state.run_state is RunState.PAUSED:
        state.run_state = RunState.RUNNING
        logger.info("Resumed")

def reset_game(state: GameState) -> None:
    """Reinitialise in place, keeping the random generator so the next game differs."""
    if state.run_state is not RunState.GAME_OVER:
        return
    fresh = new_game_state(state.rng)
    state.head = fresh.head
    state.prev_head = fresh.prev_head
    state.direction = fresh.direction
    state.pending = fresh.pending
    state.tail = fresh.tail
    state.growth = fresh.growth
    state.food = fresh.food
    state.run_state = fresh.run_state
    logger.info("Game reset")

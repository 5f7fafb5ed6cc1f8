# controls.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .game import Direction, GameState, RunState, toggle_pause, reset_game


class Key(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    W = "w"
    A = "a"
    S = "s"
    D = "d"
    PAUSE = "pause"
    SPACE = "space"
    RESET = "reset"


class KeyAction(Enum):
    PRESS = "press"
    RELEASE = "release"


@dataclass(frozen=True)
class KeyEvent:
    key: Key
    action: KeyAction = KeyAction.PRESS


# ----- Commands -----
@dataclass(frozen=True)
class SetPendingDirection:
    direction: Direction

@dataclass(frozen=True)
class TogglePause:
    pass

@dataclass(frozen=True)
class Reset:
    pass

Command = Union[SetPendingDirection, TogglePause, Reset]


KEY_DIRECTIONS = {
    Key.UP: Direction.NORTH,    Key.W: Direction.NORTH,
    Key.DOWN: Direction.SOUTH,  Key.S: Direction.SOUTH,
    Key.LEFT: Direction.WEST,   Key.A: Direction.WEST,
    Key.RIGHT: Direction.EAST,  Key.D: Direction.EAST,
}
PAUSE_KEYS = {Key.PAUSE, Key.SPACE}
RESET_KEYS = {Key.RESET}

KEY_LABELS = {Key.PAUSE: "P", Key.SPACE: "Space", Key.RESET: "R"}


def key_hint(keys, verb: str) -> str:
    """Overlay line naming every key that triggers a command, e.g. "Press P or Space to resume"."""
    labels = sorted(KEY_LABELS[k] for k in keys)
    return f"Press {' or '.join(labels)} to {verb}"


def map_key_event(event: KeyEvent, run_state: RunState) -> Optional[Command]:
    """
    Translate a key press into a command the current run state accepts.

    - directions only while running
    - pause toggle while running or paused
    - reset only after game over
    Releases and anything else map to None.
    """
    if event.action is not KeyAction.PRESS:
        return None

    if event.key in KEY_DIRECTIONS:
        if run_state is RunState.RUNNING:
            return SetPendingDirection(KEY_DIRECTIONS[event.key])
        return None

    if event.key in PAUSE_KEYS:
        if run_state in (RunState.RUNNING, RunState.PAUSED):
            return TogglePause()
        return None

    if event.key in RESET_KEYS:
        if run_state is RunState.GAME_OVER:
            return Reset()
        return None

    return None


def apply_command(state: GameState, command: Command) -> None:
    if isinstance(command, SetPendingDirection):
        state.pending = command.direction
    elif isinstance(command, TogglePause):
        toggle_pause(state)
    elif isinstance(command, Reset):
        reset_game(state)
    else:
        raise TypeError(f"Unknown command: {command!r}")

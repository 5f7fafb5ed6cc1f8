# engine.py
"""Callback surface the host loop drives: input, tick and render."""
from __future__ import annotations
from typing import Iterator, Optional
import logging

import numpy as np  # type: ignore

from .clock import SimulationClock
from .config import CFG, Config
from .controls import KeyEvent, Reset, apply_command, map_key_event
from .game import GameState, RunState, new_game_state, step_game
from .render import DrawRect, project_frame

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Owns the single game state and its clock.

    The host calls, once per frame and in this order:
      on_input(event) for each key event,
      on_tick(dt) with the frame delta in seconds,
      on_render() to get the rectangles to draw.
    """

    def __init__(self, cfg: Optional[Config] = None):
        self.cfg = cfg or CFG
        self.rng = np.random.default_rng(self.cfg.seed)
        self.clock = SimulationClock(self.cfg.tick_interval)
        self._state: GameState = new_game_state(self.rng)

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def run_state(self) -> RunState:
        return self._state.run_state

    @property
    def score(self) -> int:
        return self._state.growth

    def on_input(self, event: KeyEvent) -> None:
        command = map_key_event(event, self._state.run_state)
        if command is None:
            return
        apply_command(self._state, command)
        if isinstance(command, Reset):
            self.clock.reset()

    def on_tick(self, dt: float) -> None:
        # a stopped game does not bank time, so resuming never fires a stale tick
        if self._state.run_state is not RunState.RUNNING:
            return
        if self.clock.advance(dt):
            step_game(self._state)

    def on_render(self) -> Iterator[DrawRect]:
        return project_frame(self._state)

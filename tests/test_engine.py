from torus_snake.config import Config, INITIAL_HEAD
from torus_snake.controls import Key, KeyAction, KeyEvent
from torus_snake.engine import GameEngine
from torus_snake.game import Direction, RunState
from torus_snake.render import DrawRect

CFG = Config(seed=5, move_every_ms=100)


def press(engine, key):
    engine.on_input(KeyEvent(key, KeyAction.PRESS))


def test_fresh_engine():
    engine = GameEngine(CFG)
    assert engine.run_state is RunState.RUNNING
    assert engine.score == 0
    assert engine.state.head == INITIAL_HEAD


def test_direction_applies_on_next_tick():
    engine = GameEngine(CFG)
    press(engine, Key.RIGHT)
    assert engine.state.pending is Direction.EAST
    assert engine.state.direction is Direction.NONE

    engine.on_tick(0.1)
    assert engine.state.direction is Direction.EAST
    assert engine.state.head == (INITIAL_HEAD[0] + 1, INITIAL_HEAD[1])


def test_ten_intervals_in_one_call_move_one_cell():
    engine = GameEngine(CFG)
    press(engine, Key.D)
    engine.on_tick(1.0)
    assert engine.state.head == (INITIAL_HEAD[0] + 1, INITIAL_HEAD[1])


def test_lag_spike_does_not_replay_ticks_on_later_frames():
    engine = GameEngine(CFG)
    press(engine, Key.RIGHT)
    engine.on_tick(1.0)
    for _ in range(9):
        engine.on_tick(0.0)
    assert engine.state.head == (INITIAL_HEAD[0] + 1, INITIAL_HEAD[1])


def test_short_frames_accumulate():
    engine = GameEngine(CFG)
    press(engine, Key.RIGHT)
    engine.on_tick(0.06)
    assert engine.state.head == INITIAL_HEAD
    engine.on_tick(0.06)
    assert engine.state.head == (INITIAL_HEAD[0] + 1, INITIAL_HEAD[1])


def test_release_does_nothing():
    engine = GameEngine(CFG)
    engine.on_input(KeyEvent(Key.RIGHT, KeyAction.RELEASE))
    assert engine.state.pending is Direction.NONE


def test_pause_freezes_time():
    engine = GameEngine(CFG)
    press(engine, Key.RIGHT)
    press(engine, Key.PAUSE)
    assert engine.run_state is RunState.PAUSED

    press(engine, Key.DOWN)  # ignored while paused
    engine.on_tick(5.0)
    assert engine.state.head == INITIAL_HEAD
    assert engine.clock.accumulator == 0.0

    press(engine, Key.PAUSE)
    engine.on_tick(0.05)
    assert engine.state.head == INITIAL_HEAD
    engine.on_tick(0.06)
    assert engine.state.direction is Direction.EAST


def test_reset_after_game_over_clears_everything():
    engine = GameEngine(CFG)
    engine.on_tick(0.05)
    engine.state.run_state = RunState.GAME_OVER

    press(engine, Key.RESET)
    assert engine.run_state is RunState.RUNNING
    assert engine.state.head == INITIAL_HEAD
    assert engine.state.direction is Direction.NONE
    assert engine.score == 0
    assert engine.clock.accumulator == 0.0


def test_reset_ignored_while_running():
    engine = GameEngine(CFG)
    press(engine, Key.RIGHT)
    engine.on_tick(0.1)
    press(engine, Key.RESET)
    assert engine.state.head != INITIAL_HEAD


def test_render_returns_draw_rects():
    engine = GameEngine(CFG)
    rects = list(engine.on_render())
    assert len(rects) == 2
    assert all(isinstance(r, DrawRect) for r in rects)

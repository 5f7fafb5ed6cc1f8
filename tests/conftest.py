from collections import deque

import numpy as np
import pytest

from torus_snake.game import Direction, GameState, RunState


def build_state(head, tail=(), direction=Direction.NONE, pending=None, food=(0, 0),
                width=32, height=24, seed=0):
    return GameState(
        head=head,
        prev_head=head,
        direction=direction,
        pending=direction if pending is None else pending,
        tail=deque(tail),
        growth=len(tail),
        food=food,
        run_state=RunState.RUNNING,
        width=width,
        height=height,
        rng=np.random.default_rng(seed),
    )


@pytest.fixture
def make_state():
    return build_state

from __future__ import annotations
from dataclasses import dataclass

# ----- Window & grid -----
WIDTH, HEIGHT = 640, 480
CELL_SIZE = 20
GRID_W, GRID_H = WIDTH // CELL_SIZE, HEIGHT // CELL_SIZE
EDGE_BUFFER = 2  # px inset from each cell boundary

# ----- Colors (RGBA) -----
BG         = (26, 26, 26, 255)
SNAKE_COLOR = (80, 200, 80, 255)
HEAD_COLOR  = (120, 230, 120, 255)
DEAD_COLOR  = (140, 140, 140, 255)
FOOD_COLOR  = (200, 70, 70, 255)
TEXT        = (220, 220, 230, 255)

# ----- Directions (dx, dy), y grows downward -----
UP, DOWN, LEFT, RIGHT, STILL = (0, -1), (0, 1), (-1, 0), (1, 0), (0, 0)

# ----- Start layout -----
INITIAL_HEAD = (GRID_W // 4, GRID_H // 2)
INITIAL_FOOD = (3 * GRID_W // 4, GRID_H // 2)

# ----- Tunables -----
@dataclass
class Config:
    seed: int | None = 0
    move_every_ms: int = 120
    fps: int = 60

    @property
    def tick_interval(self) -> float:
        return self.move_every_ms / 1000.0

CFG = Config(seed=0)

# main.py
from __future__ import annotations
import argparse
import logging
from typing import Optional, Sequence

import pygame  # type: ignore

from .config import WIDTH, HEIGHT, BG, TEXT, CFG, Config
from .controls import Key, KeyAction, KeyEvent, PAUSE_KEYS, RESET_KEYS, key_hint
from .engine import GameEngine
from .game import RunState

logger = logging.getLogger(__name__)

KEY_BINDINGS = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_p: Key.PAUSE,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_r: Key.RESET,
}


# ---------- Input / Draw ----------
def handle_input(engine: GameEngine) -> bool:
    """Forward key events to the engine. Return False to quit."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            continue
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return False
        key = KEY_BINDINGS.get(event.key)
        if key is None:
            continue
        action = KeyAction.PRESS if event.type == pygame.KEYDOWN else KeyAction.RELEASE
        engine.on_input(KeyEvent(key, action))
    return True

def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, lines: Sequence[str]) -> None:
    # Dim with translucent overlay
    overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))
    screen.blit(overlay, (0, 0))

    for i, line in enumerate(lines):
        txt = font.render(line, True, TEXT)
        screen.blit(txt, txt.get_rect(center=(WIDTH // 2, HEIGHT // 2 - 16 + i * 30)))

def draw_frame(screen: pygame.Surface, font: pygame.font.Font, engine: GameEngine) -> None:
    screen.fill(BG)
    for item in engine.on_render():
        pygame.draw.rect(screen, item.color, pygame.Rect(*item.rect))

    txt = font.render(f"Score: {engine.score}", True, TEXT)
    screen.blit(txt, (8, 6))

    if engine.run_state is RunState.PAUSED:
        draw_overlay(screen, font, ["PAUSED", key_hint(PAUSE_KEYS, "resume")])
    elif engine.run_state is RunState.GAME_OVER:
        draw_overlay(screen, font, ["GAME OVER", key_hint(RESET_KEYS, "restart"), f"Score: {engine.score}"])


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Snake on a wrap-around grid.")
    parser.add_argument("--seed", type=int, default=CFG.seed,
                        help="seed for food placement (default: %(default)s)")
    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)

def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    cfg = Config(seed=args.seed, move_every_ms=CFG.move_every_ms, fps=CFG.fps)
    engine = GameEngine(cfg)

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Torus Snake")
    clock = pygame.time.Clock()
    logger.info("Window %dx%d, tick every %d ms, seed=%s", WIDTH, HEIGHT, cfg.move_every_ms, cfg.seed)

    running = True
    while running:
        # 1) input
        running = handle_input(engine)
        if not running:
            break

        # 2) update
        engine.on_tick(clock.tick(cfg.fps) / 1000.0)

        # 3) render
        draw_frame(screen, font, engine)
        pygame.display.flip()

    pygame.quit()

if __name__ == "__main__":
    main()

from __future__ import annotations

import logging
import random

import pygame

from . import config
from .engine import GameEngine
from .keys import QUIT_KEYS, from_pygame
from .render import draw_state
from .timers import Scheduler

logger = logging.getLogger(__name__)


def make_fonts(cell: int) -> dict[str, pygame.font.Font]:
    return {
        "cell": pygame.font.SysFont("monospace", max(8, cell + 2), bold=True),
        "small": pygame.font.SysFont("sans", 18),
        "big": pygame.font.SysFont("sans", 40),
    }


def main(seed: int | None = None, cell: int = config.CELL_SIZE) -> int:
    pygame.init()
    screen = pygame.display.set_mode((config.COLS * cell, config.ROWS * cell + config.HUD_HEIGHT))
    pygame.display.set_caption("Nibbles")
    clock = pygame.time.Clock()
    fonts = make_fonts(cell)

    scheduler = Scheduler(pygame.time.get_ticks)
    engine = GameEngine(scheduler, random.Random(seed))
    logger.info("new game, seed=%s", seed)

    running = True
    last_step = pygame.time.get_ticks()
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key in QUIT_KEYS:
                running = False
            elif event.type == pygame.KEYDOWN:
                key = from_pygame(event.key)
                if key is not None:
                    engine.handle_input(key)

        now = pygame.time.get_ticks()
        scheduler.run_due(now)
        # At most one step per frame; a late frame does not replay missed ticks.
        if now - last_step >= engine.state.speed:
            engine.step()
            last_step = now

        draw_state(screen, engine.snapshot(), cell, fonts)
        clock.tick(config.FPS)

    pygame.quit()
    return engine.state.snake.score

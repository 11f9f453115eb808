from __future__ import annotations

import pygame

from .state import Key

KEY_MAP = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_w: Key.UP,
    pygame.K_s: Key.DOWN,
    pygame.K_a: Key.LEFT,
    pygame.K_d: Key.RIGHT,
    pygame.K_p: Key.PAUSE,
    pygame.K_r: Key.RESTART,
}

QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


def from_pygame(key: int) -> Key | None:
    return KEY_MAP.get(key)

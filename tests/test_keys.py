import pygame

from nibbles.keys import QUIT_KEYS, from_pygame
from nibbles.state import Key


def test_arrows_and_wasd_map_to_directions():
    assert from_pygame(pygame.K_UP) is Key.UP
    assert from_pygame(pygame.K_DOWN) is Key.DOWN
    assert from_pygame(pygame.K_LEFT) is Key.LEFT
    assert from_pygame(pygame.K_RIGHT) is Key.RIGHT
    assert from_pygame(pygame.K_w) is Key.UP
    assert from_pygame(pygame.K_d) is Key.RIGHT


def test_pause_and_restart_keys():
    assert from_pygame(pygame.K_p) is Key.PAUSE
    assert from_pygame(pygame.K_r) is Key.RESTART


def test_unmapped_key_is_none():
    assert from_pygame(pygame.K_F1) is None
    assert pygame.K_ESCAPE in QUIT_KEYS

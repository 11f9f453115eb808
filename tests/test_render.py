import dataclasses
import random

import pygame
import pytest

from nibbles.engine import GameEngine
from nibbles.render import draw_overlay
from nibbles.timers import Scheduler


@pytest.fixture
def fonts():
    pygame.font.init()
    yield {"big": pygame.font.Font(None, 40), "small": pygame.font.Font(None, 18)}
    pygame.font.quit()


def overlay_pixels(snap, fonts, cell=4):
    screen = pygame.Surface((snap.cols * cell, snap.rows * cell))
    screen.fill((0, 0, 0))
    draw_overlay(screen, snap, cell, fonts)
    return pygame.image.tostring(screen, "RGB")


def test_death_pause_draws_a_cue(fonts):
    snap = GameEngine(Scheduler(lambda: 0), random.Random(2)).snapshot()
    blank = overlay_pixels(snap, fonts)
    dead = overlay_pixels(dataclasses.replace(snap, alive=False, lives=3), fonts)
    assert dead != blank

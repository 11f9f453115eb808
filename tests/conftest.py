import random

import pytest

from nibbles.engine import GameEngine
from nibbles.state import Position
from nibbles.timers import Scheduler


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    return Scheduler(clock)


@pytest.fixture
def engine(scheduler):
    eng = GameEngine(scheduler, random.Random(1234))
    # Park the target away from the starting row so plain moves stay plain.
    eng.state.number.position = Position(40, 70)
    return eng

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import NamedTuple

from . import config


class Position(NamedTuple):
    row: int
    col: int


def add_vectors(a: tuple[int, int], b: tuple[int, int]) -> Position:
    return Position(a[0] + b[0], a[1] + b[1])


class Direction(enum.Enum):
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def opposite(self) -> Direction:
        drow, dcol = self.value
        return Direction((-drow, -dcol))


class Phase(enum.Enum):
    ALIVE = "alive"
    DEAD_PENDING_RESPAWN = "dead_pending_respawn"
    GAME_OVER = "game_over"


START = Position(config.START_ROW, config.START_COL)


def level_walls() -> frozenset[Position]:
    return frozenset(
        Position(config.WALL_ROW, col)
        for col in range(config.WALL_COL_START, config.WALL_COL_END + 1)
    )


def on_border(pos: Position) -> bool:
    return pos.row <= 1 or pos.row >= config.ROWS or pos.col <= 1 or pos.col >= config.COLS


@dataclass
class Snake:
    # body is oldest first; the last element is the head.
    body: list[Position] = field(default_factory=lambda: [START])
    direction: Direction = Direction.RIGHT
    length: int = config.INIT_LENGTH
    lives: int = config.INIT_LIVES
    score: int = 0
    alive: bool = True

    @property
    def head(self) -> Position:
        return self.body[-1]


@dataclass
class Number:
    position: Position = Position(0, 0)
    value: int = 1


@dataclass
class GameState:
    snake: Snake = field(default_factory=Snake)
    number: Number = field(default_factory=Number)
    walls: frozenset[Position] = frozenset()
    speed: int = config.INIT_SPEED
    paused: bool = False
    game_over: bool = False
    level: int = 1


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of one tick, handed to the renderer."""

    body: tuple[Position, ...]
    score: int
    lives: int
    number: Position
    number_value: int
    walls: frozenset[Position]
    rows: int
    cols: int
    paused: bool
    game_over: bool
    alive: bool
    level: int


class Key(enum.Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAUSE = "pause"
    RESTART = "restart"


DIRECTION_KEYS = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}

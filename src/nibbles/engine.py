from __future__ import annotations

import enum
import logging
import random

import numpy as np

from . import config
from .state import (
    DIRECTION_KEYS,
    START,
    GameState,
    Key,
    Phase,
    Position,
    Snapshot,
    add_vectors,
    level_walls,
    on_border,
)
from .timers import Scheduler, TimerHandle

logger = logging.getLogger(__name__)


class NibblesError(Exception):
    pass


class ArenaFullError(NibblesError):
    """No free cell is left in the spawn region for a new target."""


class Outcome(enum.Enum):
    IDLE = "idle"
    MOVE = "move"
    CAPTURE = "capture"
    LEVEL_UP = "level_up"
    BORDER = "border"
    WALL = "wall"
    SELF = "self"


class GameEngine:
    """Owns one session's state and advances it one tick at a time.

    The host drives step() on a fixed cadence (state.speed ms), forwards
    symbolic keys to handle_input() between steps, and pumps the scheduler
    so the deferred respawn can fire. Respawns are tagged with a
    generation number; reset() bumps it, so a respawn that was overtaken
    by a restart (or by another reset) is dropped instead of applied twice.
    """

    def __init__(self, scheduler: Scheduler, rng: random.Random | None = None):
        self.scheduler = scheduler
        self.rng = rng if rng is not None else random.Random()
        self._generation = 0
        self._respawn_handle: TimerHandle | None = None
        self.state = GameState()
        self.reset()

    @property
    def phase(self) -> Phase:
        if self.state.game_over:
            return Phase.GAME_OVER
        if not self.state.snake.alive:
            return Phase.DEAD_PENDING_RESPAWN
        return Phase.ALIVE

    @property
    def respawn_pending(self) -> bool:
        return self._respawn_handle is not None and not self._respawn_handle.cancelled

    def reset(self) -> GameState:
        self._generation += 1
        self._cancel_respawn()
        self.state = GameState()
        self.place_number()
        return self.state

    # --- Targets ---

    def place_number(self) -> Position:
        s = self.state
        occupied = set(s.snake.body) | s.walls
        if s.number.value == config.NUMBER_MAX - 1:
            # The level-up capture cell must not end up under the new wall.
            occupied |= level_walls()
        for _ in range(config.MAX_PLACEMENT_ATTEMPTS):
            pos = Position(
                self.rng.randint(config.SPAWN_ROW_MIN, config.SPAWN_ROW_MAX),
                self.rng.randint(config.SPAWN_COL_MIN, config.SPAWN_COL_MAX),
            )
            if pos not in occupied:
                s.number.position = pos
                return pos

        free = self._free_cells(occupied)
        if len(free) == 0:
            raise ArenaFullError("no free cell left for a target")
        row, col = free[self.rng.randrange(len(free))]
        s.number.position = Position(int(row), int(col))
        return s.number.position

    def _free_cells(self, occupied: set[Position]) -> np.ndarray:
        # Index the grid 1-based so argwhere yields (row, col) directly.
        free = np.zeros((config.ROWS + 1, config.COLS + 1), dtype=bool)
        free[
            config.SPAWN_ROW_MIN : config.SPAWN_ROW_MAX + 1,
            config.SPAWN_COL_MIN : config.SPAWN_COL_MAX + 1,
        ] = True
        for row, col in occupied:
            if 0 <= row <= config.ROWS and 0 <= col <= config.COLS:
                free[row, col] = False
        return np.argwhere(free)

    # --- Tick ---

    def step(self) -> Outcome:
        s = self.state
        snake = s.snake
        if not snake.alive or s.paused or s.game_over:
            return Outcome.IDLE

        new_head = add_vectors(snake.head, snake.direction.value)
        if on_border(new_head):
            return self._collide(Outcome.BORDER)
        if new_head in s.walls:
            return self._collide(Outcome.WALL)
        if new_head in snake.body:
            return self._collide(Outcome.SELF)

        outcome = Outcome.MOVE
        if new_head == s.number.position:
            outcome = self._capture(new_head)

        snake.body.append(new_head)
        while len(snake.body) > snake.length:
            del snake.body[0]

        if outcome is not Outcome.MOVE:
            self.place_number()
        return outcome

    def _capture(self, new_head: Position) -> Outcome:
        s = self.state
        snake = s.snake
        value = s.number.value
        snake.length = min(snake.length + value * config.GROWTH_PER_POINT, config.MAX_SNAKE_LENGTH)
        snake.score += value
        s.number.value += 1
        logger.debug("captured %d at %s, length=%d score=%d", value, new_head, snake.length, snake.score)

        if s.number.value < config.NUMBER_MAX:
            return Outcome.CAPTURE

        s.walls = level_walls()
        s.number.value = 1
        s.level += 1
        snake.length = config.INIT_LENGTH
        snake.body = [START]
        logger.debug("level up to %d, score=%d lives=%d", s.level, snake.score, snake.lives)
        return Outcome.LEVEL_UP

    # --- Death, respawn, game over ---

    def _collide(self, outcome: Outcome) -> Outcome:
        s = self.state
        snake = s.snake
        snake.alive = False
        snake.lives -= 1
        if snake.lives > 0:
            logger.info("hit %s at %s, %d lives left", outcome.value, snake.head, snake.lives)
            self._schedule_respawn()
        else:
            logger.info("hit %s, game over with score %d", outcome.value, snake.score)
            s.game_over = True
            self._cancel_respawn()
        return outcome

    def _schedule_respawn(self) -> None:
        self._cancel_respawn()
        generation = self._generation
        self._respawn_handle = self.scheduler.call_later(
            config.RESPAWN_DELAY_MS, lambda: self._respawn(generation)
        )

    def _cancel_respawn(self) -> None:
        if self._respawn_handle is not None:
            self._respawn_handle.cancel()
            self._respawn_handle = None

    def _respawn(self, generation: int) -> None:
        if generation != self._generation or self.state.game_over:
            logger.debug("dropping stale respawn (generation %d, now %d)", generation, self._generation)
            return
        self._respawn_handle = None
        lives = self.state.snake.lives
        self.reset()
        self.state.snake.lives = lives
        logger.info("respawned with %d lives", lives)

    # --- Input ---

    def handle_input(self, key: Key) -> bool:
        s = self.state
        if s.game_over and key is Key.RESTART:
            logger.info("restart")
            self.reset()
            return True
        if key is Key.PAUSE:
            s.paused = not s.paused
            return True
        if not s.snake.alive:
            return False

        direction = DIRECTION_KEYS.get(key)
        if direction is None:
            return False
        if direction is s.snake.direction.opposite:
            return False
        s.snake.direction = direction
        return True

    # --- Read-only view ---

    def snapshot(self) -> Snapshot:
        s = self.state
        return Snapshot(
            body=tuple(s.snake.body),
            score=s.snake.score,
            lives=s.snake.lives,
            number=s.number.position,
            number_value=s.number.value,
            walls=s.walls,
            rows=config.ROWS,
            cols=config.COLS,
            paused=s.paused,
            game_over=s.game_over,
            alive=s.snake.alive,
            level=s.level,
        )

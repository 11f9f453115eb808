from .engine import ArenaFullError, GameEngine, NibblesError, Outcome
from .state import Direction, GameState, Key, Phase, Position, Snapshot
from .timers import Scheduler, TimerHandle

__all__ = [
    "ArenaFullError",
    "Direction",
    "GameEngine",
    "GameState",
    "Key",
    "NibblesError",
    "Outcome",
    "Phase",
    "Position",
    "Scheduler",
    "Snapshot",
    "TimerHandle",
]

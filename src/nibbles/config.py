from __future__ import annotations

# Arena, in cells. Rows and cols are 1-indexed; row 1, row ROWS,
# col 1 and col COLS form the border ring.
ROWS = 50
COLS = 80
CELL_SIZE = 10
HUD_HEIGHT = 24

WIDTH = COLS * CELL_SIZE
HEIGHT = ROWS * CELL_SIZE + HUD_HEIGHT
FPS = 60

MAX_SNAKE_LENGTH = 1000
INIT_LIVES = 5
INIT_SPEED = 80  # ms per step, lower is faster
INIT_LENGTH = 2
START_ROW, START_COL = 25, 40
RESPAWN_DELAY_MS = 1000

GROWTH_PER_POINT = 4
NUMBER_MAX = 10  # value wraps to 1 (and levels up) when it reaches this

# Level wall: a horizontal segment, cols inclusive.
WALL_ROW = 25
WALL_COL_START = 20
WALL_COL_END = 60

# Targets spawn away from the border.
SPAWN_ROW_MIN, SPAWN_ROW_MAX = 3, ROWS - 2
SPAWN_COL_MIN, SPAWN_COL_MAX = 2, COLS - 1
MAX_PLACEMENT_ATTEMPTS = 1000

SNAKE = (255, 215, 0)
WALL = (136, 136, 136)
BG = (17, 17, 17)
NUMBER = (0, 255, 0)
TEXT = (255, 255, 255)

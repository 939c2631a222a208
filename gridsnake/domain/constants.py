"""
Game constants for gridsnake.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Unit vectors in screen coordinates: row 0 is the top of the board
DIRECTION_VECTORS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITES = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Wall policies
WRAP = "wrap"
SOLID = "solid"
WALL_POLICIES = {WRAP, SOLID}

# Session states
IDLE = "idle"
RUNNING = "running"
PAUSED = "paused"
GAME_OVER = "game_over"

# Death reasons
DEATH_WALL = "wall"
DEATH_SELF = "self"
DEATH_BOARD_FULL = "board_full"

# Game settings
GRID_SIZE = 20
START_TICK_MS = 160
MIN_TICK_MS = 55
TICK_STEP_MS = 5
START_DIRECTION = RIGHT
FOOD_PLACEMENT_ATTEMPTS = 2000

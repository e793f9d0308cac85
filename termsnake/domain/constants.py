"""
Game constants for termsnake.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Unit vectors as (d_row, d_col); row 0 is the top of the field
DELTAS = {
    UP: (-1, 0),
    DOWN: (1, 0),
    LEFT: (0, -1),
    RIGHT: (0, 1),
}

OPPOSITE = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Non-direction input
QUIT = "QUIT"

# Cell states
EMPTY = "EMPTY"
BODY = "BODY"
FOOD = "FOOD"
CELL_STATES = {EMPTY, BODY, FOOD}

# Session status
RUNNING = "running"
LOST = "lost"
QUIT_REQUESTED = "quit"

# Reasons for a lost game
SELF_COLLISION = "self_collision"
BOARD_FULL = "board_full"

# Game settings
ROWS = 30
COLS = 120
STARTING_SIZE = 3
FOOD_REWARD = 7
TICK_MS = 30

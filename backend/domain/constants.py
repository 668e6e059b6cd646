"""
Game constants for SnakeSim.
"""

from typing import Tuple

Cell = Tuple[int, int]

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Unit displacement per heading; y grows upwards
DELTAS = {
    UP:    (0, 1),
    DOWN:  (0, -1),
    LEFT:  (-1, 0),
    RIGHT: (1, 0),
}

# Board settings
BOARD_WIDTH = 10
BOARD_HEIGHT = 10
FOOD_SPAWN_RANGE = 10  # respawn draws from [0, 10) on both axes, whatever the board size

# Timing / drawing
TICK_PERIOD = 0.5  # seconds
CELL_SIZE = 10  # pixels

# Tile kinds used when drawing the board as text
VOID = "VOID"
BODY = "BODY"
HEAD = "HEAD"
TAIL = "TAIL"
APPLE = "APPLE"
TILE_CHARS = {
    VOID: ".",
    BODY: "T",
    HEAD: "H",
    TAIL: "t",
    APPLE: "A",
}


def apply_heading(heading: str, cell: Cell) -> Cell:
    """
    Return the cell one step away from `cell` in `heading`.

    No bounds check is made; coordinates may leave the board or go negative.
    """
    dx, dy = DELTAS[heading]
    x, y = cell
    return (x + dx, y + dy)

"""
Board dimensions and coordinate validity.
"""

from .constants import BOARD_WIDTH, BOARD_HEIGHT, Cell


class Grid:
    """
    A fixed-size board.

    Attributes:
        width, height: board dimensions in cells
    """

    def __init__(self, width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT):
        if width <= 0 or height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}.")
        self.width = width
        self.height = height

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def start_cell(self) -> Cell:
        """Where the snake's head starts: one right of the centre."""
        return (self.width // 2 + 1, self.height // 2)

    def food_start_cell(self) -> Cell:
        """Where the first food item is placed."""
        return (self.width // 2 + 2, self.height // 2 + 1)

    def __repr__(self):
        return f"<Grid {self.width}x{self.height}>"

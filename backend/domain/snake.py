"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List

from .constants import Cell


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        growth_credit: number of upcoming steps that keep the tail in place
    """

    def __init__(self, positions: List[Cell]):
        if not positions:
            raise ValueError("A snake needs at least one cell.")
        self.positions = deque(positions)
        self.growth_credit = 0

    @property
    def head(self) -> Cell:
        """Return the head position (first element)."""
        return self.positions[0]

    def __len__(self):
        return len(self.positions)

    def __repr__(self):
        return f"<Snake head={self.head} length={len(self.positions)} credit={self.growth_credit}>"

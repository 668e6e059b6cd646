"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import Dict, List, Optional

from .constants import VOID, BODY, HEAD, TAIL, APPLE, TILE_CHARS, Cell


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick_number: how many steps have run (0-based)
        snake_positions: list of (x, y), head first
        food: list of (x, y) positions of all food items, in creation order
        heading: the heading the next step will use
        growth_credit: pending tail-keeping steps
        width, height: board dimensions
    """

    def __init__(
        self,
        tick_number: int,
        snake_positions: List[Cell],
        food: List[Cell],
        heading: str,
        growth_credit: int,
        width: int,
        height: int,
    ):
        self.tick_number = tick_number
        self.snake_positions = snake_positions
        self.food = food
        self.heading = heading
        self.growth_credit = growth_credit
        self.width = width
        self.height = height

    def tiles(self) -> Dict[Cell, str]:
        """
        Map each on-board cell that is not empty to its tile kind.
        Snake cells are drawn over food; the head wins over the rest of the body.
        """
        tiles: Dict[Cell, str] = {}
        for cell in self.food:
            tiles[cell] = APPLE

        last = len(self.snake_positions) - 1
        # Draw tail-first so the head ends up on top when the snake overlaps itself
        for idx in range(last, -1, -1):
            if idx == 0:
                kind = HEAD
            elif idx == last:
                kind = TAIL
            else:
                kind = BODY
            tiles[self.snake_positions[idx]] = kind

        return {
            (x, y): kind for (x, y), kind in tiles.items()
            if 0 <= x < self.width and 0 <= y < self.height
        }

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        A = food
        H = snake head
        T = snake body
        t = snake tail
        (0,0) is at bottom left with x-axis labels at the bottom.
        """
        tiles = self.tiles()

        result = []
        # Print rows in reverse order (bottom to top)
        for y in range(self.height - 1, -1, -1):
            row = [TILE_CHARS[tiles.get((x, y), VOID)] for x in range(self.width)]
            result.append(f"{y:2d} {' '.join(row)}")

        # Add x-axis labels at the bottom
        result.append("   " + " ".join(str(i) for i in range(self.width)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, object]:
        return {
            "tick_number": self.tick_number,
            "snake_positions": [list(c) for c in self.snake_positions],
            "food": [list(c) for c in self.food],
            "heading": self.heading,
            "growth_credit": self.growth_credit,
            "width": self.width,
            "height": self.height,
        }

    def head(self) -> Optional[Cell]:
        return self.snake_positions[0] if self.snake_positions else None

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, food={self.food}, "
            f"length={len(self.snake_positions)}, heading={self.heading}>"
        )

"""
Movement, growth and food collision for the snake.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .constants import Cell, apply_heading
from .grid import Grid
from .snake import Snake

logger = logging.getLogger(__name__)

IDLE = "IDLE"
ADVANCING = "ADVANCING"


@dataclass(frozen=True)
class StepResult:
    """
    Outcome of one step.

    Attributes:
        head: the new head cell
        consumed_food_id: id of the food item eaten this step, if any
        grew: True if the tail was kept (growth credit spent)
        length: chain length after the step
    """
    head: Cell
    consumed_food_id: Optional[int]
    grew: bool
    length: int

    @property
    def consumed(self) -> bool:
        return self.consumed_food_id is not None


class SnakeEngine:
    """
    Owns the snake and advances it one cell per step.

    Walls and self-overlap are not collisions: the snake may leave the board
    or run over itself. Leaving the board is logged once per excursion.
    """

    def __init__(self, grid: Grid, snake: Optional[Snake] = None):
        self.grid = grid
        self.snake = snake if snake is not None else Snake([grid.start_cell()])
        self.state = IDLE
        self._off_board = not grid.in_bounds(self.snake.head)

    @property
    def head(self) -> Cell:
        return self.snake.head

    @property
    def length(self) -> int:
        return len(self.snake)

    @property
    def growth_credit(self) -> int:
        return self.snake.growth_credit

    def cells(self) -> List[Cell]:
        return list(self.snake.positions)

    def step(self, heading: str, food_positions: Iterable[Tuple[int, Cell]]) -> StepResult:
        """
        Advance the snake one cell in `heading`.

        Args:
            heading: one of UP, DOWN, LEFT, RIGHT
            food_positions: (food_id, cell) pairs, in creation order

        Returns:
            StepResult describing the move and any food eaten
        """
        self.state = ADVANCING
        try:
            snake = self.snake
            new_head = apply_heading(heading, snake.head)
            snake.positions.appendleft(new_head)

            consumed_food_id = None
            for food_id, cell in food_positions:
                if cell == new_head:
                    consumed_food_id = food_id
                    snake.growth_credit += 1
                    logger.debug(f"Head reached food {food_id} at {cell}")
                    break

            if snake.growth_credit > 0:
                snake.growth_credit -= 1
                grew = True
            else:
                snake.positions.pop()
                grew = False

            self._track_bounds(new_head)
            return StepResult(
                head=new_head,
                consumed_food_id=consumed_food_id,
                grew=grew,
                length=len(snake),
            )
        finally:
            self.state = IDLE

    def _track_bounds(self, head: Cell) -> None:
        on_board = self.grid.in_bounds(head)
        if not on_board and not self._off_board:
            logger.warning(f"Snake head left the board at {head}")
        self._off_board = not on_board

    def __repr__(self):
        return f"<SnakeEngine state={self.state} snake={self.snake!r}>"

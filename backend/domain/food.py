"""
Food items and their respawn.
"""

import itertools
import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Tuple

from .constants import FOOD_SPAWN_RANGE, Cell
from .grid import Grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FoodItem:
    """An edible cell. `food_id` tells apart items that share a cell."""
    food_id: int
    cell: Cell


class FoodSpawner:
    """
    Owns the active food items.

    Items are kept in creation order. When one is eaten it is replaced by a
    new item (fresh id) on a random cell drawn from the module-level random
    source. The new cell is not checked against the snake or other food.
    """

    def __init__(self, grid: Grid):
        self.grid = grid
        self._items: Dict[int, FoodItem] = {}
        self._ids = itertools.count(1)
        self._started = False

    @property
    def items(self) -> List[FoodItem]:
        return list(self._items.values())

    def positions(self) -> List[Tuple[int, Cell]]:
        """Snapshot of (food_id, cell) pairs in creation order."""
        return [(item.food_id, item.cell) for item in self._items.values()]

    def spawn_initial(self) -> FoodItem:
        if self._started:
            raise RuntimeError("Initial food has already been spawned.")
        self._started = True
        return self._spawn(self.grid.food_start_cell())

    def on_consumed(self, food_id: int) -> FoodItem:
        """
        Retire the eaten item and spawn its replacement.

        Raises:
            KeyError: if no active item has this id
        """
        if food_id not in self._items:
            raise KeyError(f"No active food item with id {food_id}.")
        eaten = self._items.pop(food_id)
        logger.debug(f"Food {eaten.food_id} at {eaten.cell} eaten")

        x = random.randint(0, FOOD_SPAWN_RANGE - 1)
        y = random.randint(0, FOOD_SPAWN_RANGE - 1)
        return self._spawn((x, y))

    def _spawn(self, cell: Cell) -> FoodItem:
        item = FoodItem(food_id=next(self._ids), cell=cell)
        self._items[item.food_id] = item
        logger.info(f"Spawned food {item.food_id} at {item.cell}")
        return item

    def __len__(self):
        return len(self._items)

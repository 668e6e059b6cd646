"""
SnakeGame session: wires the clock, heading, engine and food together and
runs the per-frame update.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

from domain.clock import SimulationClock
from domain.constants import TICK_PERIOD
from domain.direction import DirectionController
from domain.engine import SnakeEngine, StepResult
from domain.food import FoodSpawner
from domain.game_state import GameState
from domain.grid import Grid

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    Manages:
      - Board (Grid)
      - Tick clock
      - Heading
      - The snake (via SnakeEngine)
      - Food (via FoodSpawner)
      - Optional per-tick history for replay
    """

    def __init__(
        self,
        grid: Optional[Grid] = None,
        tick_period: float = TICK_PERIOD,
        record_history: bool = False,
    ):
        self.grid = grid if grid is not None else Grid()
        self.clock = SimulationClock(tick_period)
        self.direction = DirectionController()
        self.engine = SnakeEngine(self.grid)
        self.food = FoodSpawner(self.grid)
        self.food.spawn_initial()

        self.tick_number = 0
        self.record_history = record_history
        self.history: List[GameState] = []
        if self.record_history:
            self.record_state()

        logger.info(
            f"New game on {self.grid.width}x{self.grid.height} board, "
            f"snake at {self.engine.head}, tick every {tick_period}s"
        )

    def update(self, elapsed: float) -> List[StepResult]:
        """
        Run one frame: advance the clock and execute one step per tick it
        hands out. Rendering should read get_current_state() afterwards.

        Args:
            elapsed: seconds since the previous frame

        Returns:
            the StepResults of the ticks that fired this frame, in order
        """
        self.clock.advance(elapsed)
        pending = self.clock.pending_ticks
        if pending > 1:
            logger.warning(f"Frame of {elapsed:.3f}s spans {pending} ticks; catching up")
        results = []
        while self.clock.tick_ready():
            results.append(self.tick())
        return results

    def tick(self) -> StepResult:
        """Execute exactly one step, regardless of the clock."""
        heading = self.direction.current_heading
        result = self.engine.step(heading, self.food.positions())
        if result.consumed:
            self.food.on_consumed(result.consumed_food_id)

        self.tick_number += 1
        logger.debug(
            f"Tick {self.tick_number}: {heading} -> head {result.head}, "
            f"length {result.length}, ate {result.consumed_food_id}"
        )
        if self.record_history:
            self.record_state()
        return result

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick_number=self.tick_number,
            snake_positions=self.engine.cells(),
            food=[cell for _, cell in self.food.positions()],
            heading=self.direction.current_heading,
            growth_credit=self.engine.growth_credit,
            width=self.grid.width,
            height=self.grid.height,
        )

    def record_state(self):
        self.history.append(self.get_current_state())

    def serialize_history(self) -> List[Dict[str, Any]]:
        """
        Convert the recorded GameState snapshots to a JSON-serializable list of dicts.
        """
        return [state.to_dict() for state in self.history]

    def save_history_to_json(self, filename: str) -> str:
        directory = os.path.dirname(filename)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(filename, "w") as f:
            json.dump({"ticks": self.tick_number, "rounds": self.serialize_history()}, f, indent=2)
        logger.info(f"Saved {len(self.history)} snapshots to {filename}")
        return filename

    def print_board(self):
        """
        Prints a visual representation of the current board state.
        """
        print("\n" + self.get_current_state().print_board() + "\n")

    def __repr__(self):
        return f"<SnakeGame tick={self.tick_number} engine={self.engine!r}>"

"""
Domain entities for the SnakeSim engine.

This module contains the core simulation entities that are independent of
I/O concerns (drawing, key capture, video encoding).
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, apply_heading
from .grid import Grid
from .clock import SimulationClock
from .direction import DirectionController
from .snake import Snake
from .food import FoodItem, FoodSpawner
from .engine import SnakeEngine, StepResult
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'apply_heading',
    'Grid',
    'SimulationClock',
    'DirectionController',
    'Snake',
    'FoodItem',
    'FoodSpawner',
    'SnakeEngine',
    'StepResult',
    'GameState',
]

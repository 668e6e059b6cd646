"""
Player implementations for SnakeSim.

Players drive the heading in headless runs, where no keyboard is attached.
"""

from .base import Player
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer

__all__ = [
    'Player',
    'RandomPlayer',
    'ScriptedPlayer',
]

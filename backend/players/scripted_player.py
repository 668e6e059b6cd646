"""
Scripted player - replays a fixed sequence of headings.
"""

from typing import List

from domain.constants import VALID_MOVES
from domain.game_state import GameState
from .base import Player


class ScriptedPlayer(Player):
    """
    Returns the given moves in order, then keeps repeating the last one.
    """

    def __init__(self, moves: List[str]):
        if not moves:
            raise ValueError("ScriptedPlayer needs at least one move.")
        unknown = [m for m in moves if m not in VALID_MOVES]
        if unknown:
            raise ValueError(f"Unknown moves in script: {unknown}")
        self.moves = list(moves)
        self._index = 0

    def get_move(self, game_state: GameState) -> str:
        move = self.moves[min(self._index, len(self.moves) - 1)]
        self._index += 1
        return move

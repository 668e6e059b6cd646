"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List

from domain.constants import VALID_MOVES, apply_heading
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    Picks a random heading that keeps the head on the board and off its own
    body. The engine itself does not punish either, so this only keeps
    recorded runs on screen.
    """

    def get_move(self, game_state: GameState) -> str:
        snake_positions = game_state.snake_positions
        head = snake_positions[0]

        valid_moves: List[str] = []
        for move in sorted(VALID_MOVES):
            new_x, new_y = apply_heading(move, head)
            # Check wall collisions
            if (new_x < 0 or new_x >= game_state.width or
                new_y < 0 or new_y >= game_state.height):
                continue

            # Check self collisions (excluding tail which will move)
            if (new_x, new_y) in snake_positions[:-1]:
                continue

            valid_moves.append(move)

        # Nowhere safe to go; any move will do
        if not valid_moves:
            return random.choice(sorted(VALID_MOVES))

        return random.choice(valid_moves)

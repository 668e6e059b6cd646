"""
Base player interface for the game engine.
"""

from domain.game_state import GameState


class Player:
    """
    Base class/interface for headless input.

    A player stands in for the keyboard: before each tick it is shown the
    current game state and returns the heading to press.
    """

    def get_move(self, game_state: GameState) -> str:
        """
        Return a heading given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT"
        """
        raise NotImplementedError

#!/usr/bin/env python3
"""
SnakeSim entry point.

Usage:
    python main.py                       # play in a window (WASD / arrow keys)
    python main.py --headless --ticks 40 # let a random player drive, print the board
    python main.py --headless --moves RIGHT UP UP LEFT
    python main.py --headless --history-out runs/run.json
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, Optional

from config import configure_logging, load_settings
from game import SnakeGame
from players import Player, RandomPlayer, ScriptedPlayer

logger = logging.getLogger(__name__)


def run_simulation(game: SnakeGame, player: Player, ticks: int, show_board: bool = False) -> Dict[str, Any]:
    """
    Drive `game` for `ticks` steps without a clock or window.

    Before each step the player sees the current state and its heading is
    fed to the direction controller, the same way a key press would be.

    Returns:
        A dictionary summarizing the run.
    """
    if ticks < 0:
        raise ValueError(f"ticks must be non-negative, got {ticks}")

    food_eaten = 0
    for _ in range(ticks):
        state = game.get_current_state()
        game.direction.set_heading(player.get_move(state))
        result = game.tick()
        if result.consumed:
            food_eaten += 1
        if show_board:
            game.print_board()

    final_state = game.get_current_state()
    return {
        "ticks": game.tick_number,
        "length": len(final_state.snake_positions),
        "food_eaten": food_eaten,
        "head": final_state.head(),
        "food": final_state.food,
    }


def build_player(moves: Optional[list]) -> Player:
    if moves:
        return ScriptedPlayer([m.upper() for m in moves])
    return RandomPlayer()


def main():
    parser = argparse.ArgumentParser(
        description="Run the snake simulation in a window or headless.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument("--headless", action="store_true",
                        help="Run without a window, driven by a player")
    parser.add_argument("--ticks", type=int, default=50,
                        help="Number of ticks to run in headless mode (default: 50)")
    parser.add_argument("--moves", type=str, nargs='+',
                        help="Scripted headings for headless mode (default: random player)")
    parser.add_argument("--show-board", action="store_true",
                        help="Print the board after every headless tick")
    parser.add_argument("--history-out", type=str,
                        help="Write every tick's snapshot to this JSON file when the run ends")

    args = parser.parse_args()

    try:
        settings = load_settings()
        configure_logging(settings.log_level)

        game = SnakeGame(record_history=args.history_out is not None)
        try:
            if args.headless:
                result = run_simulation(game, build_player(args.moves), args.ticks, args.show_board)
                print("\nSimulation Result Summary:")
                print(json.dumps(result, indent=2))
            else:
                # Deferred so headless runs work without a display stack
                from services.window import GameWindow
                GameWindow(game, fps=settings.fps, scale=settings.window_scale).run()
        finally:
            if args.history_out:
                game.save_history_to_json(args.history_out)
    except KeyboardInterrupt:
        logger.info("Interrupted")
    except Exception as e:
        logger.error(f"Simulation failed: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
CLI tool to record a headless SnakeSim run as an MP4

Usage:
    python generate_video.py
    python generate_video.py --ticks 200 --output ./my_run.mp4

Examples:
    # Random player, 100 ticks, written to $SNAKE_VIDEO_DIR/snake_run.mp4
    python generate_video.py

    # Scripted run
    python generate_video.py --moves RIGHT UP UP LEFT LEFT DOWN

    # Custom video settings
    python generate_video.py --fps 4 --scale 12
"""

import os
import sys
import argparse
import logging

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import configure_logging, load_settings  # noqa: E402
from game import SnakeGame  # noqa: E402
from main import build_player, run_simulation  # noqa: E402
from services.video_generator import SnakeVideoGenerator, DEFAULT_FPS, DEFAULT_SCALE  # noqa: E402

logger = logging.getLogger(__name__)


def record_run(ticks: int, output_path: str, moves=None, fps: int = DEFAULT_FPS, scale: int = DEFAULT_SCALE) -> str:
    """Play `ticks` ticks headless and write every tick's board to `output_path`."""
    game = SnakeGame(record_history=True)
    summary = run_simulation(game, build_player(moves), ticks)
    logger.info(f"Run finished: {summary}")

    generator = SnakeVideoGenerator(game.grid, fps=fps, scale=scale)
    generator.add_states(game.history)
    return generator.write(output_path)


def main():
    parser = argparse.ArgumentParser(
        description='Record a headless snake run to MP4',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument(
        '--ticks',
        type=int,
        default=100,
        help='Number of ticks to simulate (default: 100)'
    )
    parser.add_argument(
        '--moves',
        type=str,
        nargs='+',
        help='Scripted headings (default: random player)'
    )
    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Output video file path (default: $SNAKE_VIDEO_DIR/snake_run.mp4)'
    )
    parser.add_argument(
        '--fps',
        type=int,
        default=DEFAULT_FPS,
        help=f'Frames per second (default: {DEFAULT_FPS})'
    )
    parser.add_argument(
        '--scale',
        type=int,
        default=DEFAULT_SCALE,
        help=f'Pixel upscale factor (default: {DEFAULT_SCALE})'
    )

    args = parser.parse_args()

    try:
        settings = load_settings()
        configure_logging(settings.log_level)

        output_path = args.output or os.path.join(settings.video_dir, "snake_run.mp4")
        path = record_run(args.ticks, output_path, args.moves, args.fps, args.scale)
        logger.info(f"✓ Video saved to {path}")
    except Exception as e:
        logger.error(f"✗ Video generation failed: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()

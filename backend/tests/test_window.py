"""
Tests for the pygame window adapter. No display is opened.
"""

import os
import sys
from types import SimpleNamespace
from unittest.mock import patch

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pygame  # noqa: E402

from domain.constants import UP, LEFT, RIGHT  # noqa: E402
from game import SnakeGame  # noqa: E402
from services.renderer import ColorScheme, hex_to_rgb  # noqa: E402
from services.window import GameWindow, key_name_for  # noqa: E402


def test_key_names():
    assert key_name_for(pygame.K_w) == "w"
    assert key_name_for(pygame.K_LEFT) == "left"
    assert key_name_for(pygame.K_SPACE) is None


def test_keydown_sets_heading():
    game = SnakeGame()
    window = GameWindow(game)
    events = [SimpleNamespace(type=pygame.KEYDOWN, key=pygame.K_UP)]
    with patch("services.window.pygame.event.get", return_value=events):
        window.handle_events()
    assert game.direction.current_heading == UP


def test_last_key_before_tick_wins():
    game = SnakeGame()
    window = GameWindow(game)
    events = [
        SimpleNamespace(type=pygame.KEYDOWN, key=pygame.K_w),
        SimpleNamespace(type=pygame.KEYDOWN, key=pygame.K_a),
    ]
    with patch("services.window.pygame.event.get", return_value=events):
        window.handle_events()
    assert game.direction.current_heading == LEFT


def test_unbound_keys_ignored():
    game = SnakeGame()
    window = GameWindow(game)
    events = [SimpleNamespace(type=pygame.KEYDOWN, key=pygame.K_SPACE)]
    with patch("services.window.pygame.event.get", return_value=events):
        window.handle_events()
    assert game.direction.current_heading == RIGHT


def test_quit_stops_loop():
    window = GameWindow(SnakeGame())
    window.running = True
    with patch("services.window.pygame.event.get", return_value=[SimpleNamespace(type=pygame.QUIT)]):
        window.handle_events()
    assert window.running is False


def test_board_uses_ten_pixel_cells():
    """Cells stay 10px on the board; only the finished surface is scaled."""
    window = GameWindow(SnakeGame())
    assert window.renderer.cell_size == 10
    assert window.renderer.cell_rect((1, 9)) == (10, 0, 19, 9)


def test_window_size_scales_whole_board():
    assert GameWindow(SnakeGame(), scale=4).window_size == (400, 400)
    assert GameWindow(SnakeGame(), scale=1).window_size == (100, 100)


def test_render_board_matches_pillow_frame():
    """Window and video frames come from the same cell layers."""
    game = SnakeGame()
    window = GameWindow(game)
    board = window.render_board()
    frame = window.renderer.render_frame(game.get_current_state())

    assert board.get_size() == (100, 100)
    for point in [(65, 45), (75, 35), (5, 5)]:
        assert tuple(board.get_at(point))[:3] == frame.getpixel(point)
    assert tuple(board.get_at((65, 45)))[:3] == hex_to_rgb(ColorScheme.SNAKE)


def test_rejects_non_positive_scale():
    with pytest.raises(ValueError):
        GameWindow(SnakeGame(), scale=0)

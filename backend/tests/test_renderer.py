"""
Tests for the Pillow board renderer.
"""

import os
import sys

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import RIGHT  # noqa: E402
from domain.game_state import GameState  # noqa: E402
from domain.grid import Grid  # noqa: E402
from services.renderer import BoardRenderer, ColorScheme, hex_to_rgb  # noqa: E402


def make_state(snake, food):
    return GameState(
        tick_number=0,
        snake_positions=snake,
        food=food,
        heading=RIGHT,
        growth_credit=0,
        width=10,
        height=10,
    )


class TestBoardRenderer:
    """Tests for BoardRenderer."""

    def test_hex_to_rgb(self):
        assert hex_to_rgb("#32CD32") == (50, 205, 50)

    def test_image_size_is_ten_pixels_per_cell(self):
        renderer = BoardRenderer(Grid())
        image = renderer.render_frame(make_state([(6, 5)], [(7, 6)]))
        assert image.size == (100, 100)

    def test_cell_rect_flips_y(self):
        renderer = BoardRenderer(Grid())
        assert renderer.cell_rect((0, 0)) == (0, 90, 9, 99)
        assert renderer.cell_rect((9, 9)) == (90, 0, 99, 9)

    def test_cells_are_painted(self):
        renderer = BoardRenderer(Grid())
        image = renderer.render_frame(make_state([(6, 5)], [(7, 6)]))

        # Snake cell (6,5): x 60-69, y (9-5)*10 = 40-49
        assert image.getpixel((65, 45)) == hex_to_rgb(ColorScheme.SNAKE)
        assert image.getpixel((60, 40)) == hex_to_rgb(ColorScheme.SNAKE)
        assert image.getpixel((69, 49)) == hex_to_rgb(ColorScheme.SNAKE)
        # Food cell (7,6): x 70-79, y 30-39
        assert image.getpixel((75, 35)) == hex_to_rgb(ColorScheme.FOOD)
        # Empty cell
        assert image.getpixel((5, 5)) == hex_to_rgb(ColorScheme.BACKGROUND)

    def test_snake_drawn_over_food(self):
        renderer = BoardRenderer(Grid())
        image = renderer.render_frame(make_state([(7, 6)], [(7, 6)]))
        assert image.getpixel((75, 35)) == hex_to_rgb(ColorScheme.SNAKE)

    def test_off_board_cells_skipped(self):
        renderer = BoardRenderer(Grid())
        image = renderer.render_frame(make_state([(-1, 5), (10, 3)], [(12, 12)]))
        colors = {color for _, color in image.getcolors()}
        assert colors == {hex_to_rgb(ColorScheme.BACKGROUND)}

    def test_custom_cell_size(self):
        renderer = BoardRenderer(Grid(), cell_size=40)
        assert renderer.size == (400, 400)
        assert renderer.cell_rect((1, 9)) == (40, 0, 79, 39)

"""
Board rendering with PIL (Pillow).

Each cell becomes a filled square of `cell_size` pixels whose origin is
`coordinate * cell_size`. Board y grows upwards, image y grows downwards, so
rows are flipped when drawing.
"""

import logging
from typing import Iterable, Iterator, Tuple

from PIL import Image, ImageDraw

from domain.constants import CELL_SIZE, Cell
from domain.game_state import GameState
from domain.grid import Grid

logger = logging.getLogger(__name__)


class ColorScheme:
    """Board colours"""

    BACKGROUND = "#666666"
    SNAKE = "#32CD32"  # lime green
    FOOD = "#FF0000"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


class BoardRenderer:
    """Draw GameState snapshots as images"""

    def __init__(self, grid: Grid, cell_size: int = CELL_SIZE):
        self.grid = grid
        self.cell_size = cell_size

    @property
    def size(self) -> Tuple[int, int]:
        return (self.grid.width * self.cell_size, self.grid.height * self.cell_size)

    def cell_rect(self, cell: Cell) -> Tuple[int, int, int, int]:
        """
        Pixel rectangle (left, top, right, bottom) covering `cell`, with
        right/bottom inclusive as ImageDraw.rectangle expects.
        """
        x, y = cell
        left = x * self.cell_size
        top = (self.grid.height - 1 - y) * self.cell_size
        return (left, top, left + self.cell_size - 1, top + self.cell_size - 1)

    def render_frame(self, state: GameState) -> Image.Image:
        image = Image.new("RGB", self.size, hex_to_rgb(ColorScheme.BACKGROUND))
        draw = ImageDraw.Draw(image)

        for rect, color in self.layers(state):
            draw.rectangle(rect, fill=hex_to_rgb(color))
        return image

    def layers(self, state: GameState) -> Iterator[Tuple[Tuple[int, int, int, int], str]]:
        """
        Yield (rect, color) for every on-board cell to paint, food first so
        the snake is drawn over it.
        """
        for cells, color in ((state.food, ColorScheme.FOOD), (state.snake_positions, ColorScheme.SNAKE)):
            for rect in self.visible_rects(cells):
                yield rect, color

    def visible_rects(self, cells: Iterable[Cell]) -> Iterator[Tuple[int, int, int, int]]:
        for cell in cells:
            # Off-board cells have no pixels to land on
            if not self.grid.in_bounds(cell):
                continue
            yield self.cell_rect(cell)

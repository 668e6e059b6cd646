"""
Interactive pygame window: reads key presses, feeds frame time into the
game and draws the board after each update.
"""

import logging
from typing import Optional, Tuple

import pygame

from domain.constants import CELL_SIZE
from game import SnakeGame
from services.renderer import BoardRenderer, ColorScheme

logger = logging.getLogger(__name__)

# pygame key code -> DirectionController binding name
KEY_NAMES = {
    pygame.K_w: "w",
    pygame.K_a: "a",
    pygame.K_s: "s",
    pygame.K_d: "d",
    pygame.K_UP: "up",
    pygame.K_LEFT: "left",
    pygame.K_DOWN: "down",
    pygame.K_RIGHT: "right",
}


def key_name_for(key: int) -> Optional[str]:
    return KEY_NAMES.get(key)


class GameWindow:
    """
    Runs SnakeGame in a pygame window until it is closed.
    """

    def __init__(self, game: SnakeGame, fps: int = 60, scale: int = 4, title: str = "Snake"):
        if scale <= 0:
            raise ValueError(f"scale must be positive, got {scale}")
        self.game = game
        self.fps = fps
        self.scale = scale
        self.title = title
        # Board is drawn at CELL_SIZE per cell and upscaled as a whole
        self.renderer = BoardRenderer(game.grid, cell_size=CELL_SIZE)
        self.running = False

    @property
    def window_size(self) -> Tuple[int, int]:
        width, height = self.renderer.size
        return (width * self.scale, height * self.scale)

    def handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                name = key_name_for(event.key)
                if name is not None:
                    self.game.direction.handle_key(name)

    def render_board(self) -> pygame.Surface:
        """Draw the current state on a board-sized surface."""
        board = pygame.Surface(self.renderer.size)
        board.fill(pygame.Color(ColorScheme.BACKGROUND))
        for (left, top, right, bottom), color in self.renderer.layers(self.game.get_current_state()):
            pygame.draw.rect(board, pygame.Color(color), pygame.Rect(left, top, right - left + 1, bottom - top + 1))
        return board

    def draw(self, screen) -> None:
        board = self.render_board()
        if self.scale != 1:
            board = pygame.transform.scale(board, self.window_size)
        screen.blit(board, (0, 0))
        pygame.display.flip()

    def run(self) -> None:
        pygame.init()
        try:
            screen = pygame.display.set_mode(self.window_size)
            pygame.display.set_caption(self.title)
            clock = pygame.time.Clock()
            self.running = True
            logger.info(f"Window open at {self.window_size[0]}x{self.window_size[1]}, {self.fps} fps")

            while self.running:
                elapsed_ms = clock.tick(self.fps)
                self.handle_events()
                self.game.update(elapsed_ms / 1000.0)
                self.draw(screen)
        finally:
            pygame.quit()
            logger.info(f"Window closed after {self.game.tick_number} ticks")

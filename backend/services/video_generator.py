"""
Video Generation Service for SnakeSim sessions

This service records a session to MP4 by:
1. Rendering each tick's GameState with BoardRenderer (Pillow)
2. Upscaling frames so the 10px cells are visible
3. Encoding frames to video using MoviePy/FFmpeg
"""

import logging
import os
from typing import List, Optional

import numpy as np
from moviepy import ImageSequenceClip
from PIL import Image

from domain.game_state import GameState
from domain.grid import Grid
from services.renderer import BoardRenderer

logger = logging.getLogger(__name__)

# Video settings
DEFAULT_FPS = 2  # one frame per 500ms tick
DEFAULT_SCALE = 8


class SnakeVideoGenerator:
    """Collect rendered frames and write them as an MP4"""

    def __init__(
        self,
        grid: Grid,
        fps: int = DEFAULT_FPS,
        scale: int = DEFAULT_SCALE,
        renderer: Optional[BoardRenderer] = None
    ):
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        if scale <= 0:
            raise ValueError(f"scale must be positive, got {scale}")
        self.grid = grid
        self.fps = fps
        self.scale = scale
        self.renderer = renderer if renderer is not None else BoardRenderer(grid)
        self.frames: List[np.ndarray] = []

    def add_frame(self, state: GameState) -> None:
        image = self.renderer.render_frame(state)
        if self.scale != 1:
            width, height = image.size
            image = image.resize((width * self.scale, height * self.scale), Image.NEAREST)
        self.frames.append(np.array(image))

    def add_states(self, states: List[GameState]) -> None:
        for i, state in enumerate(states):
            if i % 50 == 0:
                logger.info(f"Rendering frame {i + 1}/{len(states)}")
            self.add_frame(state)

    def write(self, output_path: str) -> str:
        """
        Encode collected frames to `output_path`.

        Returns:
            Path to the generated video file
        """
        if not self.frames:
            raise ValueError("No frames recorded; nothing to encode.")

        directory = os.path.dirname(output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        logger.info(f"Encoding {len(self.frames)} frames to {output_path}")
        clip = ImageSequenceClip(self.frames, fps=self.fps)
        clip.write_videofile(
            output_path,
            codec='libx264',
            audio=False,
            logger=None
        )

        logger.info(f"Video created successfully at {output_path}")
        return output_path

"""
Runtime settings loaded from the environment (and a .env file if present).

Game rules are fixed in domain.constants; only the shell around the
simulation (logging, window, output paths) is configurable here.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    fps: int = 60
    window_scale: int = 4
    video_dir: str = "videos"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def load_settings() -> Settings:
    log_level = os.getenv("SNAKE_LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"SNAKE_LOG_LEVEL must be a logging level name, got {log_level!r}")
    return Settings(
        log_level=log_level,
        fps=_int_env("SNAKE_FPS", 60),
        window_scale=_int_env("SNAKE_WINDOW_SCALE", 4),
        video_dir=os.getenv("SNAKE_VIDEO_DIR", "videos"),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)

"""
Heading state updated from player input.
"""

import logging

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES

logger = logging.getLogger(__name__)

# Key name -> heading. WASD plus the arrow keys.
KEY_BINDINGS = {
    "w": UP,
    "a": LEFT,
    "s": DOWN,
    "d": RIGHT,
    "up": UP,
    "left": LEFT,
    "down": DOWN,
    "right": RIGHT,
}


class DirectionController:
    """
    Holds the snake's current heading.

    Any valid heading is accepted, reversals included; the last heading set
    before a tick is the one the tick uses.
    """

    def __init__(self, heading: str = RIGHT):
        self._heading = RIGHT
        self.set_heading(heading)

    @property
    def current_heading(self) -> str:
        return self._heading

    def set_heading(self, requested: str) -> None:
        if requested not in VALID_MOVES:
            raise ValueError(f"Unknown heading {requested!r}; expected one of {sorted(VALID_MOVES)}.")
        if requested != self._heading:
            logger.debug(f"Heading {self._heading} -> {requested}")
        self._heading = requested

    def handle_key(self, key_name: str) -> bool:
        """
        Apply a key press. Returns True if the key is bound to a heading.
        """
        heading = KEY_BINDINGS.get(key_name.lower())
        if heading is None:
            return False
        self.set_heading(heading)
        return True

    def __repr__(self):
        return f"<DirectionController heading={self._heading}>"

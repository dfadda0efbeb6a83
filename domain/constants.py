"""
Game constants for the terminal Snake game.
"""

from enum import Enum
from typing import Dict, Optional, Tuple


class Direction(str, Enum):
    """Movement directions. Screen rows grow downward, so UP is y - 1."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def delta(self) -> Tuple[int, int]:
        return DIRECTION_DELTA[self]


DIRECTION_DELTA: Dict[Direction, Tuple[int, int]] = {
    Direction.UP:    (0, -1),
    Direction.DOWN:  (0, 1),
    Direction.LEFT:  (-1, 0),
    Direction.RIGHT: (1, 0),
}

# Convenience aliases
UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}


class Cell(Enum):
    """State of a single grid cell. The value is the glyph it renders as."""

    EMPTY = "."
    BORDER = "#"
    FOOD = "*"
    OCCUPIED = "o"

    @property
    def glyph(self) -> str:
        return self.value


class Outcome(str, Enum):
    """Terminal result of a run."""

    WIN = "WIN"
    LOSE = "LOSE"


# Raw key identifiers -> directions (W/A/S/D plus arrow keys)
KEY_BINDINGS: Dict[str, Direction] = {
    "w": UP,
    "up": UP,
    "a": LEFT,
    "left": LEFT,
    "s": DOWN,
    "down": DOWN,
    "d": RIGHT,
    "right": RIGHT,
}


def decode_key(key: str) -> Optional[Direction]:
    """Return the Direction bound to a raw key identifier, or None."""
    return KEY_BINDINGS.get(key.lower())

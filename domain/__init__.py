"""
Domain entities for the terminal Snake game.

This module contains the core game entities that are independent of
terminal and keyboard concerns.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    Cell, Direction, Outcome, KEY_BINDINGS, decode_key,
)
from .grid import Grid
from .snake import Snake

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'Cell', 'Direction', 'Outcome', 'KEY_BINDINGS', 'decode_key',
    'Grid',
    'Snake',
]

"""
Terminal renderer for the Snake game.

Draws the grid to a text stream and overwrites the previous frame in place,
so the terminal does not scroll while the game runs.
"""

import sys
from typing import Optional, TextIO

from domain.grid import Grid

from .base import Renderer

# ANSI: move cursor to the start of the line n lines up / clear to end of screen
CURSOR_UP = "\033[{n}F"
CLEAR_DOWN = "\033[J"


class TerminalRenderer(Renderer):
    """
    Writes full frames to ``stream``.

    The first frame is written as-is; later frames first move the cursor back
    over the previous one and clear it.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout
        self._last_height = 0

    def render(self, grid: Grid) -> None:
        frame = grid.print_board()
        if self._last_height:
            self.stream.write(CURSOR_UP.format(n=self._last_height) + CLEAR_DOWN)
        self.stream.write(frame + "\n")
        self.stream.flush()
        self._last_height = frame.count("\n") + 1

    def clear(self) -> None:
        """Forget the previous frame; the next render starts a fresh block."""
        self._last_height = 0

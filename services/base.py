"""
Base renderer interface for the game engine.
"""

from domain.grid import Grid


class Renderer:
    """
    Base class/interface for output targets.

    A renderer draws a full frame of the grid each time it is called.
    """

    def render(self, grid: Grid) -> None:
        """
        Draw the current grid.

        Args:
            grid: the playfield to show
        """
        raise NotImplementedError

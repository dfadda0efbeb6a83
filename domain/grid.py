"""
Grid entity - the bordered playfield.
"""

import logging
import random
from typing import Iterable, List, Optional, Tuple

from .constants import Cell, DIRECTION_DELTA

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


class Grid:
    """
    The playfield: a matrix of cells surrounded by a one-cell border.

    The requested playable size is ``width x height``; internally the grid is
    ``(width + 2) x (height + 2)`` so that the outermost ring can hold the
    border. Cells are addressed as ``(x, y)`` and stored as ``area[y][x]``.

    Attributes:
        width, height: playable dimensions
        max_x, max_y: last valid column / row index (the border)
        area: list of rows, each a list of Cell
    """

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"Grid must be at least 1x1, got {width}x{height}.")

        self.width = width
        self.height = height
        self.max_x = width + 1
        self.max_y = height + 1

        columns = width + 2
        rows = height + 2
        self.area: List[List[Cell]] = []
        for y in range(rows):
            edge = y == 0 or y == self.max_y
            row = []
            for x in range(columns):
                if edge or x == 0 or x == self.max_x:
                    row.append(Cell.BORDER)
                else:
                    row.append(Cell.EMPTY)
            self.area.append(row)

    @classmethod
    def create(cls, width: int, height: int) -> Tuple["Grid", Tuple[int, int]]:
        """Build a grid and return it together with its (max_x, max_y)."""
        grid = cls(width, height)
        return grid, grid.size()

    def size(self) -> Tuple[int, int]:
        return self.max_x, self.max_y

    @property
    def food(self) -> Optional[Position]:
        """Position of the food cell, or None when there is none."""
        for position in self.interior():
            if self.cell_at(position) is Cell.FOOD:
                return position
        return None

    def interior(self) -> List[Position]:
        """All playable (non-border) positions, row by row."""
        return [
            (x, y)
            for y in range(1, self.max_y)
            for x in range(1, self.max_x)
        ]

    def is_interior(self, position: Position) -> bool:
        x, y = position
        return 0 < x < self.max_x and 0 < y < self.max_y

    def cell_at(self, position: Position) -> Cell:
        x, y = position
        return self.area[y][x]

    def mark(self, position: Position, cell: Cell) -> None:
        """Set the state of one interior cell. The border is immutable."""
        if cell is Cell.BORDER:
            raise ValueError("Border cells cannot be added after creation.")
        if not self.is_interior(position):
            raise ValueError(f"Cannot mark border cell at {position}.")
        x, y = position
        self.area[y][x] = cell

    def sync(self, body: Iterable[Position]) -> None:
        """Mark every body segment as occupied."""
        for position in body:
            self.mark(position, Cell.OCCUPIED)

    def place_food(
        self,
        rng: random.Random,
        avoid: Optional[Iterable[Position]] = None,
    ) -> Optional[Position]:
        """
        Place a single food cell at a uniformly random interior position.

        Any existing food is cleared first. Without ``avoid`` the food may
        land on an occupied cell; the next ``sync`` then hides it.

        Args:
            rng: random source used for the pick
            avoid: positions that must not receive the food

        Returns:
            The food position, or None if every candidate cell was excluded.
        """
        current = self.food
        if current is not None:
            self.mark(current, Cell.EMPTY)

        if avoid is None:
            position = (rng.randrange(1, self.max_x), rng.randrange(1, self.max_y))
        else:
            blocked = set(avoid)
            candidates = [p for p in self.interior() if p not in blocked]
            if not candidates:
                logger.debug("No free cell left for food")
                return None
            position = rng.choice(candidates)

        self.mark(position, Cell.FOOD)
        logger.debug(f"Placed food at {position}")
        return position

    def is_move_legal(self, position: Position) -> bool:
        """A cell can be entered unless it is border or body."""
        return self.cell_at(position) not in (Cell.BORDER, Cell.OCCUPIED)

    def has_legal_move(self, position: Position) -> bool:
        """True if any of the four neighbours of ``position`` can be entered."""
        x, y = position
        for dx, dy in DIRECTION_DELTA.values():
            if self.is_move_legal((x + dx, y + dy)):
                return True
        return False

    def is_full(self) -> bool:
        """True once no interior cell is empty or holds food."""
        for y in range(1, self.max_y):
            for x in range(1, self.max_x):
                if self.area[y][x] in (Cell.EMPTY, Cell.FOOD):
                    return False
        return True

    def print_board(self) -> str:
        """
        Returns a string representation of the board, one line per row:
        . = empty
        # = border
        * = food
        o = snake body
        """
        return "\n".join(
            "".join(cell.glyph + " " for cell in row) for row in self.area
        )

    def __repr__(self):
        return f"<Grid {self.width}x{self.height}, food={self.food}, full={self.is_full()}>"

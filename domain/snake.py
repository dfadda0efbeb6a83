"""
Snake entity for the game engine.
"""

import random
from collections import deque
from typing import List, Optional, Tuple

from .constants import Direction


class Snake:
    """
    Represents the player's snake on the board.

    The snake knows the bounds it was created with and rejects any step that
    would reach the border, but it knows nothing about cell occupancy; running
    into its own body is detected by the game through the grid.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        max_x, max_y: border indices; valid coordinates satisfy 0 < v < max
        pos_x, pos_y: head coordinate, possibly ahead of the body until commit()
    """

    def __init__(self, positions: List[Tuple[int, int]], max_x: int, max_y: int):
        if not positions:
            raise ValueError("A snake needs at least one segment.")
        self.positions = deque(positions)
        self.max_x = max_x
        self.max_y = max_y
        self.pos_x, self.pos_y = self.positions[0]

    @classmethod
    def spawn(cls, max_x: int, max_y: int, rng: Optional[random.Random] = None) -> "Snake":
        """Create a one-segment snake at a uniformly random interior cell."""
        rng = rng or random.Random()
        pos_x = rng.randrange(1, max_x)
        pos_y = rng.randrange(1, max_y)
        return cls([(pos_x, pos_y)], max_x, max_y)

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Tuple[int, int]:
        """Return the tail position (last element)."""
        return self.positions[-1]

    def __len__(self) -> int:
        return len(self.positions)

    def _target(self, direction: Direction) -> Tuple[int, int]:
        dx, dy = direction.delta
        return self.pos_x + dx, self.pos_y + dy

    def can_move(self, direction: Direction) -> bool:
        """True if one step in ``direction`` stays strictly inside the border."""
        x, y = self._target(direction)
        return 0 < x < self.max_x and 0 < y < self.max_y

    def move(self, direction: Direction) -> bool:
        """
        Advance the head coordinate one step if the bounds allow it.

        The body itself is only updated by commit().

        Returns:
            False if the step was rejected, True otherwise.
        """
        if not self.can_move(direction):
            return False
        self.pos_x, self.pos_y = self._target(direction)
        return True

    def commit(self):
        """Push the new head onto the body and drop the old tail."""
        self.positions.appendleft((self.pos_x, self.pos_y))
        self.positions.pop()

    def grow(self, previous_tail: Tuple[int, int]):
        """Re-attach the tail cell vacated by the last commit()."""
        self.positions.append(previous_tail)

    def __repr__(self):
        return f"<Snake head={self.head}, length={len(self)}>"

"""
Base player interface for the game engine.
"""

from typing import List


class Player:
    """
    Base class/interface for input sources.

    Each player reports the keys currently held down. The game treats the
    first key as the command for the tick and ignores repeats of the same
    held-key list.
    """

    def get_keys(self) -> List[str]:
        """
        Return the currently held keys.

        Returns:
            Ordered, possibly empty list of key identifiers (e.g. "w", "up").
        """
        raise NotImplementedError

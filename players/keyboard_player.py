"""
Keyboard player - polls the physical keyboard for held keys.
"""

from typing import List, Sequence

import keyboard

from .base import Player

# Keys watched by default, in priority order
WATCHED_KEYS = ("w", "a", "s", "d", "up", "left", "down", "right")


class KeyboardPlayer(Player):
    """
    Reads held keys from the keyboard device.

    On Linux the underlying ``keyboard`` library needs root (or access to
    /dev/input) to see key events.
    """

    def __init__(self, keys: Sequence[str] = WATCHED_KEYS):
        self.keys = tuple(keys)

    def get_keys(self) -> List[str]:
        return [key for key in self.keys if keyboard.is_pressed(key)]

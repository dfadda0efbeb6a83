"""
Scripted player - replays a fixed sequence of held-key snapshots.
"""

from typing import Iterable, List

from .base import Player


class ScriptExhausted(RuntimeError):
    """Raised when a scripted player is polled past the end of its script."""


class ScriptedPlayer(Player):
    """
    Returns one pre-recorded key snapshot per poll.

    Useful for tests and for replaying a recorded game. Polling past the end
    raises ScriptExhausted instead of blocking the loop forever.

    Args:
        frames: iterable of key lists, one per tick; [] means nothing held
    """

    def __init__(self, frames: Iterable[List[str]]):
        self.frames = [list(frame) for frame in frames]
        self.polls = 0

    @classmethod
    def from_moves(cls, moves: Iterable[str]) -> "ScriptedPlayer":
        """
        Build a script that presses and releases each key in turn.

        ["d", "d"] becomes [["d"], [], ["d"], []] so the debounce sees two
        separate presses.
        """
        frames: List[List[str]] = []
        for key in moves:
            frames.append([key])
            frames.append([])
        return cls(frames)

    @property
    def remaining(self) -> int:
        return len(self.frames) - self.polls

    def get_keys(self) -> List[str]:
        if self.polls >= len(self.frames):
            raise ScriptExhausted(f"Script ended after {self.polls} polls.")
        frame = self.frames[self.polls]
        self.polls += 1
        return list(frame)

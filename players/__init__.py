"""
Player implementations for the terminal Snake game.

This module contains the input sources that feed held keys to the game loop.
"""

from .base import Player
from .keyboard_player import KeyboardPlayer, WATCHED_KEYS
from .scripted_player import ScriptedPlayer, ScriptExhausted

__all__ = [
    'Player',
    'KeyboardPlayer',
    'WATCHED_KEYS',
    'ScriptedPlayer',
    'ScriptExhausted',
]

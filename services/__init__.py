"""
Output services for the terminal Snake game.
"""

from .base import Renderer
from .terminal import TerminalRenderer

__all__ = ['Renderer', 'TerminalRenderer']

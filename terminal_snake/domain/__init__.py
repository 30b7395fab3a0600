"""
Domain entities for the terminal Snake game.

This module contains the core game entities that are independent of
terminal concerns (drawing, key polling, timers).
"""

from .constants import MAX_COLUMNS, MAX_ROWS, CHANCE_TO_DROP, INITIAL_CELLS
from .geometry import Cell, Direction
from .apples import Apples, should_spawn
from .snake import Snake
from .game_state import GameState

__all__ = [
    'MAX_COLUMNS', 'MAX_ROWS', 'CHANCE_TO_DROP', 'INITIAL_CELLS',
    'Cell', 'Direction',
    'Apples', 'should_spawn',
    'Snake',
    'GameState',
]

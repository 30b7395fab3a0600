"""
GameState - the phases of a game session.
"""

from enum import Enum


class GameState(Enum):
    INITIALIZATION = "initialization"
    IN_PROGRESS = "in_progress"
    PAUSE = "pause"
    GAME_OVER = "game_over"

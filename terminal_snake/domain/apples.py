"""
Apples entity - the food scattered across the board.
"""

import logging
import random
from typing import Optional, Set

from .constants import APPLE_DRAW_MAX, CHANCE_TO_DROP, MAX_COLUMNS, MAX_ROWS
from .geometry import Cell

logger = logging.getLogger(__name__)


def should_spawn(draw: int, growth_speed: int) -> bool:
    """A new apple drops only when the draw falls below the growth speed."""
    return draw < growth_speed


class Apples:
    """
    The set of apple positions on the board.

    Attributes:
        cells: unique apple cells
        growth_speed: how many of the APPLE_DRAW_MAX + 1 possible draws spawn an apple
    """

    def __init__(
        self,
        cells: Optional[Set[Cell]] = None,
        growth_speed: int = CHANCE_TO_DROP,
        rng: Optional[random.Random] = None,
    ):
        if not 0 <= growth_speed <= APPLE_DRAW_MAX + 1:
            raise ValueError(
                f"growth_speed must be between 0 and {APPLE_DRAW_MAX + 1}, got {growth_speed}."
            )
        self.cells: Set[Cell] = set(cells) if cells else set()
        self.growth_speed = growth_speed
        self._rng = rng or random.Random()

    def grow(self) -> Optional[Cell]:
        """
        Maybe drop one apple on a random interior cell.

        The border ring is never used. A drop on an existing apple leaves the
        set unchanged.

        Returns:
            The dropped cell, or None if nothing dropped this time
        """
        if not should_spawn(self._rng.randint(0, APPLE_DRAW_MAX), self.growth_speed):
            return None

        new_apple = Cell(
            self._rng.randint(1, MAX_COLUMNS - 2),
            self._rng.randint(1, MAX_ROWS - 2),
        )
        self.cells.add(new_apple)
        logger.debug("Apple dropped at %s (%s on board)", new_apple, len(self.cells))
        return new_apple

    def clear(self) -> None:
        self.cells.clear()

    def __len__(self):
        return len(self.cells)

    def __repr__(self):
        return f"<Apples count={len(self.cells)}, growth_speed={self.growth_speed}>"

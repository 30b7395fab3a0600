"""
Snake entity for the game engine.
"""

import logging
from typing import List, Optional

from .apples import Apples
from .geometry import Cell, Direction

logger = logging.getLogger(__name__)


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        cells: list of Cell from head at index 0 to the tail end
        direction: the heading applied on the next move
    """

    def __init__(self, cells: List[Cell], direction: Direction = Direction.RIGHT):
        if not cells:
            raise ValueError("A snake needs at least one cell.")
        self.cells = list(cells)
        self.direction = direction
        # segment added by the last eat(), still stacked on its predecessor
        self._placeholder: Optional[Cell] = None

    @property
    def head(self) -> Cell:
        """Return the head cell (first element)."""
        return self.cells[0]

    @property
    def tail(self) -> List[Cell]:
        """Return the segments behind the head, neck first."""
        return self.cells[1:]

    @property
    def score(self) -> int:
        return len(self.cells)

    def turn(self, new_direction: Optional[Direction]) -> None:
        """Change heading unless it would reverse the snake onto itself."""
        if new_direction is not None and not self.direction.is_opposite_to(new_direction):
            self.direction = new_direction

    def move(self) -> None:
        """
        Advance one cell along the current direction.

        Segments are shifted from the tail end toward the neck so that each
        one copies its predecessor before that predecessor moves.
        """
        for i in range(len(self.cells) - 1, 0, -1):
            self.cells[i].move_tail_to_next_cell(self.cells[i - 1])
        self.head.move_head(self.direction)
        self._placeholder = None

    def eat(self, apples: Apples) -> bool:
        """
        Consume the apple under the head, if any.

        The new segment starts on top of the last one and separates from it
        on the following move.

        Returns:
            True if the snake grew
        """
        if self.head not in apples.cells:
            return False

        apples.cells.remove(self.head)
        self._placeholder = self.cells[-1].copy()
        self.cells.append(self._placeholder)
        logger.debug("Ate apple at %s, length now %s", self.head, len(self.cells))
        return True

    def hits_itself(self) -> bool:
        """
        Check whether the head overlaps any tail segment.

        A segment grown this tick is skipped; for a head-only snake it sits
        on the head until the next move.
        """
        return any(
            segment == self.head
            for segment in self.tail
            if segment is not self._placeholder
        )

    def is_within(self, max_columns: int, max_rows: int) -> bool:
        """Check every segment lies inside the playable interior."""
        return all(
            1 <= cell.x < max_columns - 1 and 1 <= cell.y < max_rows
            for cell in self.cells
        )

    def __repr__(self):
        return f"<Snake head={self.head}, length={len(self.cells)}, direction={self.direction.name}>"

"""
Primitive position and movement types.
"""

from enum import Enum


class Direction(Enum):
    """Movement direction carrying a unit displacement (dx, dy)."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def is_opposite_to(self, direction: "Direction") -> bool:
        return self.dx + direction.dx == 0 and self.dy + direction.dy == 0


class Cell:
    """
    A mutable (x, y) grid position.

    Cells compare and hash by coordinates, so a snake segment and an apple
    at the same spot are considered the same cell.
    """

    __slots__ = ("x", "y")

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y

    def move_head(self, direction: Direction) -> None:
        """Shift this cell one step along the direction."""
        self.x += direction.dx
        self.y += direction.dy

    def move_tail_to_next_cell(self, cell: "Cell") -> None:
        """Take over the coordinates of the segment in front."""
        self.x = cell.x
        self.y = cell.y

    def copy(self) -> "Cell":
        return Cell(self.x, self.y)

    def as_tuple(self):
        return (self.x, self.y)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Cell({self.x}, {self.y})"

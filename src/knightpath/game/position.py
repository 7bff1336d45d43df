"""Integer grid coordinates, used both as cells and as move displacements."""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Position:
    """A cell on the board, or the displacement between two cells.

    Attributes:
        x: Column index (width axis)
        y: Row index (depth axis)
    """

    x: int
    y: int

    def __add__(self, other: "Position") -> "Position":
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Position") -> "Position":
        return Position(self.x - other.x, self.y - other.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


# A move is a Position read as a displacement.
Move = Position

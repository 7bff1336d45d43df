"""Error types for knightpath.

Validation failures and "no path" outcomes are ordinary results, not
exceptions. The classes here cover input that cannot be searched at all.
"""


class KnightPathError(Exception):
    """Base class for all knightpath errors."""


class GridConstructionError(KnightPathError, ValueError):
    """A grid could not be built (bad dimension, ragged rows, unknown symbol)."""


class InputFormatError(KnightPathError, ValueError):
    """A header or move line is not a list of integers."""


class OutOfBoundsError(KnightPathError, ValueError):
    """A search endpoint lies outside the grid."""

    def __init__(self, label: str, position: object, depth: int, width: int) -> None:
        self.label = label
        self.position = position
        self.depth = depth
        self.width = width
        super().__init__(
            f"{label} position {position} is not inside the {depth}x{width} board"
        )

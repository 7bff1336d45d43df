"""Terrain grid for knight path finding.

Cells are stored row-major. Coordinate system:

    ---> x (width)
    |
    V
    y (depth)
"""

from dataclasses import dataclass, field
from enum import Enum

from knightpath.errors import GridConstructionError
from knightpath.game.position import Position


class CellKind(Enum):
    """Terrain kind of a single cell."""

    OPEN = "."
    WATER = "W"
    ROCK = "R"
    BARRIER = "B"
    TELEPORT = "T"
    LAVA = "L"

    @property
    def symbol(self) -> str:
        return self.value


# Symbol table used by the grid parser and renderer
CELL_SYMBOLS: dict[str, CellKind] = {kind.value: kind for kind in CellKind}

# Cost of moving onto a cell of each kind. Rock and barrier cells are never
# destinations, so they have no cost.
EDGE_WEIGHTS: dict[CellKind, int] = {
    CellKind.OPEN: 1,
    CellKind.WATER: 2,
    CellKind.TELEPORT: 0,
    CellKind.LAVA: 5,
}

IMPASSABLE_KINDS = frozenset({CellKind.ROCK, CellKind.BARRIER})


def edge_weight(kind: CellKind) -> int:
    """Get the cost of landing on a cell of the given kind.

    Raises:
        ValueError: If the kind is impassable
    """
    try:
        return EDGE_WEIGHTS[kind]
    except KeyError:
        raise ValueError(f"{kind.name} cells cannot be entered") from None


@dataclass
class TerrainGrid:
    """Rectangular grid of cell kinds with an index of teleport cells.

    Attributes:
        depth: Number of rows
        width: Number of columns
        cells: Row-major list of cell kinds (length depth * width), or None
            for an all-open grid that stores no per-cell data
        teleports: Row-major indices of every teleport cell
    """

    depth: int
    width: int
    cells: list[CellKind] | None = None
    teleports: set[int] = field(default_factory=set)

    def __post_init__(self) -> None:
        if self.depth <= 0:
            raise GridConstructionError(f"Board depth must be > 0, got {self.depth}")
        if self.width <= 0:
            raise GridConstructionError(f"Board width must be > 0, got {self.width}")
        if self.cells is None:
            self.teleports = set()
            return
        if len(self.cells) != self.depth * self.width:
            raise GridConstructionError(
                f"Expected {self.depth * self.width} cells, got {len(self.cells)}"
            )
        self.teleports = {
            i for i, kind in enumerate(self.cells) if kind == CellKind.TELEPORT
        }

    @classmethod
    def plain(cls, depth: int, width: int) -> "TerrainGrid":
        """Create an all-open grid, as used by validation and the plain searches.

        No cell list is allocated, so the cost does not depend on the board size.
        """
        return cls(depth=depth, width=width)

    @classmethod
    def from_rows(cls, rows: list[list[CellKind]]) -> "TerrainGrid":
        """Create a grid from rows of cell kinds.

        Raises:
            GridConstructionError: If there are no rows or row widths differ
        """
        if not rows:
            raise GridConstructionError("Grid has no rows")

        width = len(rows[0])
        cells: list[CellKind] = []
        for y, row in enumerate(rows):
            if len(row) != width:
                raise GridConstructionError(
                    f"At row {y}, width is {len(row)}, but previous row width is {width}"
                )
            cells.extend(row)

        return cls(depth=len(rows), width=width, cells=cells)

    def copy(self) -> "TerrainGrid":
        """Create an independent copy of the grid."""
        cells = None if self.cells is None else list(self.cells)
        return TerrainGrid(depth=self.depth, width=self.width, cells=cells)

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self.depth * self.width

    def in_bounds(self, pos: Position) -> bool:
        """Check if a position lies on the grid."""
        return 0 <= pos.x < self.width and 0 <= pos.y < self.depth

    def index_of(self, pos: Position) -> int:
        """Map a position to its row-major index."""
        return pos.y * self.width + pos.x

    def position_of(self, index: int) -> Position:
        """Map a row-major index back to a position."""
        return Position(index % self.width, index // self.width)

    def kind_at(self, pos: Position) -> CellKind:
        """Get the kind of an in-bounds cell."""
        if not self.in_bounds(pos):
            raise IndexError(f"{pos} is outside the {self.depth}x{self.width} grid")
        if self.cells is None:
            return CellKind.OPEN
        return self.cells[self.index_of(pos)]

    def set_kind(self, pos: Position, kind: CellKind) -> None:
        """Change the kind of a cell, keeping the teleport index in sync."""
        if not self.in_bounds(pos):
            raise IndexError(f"{pos} is outside the {self.depth}x{self.width} grid")
        index = self.index_of(pos)
        if self.cells is None:
            self.cells = [CellKind.OPEN] * self.size
        self.cells[index] = kind
        if kind == CellKind.TELEPORT:
            self.teleports.add(index)
        else:
            self.teleports.discard(index)

    def is_teleport(self, pos: Position) -> bool:
        return self.in_bounds(pos) and self.index_of(pos) in self.teleports

    def teleport_peers(self, pos: Position) -> list[Position]:
        """Get every other teleport cell, in row-major order.

        Teleports form a complete graph, so any teleport reaches all the
        others. A non-teleport cell has no peers.
        """
        if not self.is_teleport(pos):
            return []
        own = self.index_of(pos)
        return [self.position_of(i) for i in sorted(self.teleports) if i != own]

    def positions(self) -> list[Position]:
        """All cells in row-major order."""
        return [self.position_of(i) for i in range(self.size)]

    def rows(self) -> list[list[CellKind]]:
        if self.cells is None:
            return [[CellKind.OPEN] * self.width for _ in range(self.depth)]
        return [
            self.cells[y * self.width : (y + 1) * self.width] for y in range(self.depth)
        ]

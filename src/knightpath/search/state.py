"""Per-search state tables and path results."""

from dataclasses import dataclass, field

from knightpath.game.position import Move, Position
from knightpath.game.terrain import TerrainGrid

# Sentinels for the row-major state arrays
UNKNOWN_DISTANCE = -1
NO_PREDECESSOR = -1


@dataclass
class PathResult:
    """Outcome of a path search.

    Attributes:
        found: Whether a path from start to destination exists
        moves: Displacements from start to destination (empty when start is
            the destination or when nothing was found)
        cost: Total path cost for weighted searches, None otherwise
    """

    found: bool
    moves: list[Move] = field(default_factory=list)
    cost: int | None = None

    @classmethod
    def not_found(cls) -> "PathResult":
        return cls(found=False)

    @property
    def num_moves(self) -> int:
        return len(self.moves)

    def cells(self, start: Position) -> list[Position]:
        """Replay the moves from start, returning every cell visited (start included)."""
        out = [start]
        for move in self.moves:
            out.append(out[-1] + move)
        return out


class SearchState:
    """Distance, predecessor and on-path tables for one search over a grid.

    A fresh state is created for every search call and discarded afterwards.
    """

    def __init__(self, grid: TerrainGrid) -> None:
        self.grid = grid
        n = grid.size
        self._dist = [UNKNOWN_DISTANCE] * n
        self._prev = [NO_PREDECESSOR] * n
        self._on_path = [False] * n

    # Distances

    def distance(self, pos: Position) -> int | None:
        """Get the known distance to a cell, or None if unknown."""
        d = self._dist[self.grid.index_of(pos)]
        return None if d == UNKNOWN_DISTANCE else d

    def set_distance(self, pos: Position, distance: int) -> None:
        self._dist[self.grid.index_of(pos)] = distance

    # Predecessors

    def has_predecessor(self, pos: Position) -> bool:
        return self._prev[self.grid.index_of(pos)] != NO_PREDECESSOR

    def predecessor(self, pos: Position) -> Position | None:
        p = self._prev[self.grid.index_of(pos)]
        return None if p == NO_PREDECESSOR else self.grid.position_of(p)

    def set_predecessor(self, pos: Position, prev: Position) -> None:
        self._prev[self.grid.index_of(pos)] = self.grid.index_of(prev)

    # Current-path marks for backtracking searches

    def is_on_path(self, pos: Position) -> bool:
        return self._on_path[self.grid.index_of(pos)]

    def set_on_path(self, pos: Position, on_path: bool) -> None:
        self._on_path[self.grid.index_of(pos)] = on_path

    def distance_rows(self) -> list[list[int]]:
        """Raw distance table by row, with -1 for unknown."""
        w = self.grid.width
        return [self._dist[y * w : (y + 1) * w] for y in range(self.grid.depth)]


def reconstruct_moves(
    state: SearchState, start: Position, destination: Position
) -> list[Move] | None:
    """Walk predecessors back from destination and return the moves from start.

    Returns:
        The moves in start-to-destination order, an empty list when
        destination is start, or None if destination was never reached
    """
    if destination == start:
        return []
    if not state.has_predecessor(destination):
        return None

    moves: list[Move] = []
    cur = destination
    while cur != start:
        prev = state.predecessor(cur)
        if prev is None:
            return None
        moves.append(cur - prev)
        cur = prev
    moves.reverse()
    return moves

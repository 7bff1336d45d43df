"""Knight adjacency over a terrain grid.

An edge u -> v exists when v = u + knight move stays on the grid, v is not
rock or barrier, and the move does not jump over a barrier. Teleport cells
additionally reach every other teleport at zero cost.
"""

from knightpath.game.position import Move, Position
from knightpath.game.rules import legal_moves
from knightpath.game.terrain import IMPASSABLE_KINDS, CellKind, TerrainGrid, edge_weight

# Cost of jumping between two teleport cells
TELEPORT_JUMP_COST = 0


def barrier_midpoint(u: Position, move: Move) -> Position:
    """Get the cell a knight move passes over.

    Every knight move has exactly one axis of length 2. The midpoint is halfway
    along that axis, in the row or column of the starting cell.
    """
    if abs(move.x) == 2:
        return Position(u.x + move.x // 2, u.y)
    return Position(u.x, u.y + move.y // 2)


def crosses_barrier(grid: TerrainGrid, u: Position, move: Move) -> bool:
    """Check if a move from u jumps over a barrier cell.

    Precondition: u + move is on the grid, so the midpoint is too.
    """
    return grid.kind_at(barrier_midpoint(u, move)) == CellKind.BARRIER


def knight_neighbors(grid: TerrainGrid, u: Position) -> list[Position]:
    """Get cells reachable from u with a single knight move, in rule order."""
    out: list[Position] = []
    for move in legal_moves():
        v = u + move
        if not grid.in_bounds(v):
            continue
        if grid.kind_at(v) in IMPASSABLE_KINDS:
            continue
        if crosses_barrier(grid, u, move):
            continue
        out.append(v)
    return out


def neighbors(grid: TerrainGrid, u: Position) -> list[tuple[Position, int]]:
    """Get (cell, cost) pairs for every edge leaving u.

    Knight moves come first in rule order, followed by teleport jumps in
    row-major order.
    """
    out = [(v, edge_weight(grid.kind_at(v))) for v in knight_neighbors(grid, u)]
    out.extend((peer, TELEPORT_JUMP_COST) for peer in grid.teleport_peers(u))
    return out


def reachable_cells(grid: TerrainGrid, u: Position) -> list[Position]:
    """Get the distinct cells one edge away from u, ignoring cost.

    Used by the unweighted searches. A teleport peer that is also a knight
    move away is listed once, at its knight-move position in the order.
    """
    seen: set[Position] = set()
    out: list[Position] = []
    for v, _ in neighbors(grid, u):
        if v not in seen:
            seen.add(v)
            out.append(v)
    return out

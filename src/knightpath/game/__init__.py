"""Board model: positions, the knight rule, terrain and adjacency."""

from knightpath.game.adjacency import (
    TELEPORT_JUMP_COST,
    barrier_midpoint,
    crosses_barrier,
    knight_neighbors,
    neighbors,
    reachable_cells,
)
from knightpath.game.position import Move, Position
from knightpath.game.rules import KNIGHT_MOVES, is_legal_move, legal_moves
from knightpath.game.terrain import (
    CELL_SYMBOLS,
    EDGE_WEIGHTS,
    CellKind,
    TerrainGrid,
    edge_weight,
)

__all__ = [
    # Position
    "Position",
    "Move",
    # Rules
    "KNIGHT_MOVES",
    "is_legal_move",
    "legal_moves",
    # Terrain
    "CellKind",
    "TerrainGrid",
    "CELL_SYMBOLS",
    "EDGE_WEIGHTS",
    "edge_weight",
    # Adjacency
    "TELEPORT_JUMP_COST",
    "barrier_midpoint",
    "crosses_barrier",
    "knight_neighbors",
    "neighbors",
    "reachable_cells",
]

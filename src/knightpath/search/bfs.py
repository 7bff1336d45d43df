"""Breadth-first search for a path with the fewest moves."""

import logging
from collections import deque

from knightpath.game.adjacency import reachable_cells
from knightpath.game.position import Position
from knightpath.game.terrain import TerrainGrid
from knightpath.search.state import PathResult, SearchState, reconstruct_moves

logger = logging.getLogger(__name__)


def find_shortest_path(grid: TerrainGrid, start: Position, destination: Position) -> PathResult:
    """Find a minimum-move path from start to destination.

    Each cell is discovered at most once and keeps the predecessor it was
    discovered from. The search stops when the destination is dequeued.
    """
    state = SearchState(grid)
    state.set_distance(start, 0)
    queue: deque[Position] = deque([start])
    dequeued = 0

    while queue:
        u = queue.popleft()
        dequeued += 1

        if u == destination:
            moves = reconstruct_moves(state, start, destination)
            logger.debug(
                f"Shortest-path search {start} -> {destination}: "
                f"{len(moves)} moves after {dequeued} dequeues"
            )
            return PathResult(found=True, moves=moves)

        next_distance = state.distance(u) + 1
        for v in reachable_cells(grid, u):
            if state.distance(v) is not None:
                continue
            state.set_distance(v, next_distance)
            state.set_predecessor(v, u)
            queue.append(v)

    logger.debug(f"Shortest-path search {start} -> {destination}: no path ({dequeued} dequeues)")
    return PathResult.not_found()

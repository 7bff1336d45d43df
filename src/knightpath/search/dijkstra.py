"""Dijkstra's algorithm for the cheapest path over terrain.

Edge costs come from the destination cell kind, and teleport cells jump to
each other for free. Ties between equal tentative distances are broken by
row then column, so the result is reproducible.
"""

import logging

from knightpath.game.adjacency import neighbors
from knightpath.game.position import Position
from knightpath.game.terrain import TerrainGrid
from knightpath.search.pqueue import IndexedMinHeap
from knightpath.search.state import PathResult, SearchState, reconstruct_moves

logger = logging.getLogger(__name__)

PriorityKey = tuple[int, int, int]


def _priority(distance: int, pos: Position) -> PriorityKey:
    return (distance, pos.y, pos.x)


def settle_distances(
    grid: TerrainGrid, start: Position, destination: Position | None = None
) -> tuple[SearchState, set[Position]]:
    """Run Dijkstra from start until destination is settled.

    With no destination every reachable cell is settled. Only cells with a
    known tentative distance are queued, so the loop ends once the rest are
    unreachable; their distance stays unknown.

    Returns:
        The state table and the set of settled cells
    """
    state = SearchState(grid)
    settled: set[Position] = set()
    queue: IndexedMinHeap[Position] = IndexedMinHeap()

    state.set_distance(start, 0)
    queue.push(start, _priority(0, start))

    while queue:
        (u_dist, _, _), u = queue.pop()
        settled.add(u)

        if u == destination:
            break

        for v, weight in neighbors(grid, u):
            if v in settled:
                continue
            new_dist = u_dist + weight
            old_dist = state.distance(v)
            if old_dist is None or new_dist < old_dist:
                state.set_distance(v, new_dist)
                state.set_predecessor(v, u)
                queue.push_or_decrease(v, _priority(new_dist, v))

    return state, settled


def find_cheapest_path(grid: TerrainGrid, start: Position, destination: Position) -> PathResult:
    """Find a minimum-cost path from start to destination."""
    state, settled = settle_distances(grid, start, destination)
    cost = state.distance(destination)
    if cost is None or destination not in settled:
        logger.debug(
            f"Cheapest-path search {start} -> {destination}: no path "
            f"({len(settled)} cells settled)"
        )
        return PathResult.not_found()

    moves = reconstruct_moves(state, start, destination)
    logger.debug(
        f"Cheapest-path search {start} -> {destination}: cost {cost}, "
        f"{len(moves)} moves, {len(settled)} cells settled"
    )
    return PathResult(found=True, moves=moves, cost=cost)

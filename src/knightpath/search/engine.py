"""Dispatch a path search by mode."""

import logging
from enum import Enum

from knightpath.errors import OutOfBoundsError
from knightpath.game.position import Position
from knightpath.game.terrain import TerrainGrid
from knightpath.search.bfs import find_shortest_path
from knightpath.search.dfs import find_any_path, find_longest_path
from knightpath.search.dijkstra import find_cheapest_path
from knightpath.search.state import PathResult

logger = logging.getLogger(__name__)


class SearchMode(Enum):
    """Goal of a path search."""

    ANY = "any"
    SHORTEST = "shortest"
    LONGEST = "longest"
    CHEAPEST = "cheapest"

    @property
    def is_exhaustive(self) -> bool:
        """Whether the mode may explore every simple path on the board."""
        return self in (SearchMode.ANY, SearchMode.LONGEST)


_SEARCHES = {
    SearchMode.ANY: find_any_path,
    SearchMode.SHORTEST: find_shortest_path,
    SearchMode.LONGEST: find_longest_path,
    SearchMode.CHEAPEST: find_cheapest_path,
}


def check_endpoints(grid: TerrainGrid, start: Position, destination: Position) -> None:
    """Refuse endpoints that are off the grid.

    Raises:
        OutOfBoundsError: If start or destination is outside the grid
    """
    if not grid.in_bounds(start):
        raise OutOfBoundsError("Start", start, grid.depth, grid.width)
    if not grid.in_bounds(destination):
        raise OutOfBoundsError("Destination", destination, grid.depth, grid.width)


def find_path(
    mode: SearchMode, grid: TerrainGrid, start: Position, destination: Position
) -> PathResult:
    """Search for a path from start to destination.

    Raises:
        OutOfBoundsError: If start or destination is outside the grid
    """
    check_endpoints(grid, start, destination)
    logger.debug(
        f"Running {mode.value} search on {grid.depth}x{grid.width} grid: "
        f"{start} -> {destination}"
    )
    return _SEARCHES[mode](grid, start, destination)

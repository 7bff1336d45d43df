"""Search engine: move validation and the four path searches."""

from knightpath.search.bfs import find_shortest_path
from knightpath.search.dfs import find_any_path, find_longest_path
from knightpath.search.dijkstra import find_cheapest_path, settle_distances
from knightpath.search.engine import SearchMode, check_endpoints, find_path
from knightpath.search.pqueue import IndexedMinHeap
from knightpath.search.state import PathResult, SearchState, reconstruct_moves
from knightpath.search.validate import (
    FailureReason,
    ValidationFailure,
    ValidationResult,
    validate_moves,
)

__all__ = [
    # State
    "PathResult",
    "SearchState",
    "reconstruct_moves",
    "IndexedMinHeap",
    # Validation
    "FailureReason",
    "ValidationFailure",
    "ValidationResult",
    "validate_moves",
    # Searches
    "find_any_path",
    "find_shortest_path",
    "find_longest_path",
    "find_cheapest_path",
    "settle_distances",
    # Engine
    "SearchMode",
    "check_endpoints",
    "find_path",
]

"""Backtracking depth-first searches over simple paths.

Both searches keep an explicit frame stack instead of recursing, so board
size is bounded by memory rather than the interpreter's recursion limit.
A cell is marked while it is on the current path and unmarked when the
search backtracks past it, so it can be reached again by another route.

These searches are exhaustive in the worst case and meant for small boards.
"""

import logging
from collections.abc import Iterator

from knightpath.game.adjacency import reachable_cells
from knightpath.game.position import Move, Position
from knightpath.game.terrain import TerrainGrid
from knightpath.search.state import PathResult, SearchState, reconstruct_moves

logger = logging.getLogger(__name__)

Frame = tuple[Position, Iterator[Position]]


def _open_frame(grid: TerrainGrid, state: SearchState, u: Position) -> Frame:
    state.set_on_path(u, True)
    return (u, iter(reachable_cells(grid, u)))


def _moves_along(cells: list[Position]) -> list[Move]:
    return [b - a for a, b in zip(cells, cells[1:])]


def find_any_path(grid: TerrainGrid, start: Position, destination: Position) -> PathResult:
    """Find the first path to destination in depth-first, rule order."""
    if start == destination:
        return PathResult(found=True)

    state = SearchState(grid)
    stack: list[Frame] = [_open_frame(grid, state, start)]
    expanded = 1

    while stack:
        u, pending = stack[-1]
        for v in pending:
            if state.is_on_path(v):
                continue
            state.set_predecessor(v, u)
            if v == destination:
                moves = reconstruct_moves(state, start, destination)
                logger.debug(
                    f"Any-path search {start} -> {destination}: "
                    f"{len(moves)} moves after {expanded} expansions"
                )
                return PathResult(found=True, moves=moves)
            stack.append(_open_frame(grid, state, v))
            expanded += 1
            break
        else:
            stack.pop()
            state.set_on_path(u, False)

    logger.debug(f"Any-path search {start} -> {destination}: no path ({expanded} expansions)")
    return PathResult.not_found()


def find_longest_path(grid: TerrainGrid, start: Position, destination: Position) -> PathResult:
    """Find the longest simple path to destination by exhaustive search.

    The destination ends a path; it is never passed through. Among paths of
    equal length the first one found in rule order is kept.
    """
    if start == destination:
        return PathResult(found=True)

    state = SearchState(grid)
    stack: list[Frame] = [_open_frame(grid, state, start)]
    best: list[Position] | None = None
    completed = 0

    while stack:
        u, pending = stack[-1]
        for v in pending:
            if state.is_on_path(v):
                continue
            if v == destination:
                completed += 1
                if best is None or len(stack) + 1 > len(best):
                    best = [cell for cell, _ in stack] + [v]
                continue
            stack.append(_open_frame(grid, state, v))
            break
        else:
            stack.pop()
            state.set_on_path(u, False)

    if best is None:
        logger.debug(f"Longest-path search {start} -> {destination}: no path")
        return PathResult.not_found()

    logger.debug(
        f"Longest-path search {start} -> {destination}: "
        f"{len(best) - 1} moves, {completed} complete paths examined"
    )
    return PathResult(found=True, moves=_moves_along(best))

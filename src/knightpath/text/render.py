"""Human-readable dumps of boards, search state and results."""

from knightpath.game.position import Move, Position
from knightpath.game.terrain import TerrainGrid
from knightpath.search.state import PathResult, SearchState
from knightpath.search.validate import ValidationResult

# Printed when a plain search finds nothing
NO_PATH_PLAIN = "NULL"
# Printed when a weighted search finds nothing
NO_PATH_WEIGHTED = "NO_PATH"


def format_move(move: Move) -> str:
    """Format a move as signed x, tab, signed y."""
    return f"{move.x:+d}\t{move.y:+d}"


def format_moves(moves: list[Move]) -> list[str]:
    return [format_move(move) for move in moves]


def format_path_result(result: PathResult, weighted: bool = False) -> list[str]:
    """Format a search result as output lines.

    Weighted results start with the total cost. A missing path is a single
    sentinel line.
    """
    if not result.found:
        return [NO_PATH_WEIGHTED if weighted else NO_PATH_PLAIN]

    lines: list[str] = []
    if weighted:
        lines.append(str(result.cost))
    lines.extend(format_moves(result.moves))
    return lines


def render_knight_board(grid: TerrainGrid, knight: Position) -> str:
    """Draw the board with "K" at the knight's position."""
    lines = []
    for y in range(grid.depth):
        row = "".join(
            "K " if knight.x == x and knight.y == y else ". " for x in range(grid.width)
        )
        lines.append(row)
    return "\n".join(lines) + "\n"


def render_terrain(grid: TerrainGrid) -> str:
    """Draw the terrain using the cell symbols."""
    lines = ["".join(f"{kind.symbol} " for kind in row) for row in grid.rows()]
    return "\n".join(lines) + "\n"


def render_distances(state: SearchState) -> str:
    """Draw the distance table, -1 marking unknown distances."""
    lines = ["".join(f"{d:>6} " for d in row) for row in state.distance_rows()]
    return "\n".join(lines) + "\n"


def render_config(depth: int, width: int, start: Position, verbose: bool) -> str:
    return (
        f"depth: {depth}\n"
        f"width: {width}\n"
        f"start: {start}\n"
        f"verbose: {verbose}\n"
    )


def render_validation_trace(grid: TerrainGrid, result: ValidationResult) -> str:
    """Narrate a validation run: the starting board, each applied move, then any failure."""
    parts: list[str] = []
    if result.positions:
        parts.append(render_knight_board(grid, result.positions[0]))
    for prev, cur in zip(result.positions, result.positions[1:]):
        parts.append(f"Apply knight move {cur - prev}.\n")
        parts.append(render_knight_board(grid, cur))
    if result.failure is not None:
        parts.append(result.failure.describe(grid) + "\n")
    return "".join(parts)

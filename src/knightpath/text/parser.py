"""Parsers for the textual grid, header line and move list formats."""

from knightpath.errors import GridConstructionError, InputFormatError
from knightpath.game.position import Move, Position
from knightpath.game.terrain import CELL_SYMBOLS, CellKind, TerrainGrid


def parse_grid_string(grid_str: str) -> TerrainGrid:
    """Parse a terrain grid, one row per line.

    Grid format:
        - One character per cell; whitespace between cells is ignored
        - "." open, "W" water, "R" rock, "B" barrier, "T" teleport, "L" lava
        - Blank lines are skipped
        - Every row must have the same number of cells

    Args:
        grid_str: Multi-line grid text

    Returns:
        TerrainGrid with the parsed cells

    Raises:
        GridConstructionError: If a symbol is unknown, rows differ in width,
            or there are no rows
    """
    return TerrainGrid.from_rows(parse_grid_rows(grid_str.splitlines()))


def parse_grid_rows(lines: list[str]) -> list[list[CellKind]]:
    """Parse grid lines into rows of cell kinds, checking widths as it goes."""
    rows: list[list[CellKind]] = []
    width = -1

    for line in lines:
        symbols = "".join(line.split())
        if not symbols:
            continue

        row: list[CellKind] = []
        for symbol in symbols:
            if symbol not in CELL_SYMBOLS:
                raise GridConstructionError(f"Unknown cell {symbol}.")
            row.append(CELL_SYMBOLS[symbol])

        if width < 0:
            width = len(row)
        elif len(row) != width:
            raise GridConstructionError(
                f"At row {len(rows)}, width is {len(row)}, but previous row width is {width}."
            )
        rows.append(row)

    if not rows:
        raise GridConstructionError("Grid has no rows")
    return rows


def parse_int_line(line: str, minimum: int, maximum: int | None = None) -> list[int]:
    """Parse a line of whitespace-separated integers.

    Raises:
        InputFormatError: If a token is not an integer or the count is out of range
    """
    tokens = line.split()
    try:
        values = [int(token) for token in tokens]
    except ValueError:
        raise InputFormatError(f"Expected integers, got: {line.strip()!r}") from None

    if len(values) < minimum:
        raise InputFormatError(f"Expected at least {minimum} integers, got {len(values)}")
    if maximum is not None and len(values) > maximum:
        raise InputFormatError(f"Expected at most {maximum} integers, got {len(values)}")
    return values


def parse_endpoints(line: str) -> tuple[Position, Position]:
    """Parse "startX startY endX endY"."""
    sx, sy, ex, ey = parse_int_line(line, 4, 4)
    return Position(sx, sy), Position(ex, ey)


def parse_board_header(line: str) -> tuple[int, int, Position, Position]:
    """Parse "depth width startX startY endX endY"."""
    depth, width, sx, sy, ex, ey = parse_int_line(line, 6, 6)
    return depth, width, Position(sx, sy), Position(ex, ey)


def parse_moves(lines: list[str]) -> list[Move]:
    """Parse one "dx dy" pair per line, skipping blank lines.

    Raises:
        InputFormatError: If a line is not exactly two integers
    """
    moves: list[Move] = []
    for line in lines:
        if not line.strip():
            continue
        dx, dy = parse_int_line(line, 2, 2)
        moves.append(Move(dx, dy))
    return moves

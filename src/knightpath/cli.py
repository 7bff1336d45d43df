"""Command line front end.

Usage:
    knightpath validate [--verbose] < moves.txt
    knightpath any|shortest|longest < board.txt
    knightpath cheapest [--distances] < terrain.txt
    knightpath serve [--host HOST] [--port PORT]

Input formats:
    validate: "depth width startX startY [verbose]" then one "dx dy" per line.
        Values missing from the header fall back to the settings defaults.
    any/shortest/longest: "depth width startX startY endX endY".
    cheapest: "startX startY endX endY" then the terrain grid.

Exit status is 0 on success, 1 when validation rejects the moves, and 2 when
the input cannot be parsed or an endpoint is off the board.
"""

import argparse
import logging
import sys
from typing import TextIO

from knightpath.errors import KnightPathError
from knightpath.game.position import Position
from knightpath.game.terrain import TerrainGrid
from knightpath.logs import setup_logging
from knightpath.search.dijkstra import settle_distances
from knightpath.search.engine import SearchMode, find_path
from knightpath.search.validate import validate_moves
from knightpath.settings import get_settings
from knightpath.text.parser import (
    parse_board_header,
    parse_endpoints,
    parse_grid_string,
    parse_int_line,
    parse_moves,
)
from knightpath.text.render import (
    format_path_result,
    render_config,
    render_distances,
    render_terrain,
    render_validation_trace,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="knightpath",
        description="Validate knight move sequences and find knight paths.",
    )
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    sub = parser.add_subparsers(dest="command", required=True)

    validate = sub.add_parser("validate", help="Check a move sequence against the board")
    validate.add_argument("--verbose", action="store_true", help="Print board dumps")

    sub.add_parser("any", help="Find any path on a plain board")
    sub.add_parser("shortest", help="Find a path with the fewest moves")
    sub.add_parser("longest", help="Find the longest simple path")

    cheapest = sub.add_parser("cheapest", help="Find the cheapest path over terrain")
    cheapest.add_argument(
        "--distances", action="store_true", help="Also dump the distance table to stderr"
    )

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)

    return parser


def _write_lines(out: TextIO, lines: list[str]) -> None:
    for line in lines:
        out.write(line + "\n")


def run_validate(args: argparse.Namespace, stdin: TextIO, stdout: TextIO) -> int:
    """Replay moves from stdin; 0 if they are all valid, 1 otherwise."""
    settings = get_settings()
    lines = stdin.read().splitlines()

    header = parse_int_line(lines[0], 0, 5) if lines else []
    depth, width = settings.default_depth, settings.default_width
    start_x, start_y = settings.default_start
    verbose = args.verbose or settings.verbose
    if len(header) > 0:
        depth = header[0]
    if len(header) > 1:
        width = header[1]
    if len(header) > 2:
        start_x = header[2]
    if len(header) > 3:
        start_y = header[3]
    if len(header) > 4:
        verbose = verbose or bool(header[4])

    grid = TerrainGrid.plain(depth, width)
    start = Position(start_x, start_y)
    moves = parse_moves(lines[1:])

    result = validate_moves(grid, start, moves)
    if verbose:
        stdout.write(render_config(depth, width, start, verbose))
        stdout.write(render_validation_trace(grid, result))

    return EXIT_OK if result.valid else EXIT_REJECTED


def run_plain_search(mode: SearchMode, stdin: TextIO, stdout: TextIO) -> int:
    """Search an all-open board described by a single header line."""
    line = stdin.readline()
    depth, width, start, end = parse_board_header(line)
    grid = TerrainGrid.plain(depth, width)

    result = find_path(mode, grid, start, end)
    _write_lines(stdout, format_path_result(result))
    return EXIT_OK


def run_cheapest(args: argparse.Namespace, stdin: TextIO, stdout: TextIO, stderr: TextIO) -> int:
    """Search a terrain grid; the first line holds the endpoints."""
    start, end = parse_endpoints(stdin.readline())
    grid = parse_grid_string(stdin.read())
    logger.debug(f"Parsed {grid.depth}x{grid.width} terrain:\n{render_terrain(grid)}")

    result = find_path(SearchMode.CHEAPEST, grid, start, end)
    _write_lines(stdout, format_path_result(result, weighted=True))

    if args.distances:
        state, _ = settle_distances(grid, start)
        stderr.write(render_distances(state))
    return EXIT_OK


def run_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("knightpath.main:app", host=args.host, port=args.port)
    return EXIT_OK


def main(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Main entry point."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    args = build_parser().parse_args(argv)
    setup_logging(args.log_level or get_settings().log_level, stream=stderr)

    try:
        match args.command:
            case "validate":
                return run_validate(args, stdin, stdout)
            case "cheapest":
                return run_cheapest(args, stdin, stdout, stderr)
            case "serve":
                return run_serve(args)
            case _:
                return run_plain_search(SearchMode(args.command), stdin, stdout)
    except KnightPathError as e:
        logger.error(f"Rejected input: {e}")
        print(f"Error: {e}", file=stderr)
        return EXIT_BAD_INPUT


if __name__ == "__main__":
    sys.exit(main())

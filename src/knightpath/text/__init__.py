"""Text formats: grid and move-list parsing, board and result rendering."""

from knightpath.text.parser import (
    parse_board_header,
    parse_endpoints,
    parse_grid_rows,
    parse_grid_string,
    parse_int_line,
    parse_moves,
)
from knightpath.text.render import (
    NO_PATH_PLAIN,
    NO_PATH_WEIGHTED,
    format_move,
    format_moves,
    format_path_result,
    render_config,
    render_distances,
    render_knight_board,
    render_terrain,
    render_validation_trace,
)

__all__ = [
    # Parsing
    "parse_grid_string",
    "parse_grid_rows",
    "parse_int_line",
    "parse_endpoints",
    "parse_board_header",
    "parse_moves",
    # Rendering
    "NO_PATH_PLAIN",
    "NO_PATH_WEIGHTED",
    "format_move",
    "format_moves",
    "format_path_result",
    "render_config",
    "render_distances",
    "render_knight_board",
    "render_terrain",
    "render_validation_trace",
]

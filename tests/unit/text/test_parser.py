"""Tests for grid, header and move-list parsing."""

import pytest

from knightpath.errors import GridConstructionError, InputFormatError
from knightpath.game.position import Move, Position
from knightpath.game.terrain import CellKind
from knightpath.text.parser import (
    parse_board_header,
    parse_endpoints,
    parse_grid_string,
    parse_int_line,
    parse_moves,
)


class TestParseGridString:
    """Tests for parse_grid_string."""

    def test_parse_all_symbols(self):
        """Test every cell symbol."""
        grid = parse_grid_string(
            """
. W R
B T L
"""
        )

        assert grid.depth == 2
        assert grid.width == 3
        assert [kind for row in grid.rows() for kind in row] == [
            CellKind.OPEN,
            CellKind.WATER,
            CellKind.ROCK,
            CellKind.BARRIER,
            CellKind.TELEPORT,
            CellKind.LAVA,
        ]
        assert grid.teleports == {4}

    def test_parse_compact_rows(self):
        """Test rows written without spaces."""
        grid = parse_grid_string("..T\n...\nT..\n")

        assert grid.width == 3
        assert grid.teleport_peers(Position(2, 0)) == [Position(0, 2)]

    def test_unknown_symbol(self):
        """Test that unknown symbols are rejected."""
        with pytest.raises(GridConstructionError, match="Unknown cell X"):
            parse_grid_string("..\n.X\n")

    def test_inconsistent_width(self):
        """Test that a row of different width is rejected with its index."""
        with pytest.raises(
            GridConstructionError, match="At row 2, width is 2, but previous row width is 3"
        ):
            parse_grid_string("...\n...\n..\n")

    def test_empty(self):
        """Test that an empty grid is rejected."""
        with pytest.raises(GridConstructionError):
            parse_grid_string("\n\n")


class TestParseIntLine:
    """Tests for integer line parsing."""

    def test_parse(self):
        """Test signed integers separated by any whitespace."""
        assert parse_int_line("  8\t8 -1  +2 ", 4) == [8, 8, -1, 2]

    def test_not_integers(self):
        """Test that non-integer tokens are rejected."""
        with pytest.raises(InputFormatError, match="Expected integers"):
            parse_int_line("8 eight", 2)

    def test_too_few(self):
        """Test the minimum count."""
        with pytest.raises(InputFormatError, match="at least 4"):
            parse_int_line("1 2 3", 4)

    def test_too_many(self):
        """Test the maximum count."""
        with pytest.raises(InputFormatError, match="at most 2"):
            parse_int_line("1 2 3", 2, 2)

    def test_endpoints(self):
        """Test "startX startY endX endY"."""
        assert parse_endpoints("0 1 2 3") == (Position(0, 1), Position(2, 3))

    def test_board_header(self):
        """Test "depth width startX startY endX endY"."""
        assert parse_board_header("8 6 1 2 3 3") == (8, 6, Position(1, 2), Position(3, 3))


class TestParseMoves:
    """Tests for move list parsing."""

    def test_parse(self):
        """Test one move per line, skipping blanks."""
        assert parse_moves(["2 1", "", "  -1 -2", "+1\t+2"]) == [
            Move(2, 1),
            Move(-1, -2),
            Move(1, 2),
        ]

    def test_bad_line(self):
        """Test that a line with one value is rejected."""
        with pytest.raises(InputFormatError):
            parse_moves(["2 1", "3"])

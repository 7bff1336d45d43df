"""Tests for knight adjacency over terrain."""

from knightpath.game.adjacency import (
    barrier_midpoint,
    crosses_barrier,
    knight_neighbors,
    neighbors,
    reachable_cells,
)
from knightpath.game.position import Move, Position
from knightpath.game.rules import legal_moves
from knightpath.game.terrain import CellKind, TerrainGrid


class TestKnightNeighbors:
    """Tests for plain knight moves."""

    def test_corner(self, board8):
        """Test that only on-board moves are produced, in rule order."""
        assert knight_neighbors(board8, Position(0, 0)) == [Position(1, 2), Position(2, 1)]

    def test_center_has_eight(self, board8):
        """Test an unobstructed central cell."""
        u = Position(3, 3)
        assert knight_neighbors(board8, u) == [u + m for m in legal_moves()]

    def test_rock_destination_excluded(self, board8):
        """Test that rock cells cannot be landed on."""
        board8.set_kind(Position(1, 2), CellKind.ROCK)

        assert knight_neighbors(board8, Position(0, 0)) == [Position(2, 1)]

    def test_barrier_destination_excluded(self, board8):
        """Test that barrier cells cannot be landed on."""
        board8.set_kind(Position(2, 1), CellKind.BARRIER)

        assert knight_neighbors(board8, Position(0, 0)) == [Position(1, 2)]

    def test_water_and_lava_are_passable(self, board8):
        """Test that costly cells are still destinations."""
        board8.set_kind(Position(1, 2), CellKind.WATER)
        board8.set_kind(Position(2, 1), CellKind.LAVA)

        assert knight_neighbors(board8, Position(0, 0)) == [Position(1, 2), Position(2, 1)]


class TestBarrierCrossing:
    """Tests for the midpoint barrier rule."""

    def test_midpoint_on_long_axis(self):
        """Test the midpoint for horizontal and vertical long axes."""
        u = Position(4, 4)
        assert barrier_midpoint(u, Move(2, 1)) == Position(5, 4)
        assert barrier_midpoint(u, Move(-2, -1)) == Position(3, 4)
        assert barrier_midpoint(u, Move(1, 2)) == Position(4, 5)
        assert barrier_midpoint(u, Move(-1, -2)) == Position(4, 3)

    def test_midpoint_is_adjacent_for_every_move(self):
        """Test that each knight move has one midpoint one step along its long axis."""
        u = Position(4, 4)
        for move in legal_moves():
            mid = barrier_midpoint(u, move)
            delta = mid - u
            assert abs(delta.x) + abs(delta.y) == 1

    def test_barrier_crossing_removes_edge(self, board8):
        """Test that a (2, 1) move over a barrier is absent though both ends are open."""
        u = Position(2, 2)
        board8.set_kind(Position(3, 2), CellKind.BARRIER)

        assert crosses_barrier(board8, u, Move(2, 1))
        assert crosses_barrier(board8, u, Move(2, -1))
        assert not crosses_barrier(board8, u, Move(1, 2))
        assert board8.kind_at(Position(4, 3)) == CellKind.OPEN

        assert knight_neighbors(board8, u) == [
            Position(3, 4),
            Position(3, 0),
            Position(1, 4),
            Position(0, 3),
            Position(0, 1),
            Position(1, 0),
        ]

    def test_barrier_off_midpoint_does_not_block(self, board8):
        """Test that a barrier beside the move, not under it, is ignored."""
        u = Position(2, 2)
        board8.set_kind(Position(3, 3), CellKind.BARRIER)

        assert Position(4, 3) in knight_neighbors(board8, u)


class TestNeighbors:
    """Tests for weighted neighbors including teleports."""

    def test_costs_follow_destination(self, board8):
        """Test edge costs by destination kind."""
        board8.set_kind(Position(1, 2), CellKind.WATER)
        board8.set_kind(Position(2, 1), CellKind.LAVA)

        assert neighbors(board8, Position(0, 0)) == [(Position(1, 2), 2), (Position(2, 1), 5)]

    def test_entering_teleport_is_free(self, board8):
        """Test that a knight move onto a teleport costs nothing."""
        board8.set_kind(Position(1, 2), CellKind.TELEPORT)

        assert neighbors(board8, Position(0, 0)) == [(Position(1, 2), 0), (Position(2, 1), 1)]

    def test_teleport_fan_out(self, board8):
        """Test that a teleport reaches every other teleport at zero cost."""
        for pos in (Position(0, 0), Position(0, 7), Position(7, 7)):
            board8.set_kind(pos, CellKind.TELEPORT)

        assert neighbors(board8, Position(0, 0)) == [
            (Position(1, 2), 1),
            (Position(2, 1), 1),
            (Position(0, 7), 0),
            (Position(7, 7), 0),
        ]

    def test_teleport_ignores_obstacles(self):
        """Test that teleport jumps skip rock and barrier filtering."""
        grid = TerrainGrid.plain(5, 5)
        for x in range(5):
            grid.set_kind(Position(x, 2), CellKind.BARRIER)
        grid.set_kind(Position(1, 2), CellKind.ROCK)
        grid.set_kind(Position(0, 0), CellKind.TELEPORT)
        grid.set_kind(Position(4, 4), CellKind.TELEPORT)

        assert (Position(4, 4), 0) in neighbors(grid, Position(0, 0))
        assert (Position(0, 0), 0) in neighbors(grid, Position(4, 4))

    def test_reachable_cells_deduplicates(self, board8):
        """Test that a teleport peer one knight move away is listed once."""
        board8.set_kind(Position(0, 0), CellKind.TELEPORT)
        board8.set_kind(Position(1, 2), CellKind.TELEPORT)

        assert reachable_cells(board8, Position(0, 0)) == [Position(1, 2), Position(2, 1)]

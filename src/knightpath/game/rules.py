"""Knight movement rule.

The legal move table is fixed. Its order is the exploration order of every
search mode, so it also decides which of several equal paths is returned.
"""

from knightpath.game.position import Move

KNIGHT_MOVES: tuple[Move, ...] = (
    Move(+1, +2),
    Move(+2, +1),
    Move(+2, -1),
    Move(+1, -2),
    Move(-1, +2),
    Move(-2, +1),
    Move(-2, -1),
    Move(-1, -2),
)

_KNIGHT_MOVE_SET = frozenset(KNIGHT_MOVES)


def is_legal_move(move: Move) -> bool:
    """Check if a displacement is one of the 8 knight moves."""
    return move in _KNIGHT_MOVE_SET


def legal_moves() -> tuple[Move, ...]:
    """Get the knight moves in exploration order."""
    return KNIGHT_MOVES

"""Replay a prescribed move sequence against the board and the knight rule."""

import logging
from dataclasses import dataclass, field
from enum import Enum

from knightpath.game.position import Move, Position
from knightpath.game.rules import is_legal_move
from knightpath.game.terrain import TerrainGrid

logger = logging.getLogger(__name__)


class FailureReason(Enum):
    """Why a move sequence was rejected."""

    START_OUTSIDE_BOARD = "start_outside_board"
    ILLEGAL_MOVE = "illegal_move"
    LEFT_BOARD = "left_board"


@dataclass
class ValidationFailure:
    """The first problem found in a move sequence.

    Attributes:
        reason: What went wrong
        step: Index of the offending move (-1 for a bad start position)
        move: The offending move, if any
        position: Knight position where the failure was detected; for
            LEFT_BOARD this is the off-board position the move led to
    """

    reason: FailureReason
    step: int
    move: Move | None
    position: Position

    def describe(self, grid: TerrainGrid) -> str:
        match self.reason:
            case FailureReason.START_OUTSIDE_BOARD:
                return (
                    f"Initial position {self.position} is not inside the "
                    f"{grid.depth}x{grid.width} board."
                )
            case FailureReason.ILLEGAL_MOVE:
                return f"Move {self.move} is not a valid knight move."
            case FailureReason.LEFT_BOARD:
                return (
                    f"After applying knight move {self.move}, new position "
                    f"{self.position} is outside the board."
                )


@dataclass
class ValidationResult:
    """Outcome of replaying a move sequence.

    Attributes:
        valid: True if every move was legal and stayed on the board
        start: Starting position of the knight
        final_position: Last on-board position reached
        steps_applied: Number of moves applied before stopping
        failure: The first failure, if any
        positions: Knight positions after each applied move, start first
    """

    valid: bool
    start: Position
    final_position: Position
    steps_applied: int = 0
    failure: ValidationFailure | None = None
    positions: list[Position] = field(default_factory=list)


def validate_moves(grid: TerrainGrid, start: Position, moves: list[Move]) -> ValidationResult:
    """Check a move sequence step by step, stopping at the first failure.

    Terrain is not consulted; only the board bounds and the knight rule apply.
    """
    if not grid.in_bounds(start):
        failure = ValidationFailure(
            reason=FailureReason.START_OUTSIDE_BOARD, step=-1, move=None, position=start
        )
        logger.info(failure.describe(grid))
        return ValidationResult(
            valid=False, start=start, final_position=start, failure=failure
        )

    pos = start
    positions = [start]
    for step, move in enumerate(moves):
        if not is_legal_move(move):
            failure = ValidationFailure(
                reason=FailureReason.ILLEGAL_MOVE, step=step, move=move, position=pos
            )
            logger.info(failure.describe(grid))
            return ValidationResult(
                valid=False,
                start=start,
                final_position=pos,
                steps_applied=step,
                failure=failure,
                positions=positions,
            )

        new_pos = pos + move
        if not grid.in_bounds(new_pos):
            failure = ValidationFailure(
                reason=FailureReason.LEFT_BOARD, step=step, move=move, position=new_pos
            )
            logger.info(failure.describe(grid))
            return ValidationResult(
                valid=False,
                start=start,
                final_position=pos,
                steps_applied=step,
                failure=failure,
                positions=positions,
            )

        pos = new_pos
        positions.append(pos)

    logger.debug(f"Validated {len(moves)} moves from {start}, ending at {pos}")
    return ValidationResult(
        valid=True,
        start=start,
        final_position=pos,
        steps_applied=len(moves),
        positions=positions,
    )

"""Path validation and search API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from knightpath.errors import KnightPathError
from knightpath.game.position import Position
from knightpath.game.terrain import TerrainGrid
from knightpath.search.engine import SearchMode, find_path
from knightpath.search.validate import validate_moves
from knightpath.settings import Settings, get_settings
from knightpath.text.parser import parse_grid_string

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/paths", tags=["paths"])


# Request/response models


class PointModel(BaseModel):
    """A board cell or a move displacement."""

    x: int
    y: int

    @classmethod
    def from_position(cls, pos: Position) -> "PointModel":
        return cls(x=pos.x, y=pos.y)

    def to_position(self) -> Position:
        return Position(self.x, self.y)


class ValidateRequest(BaseModel):
    """Move sequence to replay on a plain board.

    Omitted dimensions fall back to the configured default board.
    """

    depth: int | None = Field(default=None, gt=0)
    width: int | None = Field(default=None, gt=0)
    start: PointModel
    moves: list[PointModel] = Field(default_factory=list)


class FailureResponse(BaseModel):
    """First failure found while validating."""

    reason: str
    step: int
    move: PointModel | None
    position: PointModel
    message: str


class ValidateResponse(BaseModel):
    """Validation outcome."""

    valid: bool
    steps_applied: int = Field(alias="stepsApplied")
    final_position: PointModel = Field(alias="finalPosition")
    failure: FailureResponse | None = None

    model_config = {"populate_by_name": True}


class SearchRequest(BaseModel):
    """Path search request.

    When grid is given its rows are parsed as terrain; otherwise a plain
    depth x width board is used, defaulting to the configured board size.
    """

    mode: SearchMode
    start: PointModel
    end: PointModel
    grid: list[str] | None = None
    depth: int | None = Field(default=None, gt=0)
    width: int | None = Field(default=None, gt=0)


class SearchResponse(BaseModel):
    """Path search outcome."""

    mode: SearchMode
    found: bool
    cost: int | None = None
    num_moves: int = Field(alias="numMoves")
    moves: list[PointModel]

    model_config = {"populate_by_name": True}


# Helpers


def _board_size(
    depth: int | None, width: int | None, settings: Settings
) -> tuple[int, int]:
    """Fill in omitted board dimensions from settings."""
    return (
        settings.default_depth if depth is None else depth,
        settings.default_width if width is None else width,
    )


# Endpoints


@router.post("/validate", response_model=ValidateResponse)
async def validate(
    request: ValidateRequest,
    settings: Annotated[Settings, Depends(get_settings)],
) -> ValidateResponse:
    """Replay a move sequence and report the first failure, if any."""
    depth, width = _board_size(request.depth, request.width, settings)
    try:
        grid = TerrainGrid.plain(depth, width)
    except KnightPathError as e:
        raise HTTPException(status_code=400, detail=str(e)) from None

    result = validate_moves(
        grid, request.start.to_position(), [m.to_position() for m in request.moves]
    )

    failure = None
    if result.failure is not None:
        f = result.failure
        failure = FailureResponse(
            reason=f.reason.value,
            step=f.step,
            move=PointModel.from_position(f.move) if f.move is not None else None,
            position=PointModel.from_position(f.position),
            message=f.describe(grid),
        )

    return ValidateResponse(
        valid=result.valid,
        steps_applied=result.steps_applied,
        final_position=PointModel.from_position(result.final_position),
        failure=failure,
    )


@router.post("/search", response_model=SearchResponse)
async def search(
    request: SearchRequest,
    settings: Annotated[Settings, Depends(get_settings)],
) -> SearchResponse:
    """Run a path search.

    Boards larger than the configured limits are refused, with a lower limit
    for the exhaustive modes.
    """
    depth, width = _board_size(request.depth, request.width, settings)
    try:
        if request.grid is not None:
            grid = parse_grid_string("\n".join(request.grid))
        else:
            grid = TerrainGrid.plain(depth, width)
    except KnightPathError as e:
        raise HTTPException(status_code=400, detail=str(e)) from None

    if grid.size > settings.max_board_cells:
        raise HTTPException(
            status_code=400,
            detail=(
                f"Board has {grid.size} cells; searches are limited "
                f"to {settings.max_board_cells}"
            ),
        )

    if request.mode.is_exhaustive and grid.size > settings.max_exhaustive_cells:
        raise HTTPException(
            status_code=400,
            detail=(
                f"Board has {grid.size} cells; {request.mode.value} search is limited "
                f"to {settings.max_exhaustive_cells}"
            ),
        )

    try:
        result = find_path(
            request.mode, grid, request.start.to_position(), request.end.to_position()
        )
    except KnightPathError as e:
        raise HTTPException(status_code=400, detail=str(e)) from None

    logger.info(
        f"{request.mode.value} search {request.start.to_position()} -> "
        f"{request.end.to_position()}: found={result.found}"
    )
    return SearchResponse(
        mode=request.mode,
        found=result.found,
        cost=result.cost,
        num_moves=result.num_moves,
        moves=[PointModel.from_position(m) for m in result.moves],
    )

"""Pytest configuration and fixtures."""

import os

import pytest
from httpx import ASGITransport, AsyncClient

# Keep test output quiet and pin the search limits - must happen before app import
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["MAX_EXHAUSTIVE_CELLS"] = "64"
os.environ["MAX_BOARD_CELLS"] = "1000000"

# Clear the settings cache to pick up the new environment variables
from knightpath.settings import get_settings  # noqa: E402

get_settings.cache_clear()

from knightpath.game.terrain import TerrainGrid  # noqa: E402
from knightpath.main import app  # noqa: E402


@pytest.fixture
async def client() -> AsyncClient:
    """Create an async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def board8() -> TerrainGrid:
    """A plain 8x8 board."""
    return TerrainGrid.plain(8, 8)


@pytest.fixture
def board3() -> TerrainGrid:
    """A plain 3x3 board. Its eight outer cells form a single knight cycle."""
    return TerrainGrid.plain(3, 3)

"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from knightpath import __version__
from knightpath.api.router import api_router
from knightpath.logs import setup_logging
from knightpath.settings import get_settings

settings = get_settings()

# Set up logging on import
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    logger.info(
        f"Starting knightpath server (max_exhaustive_cells={settings.max_exhaustive_cells})"
    )
    yield
    logger.info("Shutting down knightpath server")


app = FastAPI(
    title="knightpath",
    description="Knight move validation and path finding API",
    version=__version__,
    lifespan=lifespan,
)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "knightpath API", "version": __version__}


# Include API routers
app.include_router(api_router, prefix=settings.api_prefix)

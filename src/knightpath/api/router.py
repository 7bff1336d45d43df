"""Main API router."""

from fastapi import APIRouter

from knightpath.api.paths import router as paths_router

api_router = APIRouter()
api_router.include_router(paths_router)

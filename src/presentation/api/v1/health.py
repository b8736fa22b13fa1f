"""Health check endpoint for service monitoring."""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src import __version__
from src.core.config import settings
from src.core.dependencies import get_hot_cache
from src.domain.interfaces import HotCache
from src.infrastructure.cache import RedisHotCache

health_router = APIRouter()


class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str
    hot_cache: str
    scoring_oracle: str


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Returns the health status of the service and the backends it reads from.",
)
async def health_check(
    hot_cache: Annotated[HotCache, Depends(get_hot_cache)],
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        hot_cache="redis" if isinstance(hot_cache, RedisHotCache) else "memory",
        scoring_oracle=settings.scoring_oracle_backend,
    )

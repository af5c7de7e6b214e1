"""
Admin API Routes
"""

from fastapi import APIRouter

from fantasy_soccer.api.dependencies import CacheDep
from fantasy_soccer.models import ApiResponse

router = APIRouter()


@router.post(
    "/clear-cache",
    response_model=ApiResponse[None],
    summary="Clear cache",
    description="Drop every cached response.",
)
def clear_cache(cache: CacheDep) -> ApiResponse[None]:
    """Clear the result cache."""
    cache.clear()
    return ApiResponse[None](success=True, message="Cache cleared")

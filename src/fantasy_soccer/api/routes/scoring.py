"""
Scoring API Routes

Endpoint for scoring arbitrary stats with a custom formula.
"""

from typing import Annotated

from fastapi import APIRouter, Body, HTTPException

from fantasy_soccer.models import ApiResponse, CustomScoreRequest, CustomScoreResult
from fantasy_soccer.services.players import PlayerService

router = APIRouter()


@router.post(
    "/custom-scoring",
    response_model=ApiResponse[CustomScoreResult],
    summary="Custom scoring",
    description="Calculate fantasy and average scores for the given stats and formula.",
)
def custom_scoring(
    body: Annotated[CustomScoreRequest | None, Body()] = None,
) -> ApiResponse[CustomScoreResult]:
    """Score stats with a caller-supplied formula."""
    if body is None or body.stats is None or body.formula is None:
        raise HTTPException(status_code=400, detail="Stats and formula required")

    result = PlayerService.custom_score(body.stats, body.formula)
    return ApiResponse[CustomScoreResult](success=True, data=result)

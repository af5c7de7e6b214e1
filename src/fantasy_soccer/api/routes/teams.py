"""
Team API Routes

Endpoints for validating team compositions and scoring a list of players.
"""

from typing import Annotated

from fastapi import APIRouter, Body, HTTPException

from fantasy_soccer.api.dependencies import PlayerServiceDep, SettingsDep
from fantasy_soccer.errors import PlayerNotFoundError
from fantasy_soccer.models import (
    ApiResponse,
    TeamScoreRequest,
    TeamScoreSummary,
    TeamValidationResult,
    ValidateTeamRequest,
)
from fantasy_soccer.services.scoring import validate_composition

router = APIRouter()


@router.post(
    "/validate-team",
    response_model=ApiResponse[TeamValidationResult],
    summary="Validate team composition",
    description="Check player counts per position against the league rules.",
)
def validate_team(
    settings: SettingsDep,
    body: Annotated[ValidateTeamRequest | None, Body()] = None,
) -> ApiResponse[TeamValidationResult]:
    """Validate a team composition, reporting every violated rule."""
    if body is None or body.composition is None:
        raise HTTPException(status_code=400, detail="Team composition required")

    validation = validate_composition(body.composition, settings.composition_rules())
    return ApiResponse[TeamValidationResult](success=True, data=validation)


@router.post(
    "/calculate-team-score",
    response_model=ApiResponse[TeamScoreSummary],
    summary="Calculate team score",
    description="Total and average fantasy score, composition and validity for a list of player IDs.",
)
def calculate_team_score(
    service: PlayerServiceDep,
    body: Annotated[TeamScoreRequest | None, Body()] = None,
) -> ApiResponse[TeamScoreSummary]:
    """Score a team given its player IDs."""
    if body is None or body.player_ids is None:
        raise HTTPException(status_code=400, detail="Player IDs array required")

    try:
        summary = service.calculate_team_score(body.player_ids)
    except PlayerNotFoundError:
        raise HTTPException(status_code=400, detail="One or more players not found")

    return ApiResponse[TeamScoreSummary](success=True, data=summary)

"""Pydantic models and schemas."""

from fantasy_soccer.models.api import ApiResponse
from fantasy_soccer.models.player import (
    POSITION_LABELS,
    Player,
    PlayerScore,
    PlayerStats,
    Position,
)
from fantasy_soccer.models.scoring import (
    DEFAULT_SCORING_FORMULA,
    CustomScoreRequest,
    CustomScoreResult,
    ScoringFormula,
)
from fantasy_soccer.models.team import (
    DEFAULT_COMPOSITION_RULES,
    CompositionRules,
    FantasyTeam,
    TeamComposition,
    TeamScoreRequest,
    TeamScoreSummary,
    TeamValidationResult,
    ValidateTeamRequest,
)

__all__ = [
    # API
    "ApiResponse",
    # Player
    "POSITION_LABELS",
    "Player",
    "PlayerScore",
    "PlayerStats",
    "Position",
    # Scoring
    "DEFAULT_SCORING_FORMULA",
    "CustomScoreRequest",
    "CustomScoreResult",
    "ScoringFormula",
    # Team
    "DEFAULT_COMPOSITION_RULES",
    "CompositionRules",
    "FantasyTeam",
    "TeamComposition",
    "TeamScoreRequest",
    "TeamScoreSummary",
    "TeamValidationResult",
    "ValidateTeamRequest",
]

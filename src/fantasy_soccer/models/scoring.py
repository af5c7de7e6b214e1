"""
Scoring formula models.
"""

from pydantic import ConfigDict, Field

from fantasy_soccer.models.base import CamelModel
from fantasy_soccer.models.player import PlayerStats


class ScoringFormula(CamelModel):
    """Per-statistic weights used to compute a fantasy score."""

    model_config = ConfigDict(frozen=True)

    goals_multiplier: float = 4
    assists_multiplier: float = 3
    clean_sheets_multiplier: float = 2
    yellow_cards_penalty: float = 1
    red_cards_penalty: float = 3


DEFAULT_SCORING_FORMULA = ScoringFormula()


class CustomScoreRequest(CamelModel):
    """Body of a custom scoring request."""

    stats: PlayerStats | None = None
    formula: ScoringFormula | None = None


class CustomScoreResult(CamelModel):
    """Fantasy score computed with a caller-supplied formula."""

    fantasy_score: float
    avg_score: float
    formula: ScoringFormula = Field(description="Formula the scores were computed with")

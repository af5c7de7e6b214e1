"""
Team composition and fantasy team models.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from fantasy_soccer.models.base import CamelModel
from fantasy_soccer.models.player import Player


class TeamComposition(CamelModel):
    """Number of selected players per position."""

    goalkeepers: int = Field(default=0, ge=0)
    defenders: int = Field(default=0, ge=0)
    midfielders: int = Field(default=0, ge=0)
    forwards: int = Field(default=0, ge=0)

    @property
    def total(self) -> int:
        return self.goalkeepers + self.defenders + self.midfielders + self.forwards


class TeamValidationResult(CamelModel):
    """Outcome of validating a team composition."""

    valid: bool
    errors: list[str] = Field(default_factory=list)


class CompositionRules(BaseModel):
    """League bounds a team composition is validated against."""

    model_config = ConfigDict(frozen=True)

    team_size: int = 11
    min_goalkeepers: int = 1
    max_goalkeepers: int = 3
    min_defenders: int = 3
    max_defenders: int = 6
    min_midfielders: int = 2
    max_midfielders: int = 5
    min_forwards: int = 1
    max_forwards: int = 3


DEFAULT_COMPOSITION_RULES = CompositionRules()


class FantasyTeam(CamelModel):
    """A saved 11-player fantasy team."""

    id: str
    name: str
    players: list[Player]
    total_score: float
    created_at: datetime = Field(default_factory=datetime.now)


class TeamScoreSummary(CamelModel):
    """Score and composition summary for a list of players."""

    total_score: float
    avg_score: float
    player_count: int
    composition: TeamComposition
    is_valid: bool
    errors: list[str] = Field(default_factory=list)


class ValidateTeamRequest(CamelModel):
    """Body of a team validation request."""

    composition: TeamComposition | None = None


class TeamScoreRequest(CamelModel):
    """Body of a team score request."""

    player_ids: list[str] | None = None

"""
Player-related Pydantic models.
"""

from enum import Enum

from pydantic import ConfigDict, Field, field_validator

from fantasy_soccer.models.base import CamelModel


class Position(str, Enum):
    """Playing position of a squad member."""

    GK = "GK"
    DEF = "DEF"
    MID = "MID"
    FWD = "FWD"

    @property
    def label(self) -> str:
        """Human readable position name."""
        return POSITION_LABELS[self]


POSITION_LABELS = {
    Position.GK: "Goalkeeper",
    Position.DEF: "Defender",
    Position.MID: "Midfielder",
    Position.FWD: "Forward",
}


class PlayerStats(CamelModel):
    """Season counters for a player."""

    model_config = ConfigDict(frozen=True)

    goals: int = Field(default=0, ge=0)
    assists: int = Field(default=0, ge=0)
    clean_sheets: int = Field(default=0, ge=0)
    yellow_cards: int = Field(default=0, ge=0)
    red_cards: int = Field(default=0, ge=0)
    appearances: int = Field(default=0, ge=0)
    avg_rating: float | None = None

    @field_validator(
        "goals", "assists", "clean_sheets", "yellow_cards", "red_cards", "appearances",
        mode="before",
    )
    @classmethod
    def _null_counts_as_zero(cls, value):
        return 0 if value is None else value


class Player(CamelModel):
    """Soccer player with season stats and a derived fantasy score."""

    id: str
    name: str
    club: str
    position: str = Field(description="One of GK, DEF, MID, FWD")
    photo: str = ""
    stats: PlayerStats = Field(default_factory=PlayerStats)
    fantasy_score: float | None = Field(
        default=None, description="Score computed from stats with the default formula"
    )
    market_value: int | None = None

    @property
    def position_label(self) -> str:
        """Get display label for the player's position."""
        try:
            return Position(self.position).label
        except ValueError:
            return "Unknown"


class PlayerScore(CamelModel):
    """Fantasy score of a single player."""

    fantasy_score: float
    avg_score: float = Field(description="Fantasy score per appearance")

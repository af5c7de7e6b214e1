"""
Team Builder

Stateful roster a user assembles one player at a time. Composition and
total score are recomputed from the current members on every read.
"""

import logging
import uuid

from fantasy_soccer.errors import TeamBuilderError
from fantasy_soccer.models.player import Player, Position
from fantasy_soccer.models.team import (
    CompositionRules,
    FantasyTeam,
    TeamComposition,
    TeamValidationResult,
)
from fantasy_soccer.services.scoring import count_composition, validate_composition

logger = logging.getLogger(__name__)

DEFAULT_TEAM_NAME = "My Fantasy Team"
MAX_TEAM_SIZE = 11


class TeamBuilder:
    """
    Roster of up to 11 unique players plus the teams saved from it.

    Example:
        builder = TeamBuilder()
        for player in source.get_players()[:11]:
            builder.add_player(player)
        if builder.validate().valid:
            team = builder.save("Galacticos")
    """

    def __init__(
        self,
        name: str = DEFAULT_TEAM_NAME,
        rules: CompositionRules | None = None,
        max_size: int = MAX_TEAM_SIZE,
    ):
        self.name = name
        self.rules = rules
        self.max_size = max_size
        self._players: list[Player] = []
        self.teams: list[FantasyTeam] = []

    @property
    def players(self) -> list[Player]:
        """Current roster members in selection order (a copy)."""
        return list(self._players)

    @property
    def size(self) -> int:
        return len(self._players)

    @property
    def is_full(self) -> bool:
        return self.size >= self.max_size

    def has_player(self, player_id: str) -> bool:
        return any(p.id == player_id for p in self._players)

    def add_player(self, player: Player) -> bool:
        """
        Add a player to the roster.

        Returns:
            False if the player is already selected or the roster is full
        """
        if self.has_player(player.id):
            return False
        if self.is_full:
            return False

        self._players.append(player)
        return True

    def remove_player(self, player_id: str) -> bool:
        """Remove a player by id. Returns False if the player was not selected."""
        remaining = [p for p in self._players if p.id != player_id]
        removed = len(remaining) != len(self._players)
        self._players = remaining
        return removed

    def set_players(self, players: list[Player]) -> None:
        """Replace the roster, dropping duplicates and anything past the ceiling."""
        self._players = []
        for player in players:
            self.add_player(player)

    def clear(self) -> None:
        self._players = []

    def position_count(self, position: Position | str) -> int:
        position = Position(position)
        return sum(1 for p in self._players if p.position == position.value)

    @property
    def composition(self) -> TeamComposition:
        return count_composition(self._players)

    @property
    def total_score(self) -> float:
        return sum(p.fantasy_score or 0 for p in self._players)

    def validate(self) -> TeamValidationResult:
        """Validate the current roster's composition."""
        return validate_composition(self.composition, self.rules)

    def save(self, name: str | None = None) -> FantasyTeam:
        """
        Save the roster as a fantasy team and start a new empty roster.

        Raises:
            TeamBuilderError: If the roster is not full or its composition is invalid
        """
        if self.size != self.max_size:
            raise TeamBuilderError(
                f"Team must have exactly {self.max_size} players to be saved, got {self.size}"
            )

        validation = self.validate()
        if not validation.valid:
            raise TeamBuilderError("Team composition is invalid", validation.errors)

        team = FantasyTeam(
            id=f"team_{uuid.uuid4().hex[:12]}",
            name=name or self.name,
            players=self.players,
            total_score=self.total_score,
        )
        self.teams.append(team)
        self.clear()

        logger.info("Saved team %s (%s) with %.1f points", team.name, team.id, team.total_score)
        return team

    def delete_team(self, team_id: str) -> bool:
        """Delete a saved team. Returns False if no team has this id."""
        remaining = [t for t in self.teams if t.id != team_id]
        deleted = len(remaining) != len(self.teams)
        self.teams = remaining
        return deleted

"""
Player Service

Player listing, per-player scores and team score summaries built on top
of the player source and the scoring functions.
"""

from fantasy_soccer.clients.players import PlayerSource
from fantasy_soccer.errors import PlayerNotFoundError
from fantasy_soccer.models.player import Player, PlayerScore, PlayerStats, Position
from fantasy_soccer.models.scoring import CustomScoreResult, ScoringFormula
from fantasy_soccer.models.team import CompositionRules, TeamScoreSummary
from fantasy_soccer.services.scoring import (
    compute_average_score,
    compute_score,
    count_composition,
    resolve_sort_key,
    sort_players,
    validate_composition,
)

POSITIONS = {p.value for p in Position}


class PlayerService:
    """
    Service for querying players and scoring teams.

    Unknown position filters and sort keys are ignored rather than
    rejected, matching the public API.
    """

    def __init__(self, source: PlayerSource, rules: CompositionRules | None = None):
        self.source = source
        self.rules = rules

    def list_players(
        self, position: str | None = None, sort_by: str | None = None
    ) -> list[Player]:
        """
        List players, optionally filtered by position and sorted.

        Args:
            position: GK, DEF, MID or FWD (other values are ignored)
            sort_by: Sort key accepted by sort_players (other values are ignored)

        Returns:
            List of players with fantasy scores
        """
        players = self.source.get_players()

        if position in POSITIONS:
            players = [p for p in players if p.position == position]

        sort_key = resolve_sort_key(sort_by)
        if sort_key is not None:
            players = sort_players(players, sort_key)

        return players

    def get_player(self, player_id: str) -> Player:
        """Get a player by id (raises PlayerNotFoundError)."""
        return self.source.get_player(player_id)

    def get_player_stats(self, player_id: str) -> PlayerStats:
        """Get the season stats of a player."""
        return self.source.get_player(player_id).stats

    def get_player_score(
        self, player_id: str, formula: ScoringFormula | None = None
    ) -> PlayerScore:
        """Get a player's fantasy score and average score per appearance."""
        stats = self.get_player_stats(player_id)
        return PlayerScore(
            fantasy_score=compute_score(stats, formula),
            avg_score=compute_average_score(stats, formula),
        )

    def get_top_players(self, limit: int = 10, position: str | None = None) -> list[Player]:
        """
        Get the leaderboard of top scoring players.

        The position filter is applied after the top `limit` are taken.
        """
        players = self.source.get_top_players(limit)
        if position in POSITIONS:
            players = [p for p in players if p.position == position]
        return players

    def calculate_team_score(self, player_ids: list[str]) -> TeamScoreSummary:
        """
        Calculate total score, composition and validity for a list of players.

        Raises:
            PlayerNotFoundError: If any id is unknown
        """
        players = []
        for player_id in player_ids:
            player = self.source.find_player(player_id)
            if player is None:
                raise PlayerNotFoundError(player_id)
            players.append(player)

        total_score = sum(p.fantasy_score or 0 for p in players)
        avg_score = total_score / len(players) if players else 0

        composition = count_composition(players)
        validation = validate_composition(composition, self.rules)

        return TeamScoreSummary(
            total_score=total_score,
            avg_score=avg_score,
            player_count=len(players),
            composition=composition,
            is_valid=validation.valid,
            errors=validation.errors,
        )

    @staticmethod
    def custom_score(stats: PlayerStats, formula: ScoringFormula) -> CustomScoreResult:
        """Score arbitrary stats with a caller-supplied formula."""
        return CustomScoreResult(
            fantasy_score=compute_score(stats, formula),
            avg_score=compute_average_score(stats, formula),
            formula=formula,
        )

"""
Mock Player Data Source

In-memory list of players with their season stats. Fantasy scores are
recomputed from stats on every read, so they always match the formula.

Usage:
    source = PlayerSource()
    players = source.get_players()
    salah = source.get_player("p1")
"""

from typing import Any

from fantasy_soccer.errors import PlayerNotFoundError
from fantasy_soccer.models.player import Player, Position
from fantasy_soccer.models.scoring import DEFAULT_SCORING_FORMULA, ScoringFormula
from fantasy_soccer.services.scoring import compute_score

PHOTO_BASE_URL = "https://api.sofascore.com/api/v1/player"


def _player(
    player_id: str,
    name: str,
    club: str,
    position: str,
    photo_id: int,
    stats: tuple[int, int, int, int, int, int, float],
    market_value: int,
) -> dict[str, Any]:
    goals, assists, clean_sheets, yellow_cards, red_cards, appearances, avg_rating = stats
    return {
        "id": player_id,
        "name": name,
        "club": club,
        "position": position,
        "photo": f"{PHOTO_BASE_URL}/{photo_id}/image",
        "stats": {
            "goals": goals,
            "assists": assists,
            "cleanSheets": clean_sheets,
            "yellowCards": yellow_cards,
            "redCards": red_cards,
            "appearances": appearances,
            "avgRating": avg_rating,
        },
        "marketValue": market_value,
    }


# stats: goals, assists, clean sheets, yellow cards, red cards, appearances, rating
MOCK_PLAYERS: list[dict[str, Any]] = [
    _player("p1", "Mohamed Salah", "Liverpool", "FWD", 123456, (18, 8, 0, 3, 0, 32, 8.2), 95_000_000),
    _player("p2", "Erling Haaland", "Manchester City", "FWD", 123457, (27, 5, 0, 2, 0, 31, 8.5), 120_000_000),
    _player("p3", "Harry Kane", "Bayern Munich", "FWD", 123458, (20, 6, 0, 2, 0, 30, 8.1), 85_000_000),
    _player("p4", "Vinicius Jr", "Real Madrid", "MID", 123459, (15, 10, 0, 5, 0, 32, 8.3), 90_000_000),
    _player("p5", "Rodri", "Manchester City", "MID", 123460, (6, 5, 12, 1, 0, 28, 8.4), 85_000_000),
    _player("p6", "Jude Bellingham", "Real Madrid", "MID", 123461, (8, 7, 5, 4, 0, 30, 8.0), 100_000_000),
    _player("p7", "Florian Wirtz", "Bayer Leverkusen", "MID", 123462, (11, 9, 2, 2, 0, 28, 8.1), 75_000_000),
    _player("p8", "Antonio Rudiger", "Real Madrid", "DEF", 123463, (1, 0, 15, 4, 0, 32, 7.9), 15_000_000),
    _player("p9", "Virgil van Dijk", "Liverpool", "DEF", 123464, (0, 1, 18, 2, 0, 30, 8.0), 45_000_000),
    _player("p10", "Kyle Walker", "Manchester City", "DEF", 123465, (1, 2, 16, 3, 0, 31, 7.8), 12_000_000),
    _player("p11", "Joao Cancelo", "Barcelona", "DEF", 123466, (2, 5, 12, 2, 0, 28, 7.9), 20_000_000),
    _player("p12", "Ederson", "Manchester City", "GK", 123467, (0, 0, 16, 0, 0, 30, 8.1), 45_000_000),
    _player("p13", "Alisson", "Liverpool", "GK", 123468, (0, 0, 18, 1, 0, 30, 8.0), 40_000_000),
    _player("p14", "Gianluigi Donnarumma", "Paris Saint-Germain", "GK", 123469, (0, 0, 14, 1, 0, 28, 7.8), 50_000_000),
]


class PlayerSource:
    """
    Read-only access to the mock player list.

    Scores are projected with the source's formula each time players
    are read; the raw records are never mutated.
    """

    def __init__(
        self,
        records: list[dict[str, Any]] | None = None,
        formula: ScoringFormula | None = None,
    ):
        self.formula = formula or DEFAULT_SCORING_FORMULA
        self._records = [
            Player.model_validate(record)
            for record in (MOCK_PLAYERS if records is None else records)
        ]

    def _with_score(self, player: Player) -> Player:
        return player.model_copy(
            update={"fantasy_score": compute_score(player.stats, self.formula)}
        )

    def get_players(self) -> list[Player]:
        """Get all players with calculated fantasy scores."""
        return [self._with_score(p) for p in self._records]

    def get_player(self, player_id: str) -> Player:
        """
        Get a single player by id.

        Raises:
            PlayerNotFoundError: If no player has this id
        """
        for player in self._records:
            if player.id == player_id:
                return self._with_score(player)
        raise PlayerNotFoundError(player_id)

    def find_player(self, player_id: str) -> Player | None:
        """Get a single player by id, or None if not found."""
        try:
            return self.get_player(player_id)
        except PlayerNotFoundError:
            return None

    def get_players_by_position(self, position: Position | str) -> list[Player]:
        """Get all players at a position."""
        position = Position(position)
        return [p for p in self.get_players() if p.position == position.value]

    def get_top_players(self, limit: int = 10) -> list[Player]:
        """Get the highest scoring players, best first."""
        players = sorted(
            self.get_players(), key=lambda p: p.fantasy_score or 0, reverse=True
        )
        return players[:limit]

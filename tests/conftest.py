from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from fantasy_soccer.clients.players import PlayerSource
from fantasy_soccer.config import Settings
from fantasy_soccer.main import create_app
from fantasy_soccer.models import Player, PlayerStats

VALID_TEAM_IDS = ["p12", "p8", "p9", "p10", "p11", "p4", "p5", "p6", "p7", "p1", "p2"]


def make_player(
    player_id: str = "x1",
    name: str = "Test Player",
    position: str = "MID",
    fantasy_score: float | None = None,
    goals: int = 0,
    assists: int = 0,
    appearances: int = 0,
    avg_rating: float | None = None,
) -> Player:
    return Player(
        id=player_id,
        name=name,
        club="Test FC",
        position=position,
        stats=PlayerStats(
            goals=goals,
            assists=assists,
            appearances=appearances,
            avg_rating=avg_rating,
        ),
        fantasy_score=fantasy_score,
    )


@pytest.fixture
def source() -> PlayerSource:
    return PlayerSource()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def client(settings: Settings) -> Generator[TestClient, None, None]:
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client

"""
Player API Routes

Endpoints for listing players, their stats and fantasy scores.
Responses are cached per query for the configured TTL.
"""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Path, Query

from fantasy_soccer.api.dependencies import CacheDep, PlayerServiceDep, SettingsDep
from fantasy_soccer.errors import PlayerNotFoundError
from fantasy_soccer.models import ApiResponse, Player, PlayerScore, PlayerStats

router = APIRouter()

PlayerIdPath = Annotated[str, Path(description="Player ID, e.g. p1")]
PositionQuery = Annotated[
    str | None,
    Query(description="Filter by position (GK, DEF, MID, FWD)"),
]


@router.get(
    "/players",
    response_model=ApiResponse[list[Player]],
    summary="List players",
    description="Get all players, optionally filtered by position and sorted.",
)
def list_players(
    service: PlayerServiceDep,
    cache: CacheDep,
    position: PositionQuery = None,
    sort_by: Annotated[
        str | None,
        Query(
            alias="sortBy",
            description="fantasyScore, goals, assists, appearances, avgRating or name",
        ),
    ] = None,
) -> ApiResponse[list[Player]]:
    """List players with fantasy scores."""
    cache_key = f"players:{position}:{sort_by}"
    cached = cache.get(cache_key)
    if cached is not None:
        return cached

    response = ApiResponse[list[Player]](
        success=True, data=service.list_players(position, sort_by)
    )
    cache.set(cache_key, response)
    return response


@router.get(
    "/players/{player_id}",
    response_model=ApiResponse[Player],
    summary="Get player",
    description="Get a single player with stats and fantasy score.",
)
def get_player(
    player_id: PlayerIdPath,
    service: PlayerServiceDep,
    cache: CacheDep,
) -> ApiResponse[Player]:
    """Get a player by ID."""
    cache_key = f"player:{player_id}"
    cached = cache.get(cache_key)
    if cached is not None:
        return cached

    try:
        player = service.get_player(player_id)
    except PlayerNotFoundError:
        raise HTTPException(status_code=404, detail="Player not found")

    response = ApiResponse[Player](success=True, data=player)
    cache.set(cache_key, response)
    return response


@router.get(
    "/players/{player_id}/stats",
    response_model=ApiResponse[PlayerStats],
    summary="Get player stats",
    description="Get the season statistics of a player.",
)
def get_player_stats(
    player_id: PlayerIdPath,
    service: PlayerServiceDep,
    cache: CacheDep,
) -> ApiResponse[PlayerStats]:
    """Get a player's season stats."""
    cache_key = f"player:stats:{player_id}"
    cached = cache.get(cache_key)
    if cached is not None:
        return cached

    try:
        stats = service.get_player_stats(player_id)
    except PlayerNotFoundError:
        raise HTTPException(status_code=404, detail="Player not found")

    response = ApiResponse[PlayerStats](success=True, data=stats)
    cache.set(cache_key, response)
    return response


@router.get(
    "/players/{player_id}/fantasyScore",
    response_model=ApiResponse[PlayerScore],
    summary="Get player fantasy score",
    description="Calculate a player's fantasy score and average score per appearance.",
)
def get_player_fantasy_score(
    player_id: PlayerIdPath,
    service: PlayerServiceDep,
    cache: CacheDep,
) -> ApiResponse[PlayerScore]:
    """Get a player's fantasy score with the default formula."""
    cache_key = f"player:fantasy:{player_id}"
    cached = cache.get(cache_key)
    if cached is not None:
        return cached

    try:
        score = service.get_player_score(player_id)
    except PlayerNotFoundError:
        raise HTTPException(status_code=404, detail="Player not found")

    response = ApiResponse[PlayerScore](success=True, data=score)
    cache.set(cache_key, response)
    return response


@router.get(
    "/topPlayers",
    response_model=ApiResponse[list[Player]],
    summary="Top players leaderboard",
    description="Get the highest scoring players. The position filter applies to the leaderboard.",
)
def get_top_players(
    service: PlayerServiceDep,
    cache: CacheDep,
    settings: SettingsDep,
    limit: Annotated[int | None, Query(description="Number of players")] = None,
    position: PositionQuery = None,
) -> ApiResponse[list[Player]]:
    """Get the top players by fantasy score."""
    if limit is None or limit < 1:
        limit = settings.top_players_default_limit
    limit = min(limit, settings.top_players_max_limit)

    cache_key = f"topPlayers:{limit}:{position or 'all'}"
    cached = cache.get(cache_key)
    if cached is not None:
        return cached

    response = ApiResponse[list[Player]](
        success=True, data=service.get_top_players(limit, position)
    )
    cache.set(cache_key, response)
    return response

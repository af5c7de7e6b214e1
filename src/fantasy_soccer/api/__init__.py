"""API package - FastAPI routes and dependencies."""

from fantasy_soccer.api.dependencies import (
    CacheDep,
    PlayerServiceDep,
    PlayerSourceDep,
    SettingsDep,
    get_cache,
    get_player_service,
    get_player_source,
)

__all__ = [
    "get_cache",
    "get_player_source",
    "get_player_service",
    "CacheDep",
    "PlayerSourceDep",
    "PlayerServiceDep",
    "SettingsDep",
]

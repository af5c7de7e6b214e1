"""
API Dependencies

Shared dependencies for FastAPI route handlers. The player source and
result cache live on the application state, created once in create_app.
"""

from typing import Annotated

from fastapi import Depends, Request

from fantasy_soccer.clients.players import PlayerSource
from fantasy_soccer.config import Settings, get_settings
from fantasy_soccer.services.cache import ResultCache
from fantasy_soccer.services.players import PlayerService


def get_player_source(request: Request) -> PlayerSource:
    """Dependency to get the application's player source."""
    return request.app.state.player_source


def get_cache(request: Request) -> ResultCache:
    """Dependency to get the application's result cache."""
    return request.app.state.cache


def get_player_service(
    source: Annotated[PlayerSource, Depends(get_player_source)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> PlayerService:
    """Dependency to create a PlayerService using the configured rules."""
    return PlayerService(source, settings.composition_rules())


# Type aliases for cleaner route signatures
PlayerSourceDep = Annotated[PlayerSource, Depends(get_player_source)]
CacheDep = Annotated[ResultCache, Depends(get_cache)]
PlayerServiceDep = Annotated[PlayerService, Depends(get_player_service)]
SettingsDep = Annotated[Settings, Depends(get_settings)]

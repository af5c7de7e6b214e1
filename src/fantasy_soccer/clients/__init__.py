"""Player data sources."""

from fantasy_soccer.clients.players import PlayerSource

__all__ = ["PlayerSource"]

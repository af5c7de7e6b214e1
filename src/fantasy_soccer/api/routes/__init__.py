"""API route handlers."""

from fantasy_soccer.api.routes import admin, players, scoring, teams, viz

__all__ = [
    "admin",
    "players",
    "scoring",
    "teams",
    "viz",
]

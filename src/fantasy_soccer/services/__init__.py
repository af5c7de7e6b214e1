"""Business logic services."""

from fantasy_soccer.services.cache import ResultCache
from fantasy_soccer.services.scoring import (
    SORT_KEYS,
    compute_average_score,
    compute_score,
    count_composition,
    resolve_sort_key,
    sort_players,
    validate_composition,
)

__all__ = [
    # Scoring
    "SORT_KEYS",
    "compute_score",
    "compute_average_score",
    "count_composition",
    "resolve_sort_key",
    "validate_composition",
    "sort_players",
    # Cache
    "ResultCache",
]

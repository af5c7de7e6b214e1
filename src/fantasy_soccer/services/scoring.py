"""
Fantasy Scoring Service

Computes fantasy scores from season stats and validates team compositions.
Every function here is pure; the API, team builder, charts and CLI all
share this single implementation.
"""

import logging
from collections.abc import Iterable, Sequence

from fantasy_soccer.models.player import Player, PlayerStats, Position
from fantasy_soccer.models.scoring import DEFAULT_SCORING_FORMULA, ScoringFormula
from fantasy_soccer.models.team import (
    DEFAULT_COMPOSITION_RULES,
    CompositionRules,
    TeamComposition,
    TeamValidationResult,
)

logger = logging.getLogger(__name__)

# Sort keys accepted by sort_players, mapped to the value they order by.
# Numeric keys sort descending, "name" ascending.
SORT_KEYS = {
    "fantasyScore": lambda p: p.fantasy_score or 0,
    "goals": lambda p: p.stats.goals,
    "assists": lambda p: p.stats.assists,
    "appearances": lambda p: p.stats.appearances,
    "avgRating": lambda p: p.stats.avg_rating or 0,
    "name": lambda p: p.name,
}

_SNAKE_SORT_KEYS = {
    "fantasy_score": "fantasyScore",
    "avg_rating": "avgRating",
}


def compute_score(
    stats: PlayerStats, formula: ScoringFormula | None = None
) -> float:
    """
    Calculate a player's fantasy score.

    Args:
        stats: Season stats of the player
        formula: Scoring weights (defaults to DEFAULT_SCORING_FORMULA)

    Returns:
        Weighted score, floored at zero and never rounded
    """
    formula = formula or DEFAULT_SCORING_FORMULA

    score = (
        stats.goals * formula.goals_multiplier
        + stats.assists * formula.assists_multiplier
        + stats.clean_sheets * formula.clean_sheets_multiplier
        - stats.yellow_cards * formula.yellow_cards_penalty
        - stats.red_cards * formula.red_cards_penalty
    )

    return max(0, score)


def compute_average_score(
    stats: PlayerStats, formula: ScoringFormula | None = None
) -> float:
    """Calculate fantasy score per appearance (0 when the player never appeared)."""
    if stats.appearances == 0:
        return 0
    return compute_score(stats, formula) / stats.appearances


def count_composition(roster: Iterable[Player]) -> TeamComposition:
    """
    Count roster players per position.

    Players with an unrecognised position are left out of every bucket,
    so the counted total falls short of the roster size.
    """
    counts = {position: 0 for position in Position}

    for player in roster:
        try:
            counts[Position(player.position)] += 1
        except ValueError:
            logger.warning(
                "Player %s has unknown position %r; not counted",
                player.id,
                player.position,
            )

    return TeamComposition(
        goalkeepers=counts[Position.GK],
        defenders=counts[Position.DEF],
        midfielders=counts[Position.MID],
        forwards=counts[Position.FWD],
    )


def validate_composition(
    composition: TeamComposition, rules: CompositionRules | None = None
) -> TeamValidationResult:
    """
    Validate a team composition against the league rules.

    Every rule is checked, so all violations are reported together.

    Args:
        composition: Player counts per position
        rules: Composition bounds (defaults to DEFAULT_COMPOSITION_RULES)

    Returns:
        TeamValidationResult, valid when no rule is violated
    """
    rules = rules or DEFAULT_COMPOSITION_RULES
    errors: list[str] = []

    total = composition.total
    if total != rules.team_size:
        errors.append(f"Team must have exactly {rules.team_size} players, got {total}")

    if composition.goalkeepers < rules.min_goalkeepers:
        errors.append(
            f"Team must have at least {rules.min_goalkeepers} goalkeeper"
            f"{'' if rules.min_goalkeepers == 1 else 's'}"
        )

    if composition.goalkeepers > rules.max_goalkeepers:
        errors.append(f"Team cannot have more than {rules.max_goalkeepers} goalkeepers")

    if not rules.min_defenders <= composition.defenders <= rules.max_defenders:
        errors.append(
            f"Team must have between {rules.min_defenders} and {rules.max_defenders} defenders"
        )

    if not rules.min_midfielders <= composition.midfielders <= rules.max_midfielders:
        errors.append(
            f"Team must have between {rules.min_midfielders} and {rules.max_midfielders} midfielders"
        )

    if not rules.min_forwards <= composition.forwards <= rules.max_forwards:
        errors.append(
            f"Team must have between {rules.min_forwards} and {rules.max_forwards} forwards"
        )

    return TeamValidationResult(valid=not errors, errors=errors)


def resolve_sort_key(key: str | None) -> str | None:
    """Map a sort key (camelCase or snake_case) to its SORT_KEYS name, or None if unknown."""
    key = _SNAKE_SORT_KEYS.get(key, key)
    return key if key in SORT_KEYS else None


def sort_players(players: Sequence[Player], key: str) -> list[Player]:
    """
    Return a new list of players ordered by the given key.

    Numeric keys sort descending and "name" ascending. Ties keep their
    input order, and missing scores or ratings count as 0.

    Raises:
        ValueError: If the sort key is not supported
    """
    resolved = resolve_sort_key(key)
    if resolved is None:
        raise ValueError(f"Unsupported sort key: {key}")
    key = resolved

    return sorted(players, key=SORT_KEYS[key], reverse=key != "name")

import pytest

from fantasy_soccer.models import (
    DEFAULT_SCORING_FORMULA,
    CompositionRules,
    PlayerStats,
    ScoringFormula,
    TeamComposition,
)
from fantasy_soccer.services.scoring import (
    compute_average_score,
    compute_score,
    count_composition,
    sort_players,
    validate_composition,
)
from tests.conftest import make_player

SALAH = PlayerStats(
    goals=18, assists=8, clean_sheets=0, yellow_cards=3, red_cards=0, appearances=32
)


class TestComputeScore:
    def test_default_formula(self) -> None:
        assert compute_score(SALAH) == 93

    def test_explicit_default_formula_matches_omitted(self) -> None:
        assert compute_score(SALAH, DEFAULT_SCORING_FORMULA) == compute_score(SALAH)

    def test_default_formula_weights(self) -> None:
        f = DEFAULT_SCORING_FORMULA
        assert (
            f.goals_multiplier,
            f.assists_multiplier,
            f.clean_sheets_multiplier,
            f.yellow_cards_penalty,
            f.red_cards_penalty,
        ) == (4, 3, 2, 1, 3)

    def test_penalties_floor_at_zero(self) -> None:
        stats = PlayerStats(yellow_cards=10, red_cards=5, appearances=1)
        assert compute_score(stats) == 0

    def test_custom_formula(self) -> None:
        formula = ScoringFormula(
            goals_multiplier=6,
            assists_multiplier=1,
            clean_sheets_multiplier=0,
            yellow_cards_penalty=2,
            red_cards_penalty=0,
        )
        assert compute_score(SALAH, formula) == 18 * 6 + 8 - 3 * 2

    def test_fractional_multipliers_are_not_rounded(self) -> None:
        formula = ScoringFormula(goals_multiplier=0.5)
        stats = PlayerStats(goals=3)
        assert compute_score(stats, formula) == pytest.approx(1.5)

    def test_missing_stats_count_as_zero(self) -> None:
        assert compute_score(PlayerStats()) == 0
        assert compute_score(PlayerStats.model_validate({"goals": 2})) == 8

    def test_null_stats_count_as_zero(self) -> None:
        stats = PlayerStats.model_validate({"goals": None, "assists": 2, "redCards": None})
        assert stats.goals == 0
        assert stats.red_cards == 0
        assert compute_score(stats) == 6

    def test_camel_case_input(self) -> None:
        stats = PlayerStats.model_validate({"cleanSheets": 5, "yellowCards": 1})
        assert compute_score(stats) == 9

    def test_idempotent(self) -> None:
        assert compute_score(SALAH) == compute_score(SALAH)

    @pytest.mark.parametrize(
        "stats",
        [
            PlayerStats(),
            PlayerStats(red_cards=20),
            PlayerStats(goals=1, yellow_cards=100),
            SALAH,
        ],
    )
    def test_never_negative(self, stats: PlayerStats) -> None:
        harsh = ScoringFormula(yellow_cards_penalty=50, red_cards_penalty=100)
        assert compute_score(stats) >= 0
        assert compute_score(stats, harsh) >= 0


class TestComputeAverageScore:
    def test_average(self) -> None:
        assert compute_average_score(SALAH) == pytest.approx(2.90625)

    def test_zero_appearances(self) -> None:
        stats = PlayerStats(goals=5, appearances=0)
        assert compute_average_score(stats) == 0


class TestCountComposition:
    def test_counts_per_position(self) -> None:
        roster = [
            make_player("g", position="GK"),
            make_player("d1", position="DEF"),
            make_player("d2", position="DEF"),
            make_player("m", position="MID"),
            make_player("f", position="FWD"),
        ]
        composition = count_composition(roster)
        assert composition == TeamComposition(
            goalkeepers=1, defenders=2, midfielders=1, forwards=1
        )
        assert composition.total == len(roster)

    def test_empty_roster(self) -> None:
        assert count_composition([]).total == 0

    def test_unknown_position_is_not_counted(self, caplog: pytest.LogCaptureFixture) -> None:
        roster = [make_player("a", position="MID"), make_player("b", position="WINGER")]
        composition = count_composition(roster)
        assert composition.midfielders == 1
        assert composition.total == 1
        assert "WINGER" in caplog.text


class TestValidateComposition:
    def test_valid_team(self) -> None:
        result = validate_composition(
            TeamComposition(goalkeepers=1, defenders=4, midfielders=4, forwards=2)
        )
        assert result.valid
        assert result.errors == []

    def test_reports_every_violation(self) -> None:
        result = validate_composition(
            TeamComposition(goalkeepers=0, defenders=4, midfielders=4, forwards=2)
        )
        assert not result.valid
        assert result.errors == [
            "Team must have exactly 11 players, got 10",
            "Team must have at least 1 goalkeeper",
        ]

    def test_empty_composition(self) -> None:
        result = validate_composition(TeamComposition())
        assert not result.valid
        assert "Team must have exactly 11 players, got 0" in result.errors
        assert "Team must have at least 1 goalkeeper" in result.errors

    def test_too_many_goalkeepers(self) -> None:
        result = validate_composition(
            TeamComposition(goalkeepers=4, defenders=3, midfielders=2, forwards=2)
        )
        assert result.errors == ["Team cannot have more than 3 goalkeepers"]

    @pytest.mark.parametrize(
        "composition, error",
        [
            (
                TeamComposition(goalkeepers=1, defenders=2, midfielders=5, forwards=3),
                "Team must have between 3 and 6 defenders",
            ),
            (
                TeamComposition(goalkeepers=1, defenders=7, midfielders=2, forwards=1),
                "Team must have between 3 and 6 defenders",
            ),
            (
                TeamComposition(goalkeepers=3, defenders=6, midfielders=1, forwards=1),
                "Team must have between 2 and 5 midfielders",
            ),
            (
                TeamComposition(goalkeepers=1, defenders=3, midfielders=6, forwards=1),
                "Team must have between 2 and 5 midfielders",
            ),
            (
                TeamComposition(goalkeepers=2, defenders=4, midfielders=5, forwards=0),
                "Team must have between 1 and 3 forwards",
            ),
            (
                TeamComposition(goalkeepers=1, defenders=3, midfielders=3, forwards=4),
                "Team must have between 1 and 3 forwards",
            ),
        ],
    )
    def test_range_rules(self, composition: TeamComposition, error: str) -> None:
        assert composition.total == 11
        result = validate_composition(composition)
        assert result.errors == [error]

    def test_never_raises(self) -> None:
        for gk in range(5):
            for d in range(0, 9, 2):
                for m in range(0, 9, 2):
                    for f in range(5):
                        result = validate_composition(
                            TeamComposition(
                                goalkeepers=gk, defenders=d, midfielders=m, forwards=f
                            )
                        )
                        assert result.valid == (result.errors == [])

    def test_custom_rules(self) -> None:
        rules = CompositionRules(team_size=5, min_defenders=1, min_midfielders=1, max_forwards=2)
        result = validate_composition(
            TeamComposition(goalkeepers=1, defenders=2, midfielders=1, forwards=1), rules
        )
        assert result.valid

    def test_custom_rules_messages(self) -> None:
        rules = CompositionRules(team_size=7, min_goalkeepers=2)
        result = validate_composition(TeamComposition(goalkeepers=1, defenders=3, midfielders=2, forwards=1), rules)
        assert result.errors == ["Team must have at least 2 goalkeepers"]


class TestSortPlayers:
    def test_missing_score_sorts_last(self) -> None:
        players = [
            make_player("a", fantasy_score=50),
            make_player("b", fantasy_score=90),
            make_player("c", fantasy_score=None),
        ]
        assert [p.id for p in sort_players(players, "fantasyScore")] == ["b", "a", "c"]

    def test_does_not_mutate_input(self) -> None:
        players = [make_player("a", goals=1), make_player("b", goals=5)]
        result = sort_players(players, "goals")
        assert [p.id for p in players] == ["a", "b"]
        assert [p.id for p in result] == ["b", "a"]
        assert result is not players

    def test_ties_keep_input_order(self) -> None:
        players = [
            make_player("a", assists=2),
            make_player("b", assists=3),
            make_player("c", assists=2),
            make_player("d", assists=3),
        ]
        assert [p.id for p in sort_players(players, "assists")] == ["b", "d", "a", "c"]

    def test_sorted_list_is_unchanged(self) -> None:
        players = [
            make_player("a", appearances=30),
            make_player("b", appearances=20),
            make_player("c", appearances=20),
        ]
        once = sort_players(players, "appearances")
        twice = sort_players(once, "appearances")
        assert [p.id for p in twice] == [p.id for p in once] == ["a", "b", "c"]

    def test_avg_rating_missing_counts_as_zero(self) -> None:
        players = [
            make_player("a", avg_rating=None),
            make_player("b", avg_rating=7.5),
        ]
        assert [p.id for p in sort_players(players, "avgRating")] == ["b", "a"]

    def test_name_sorts_ascending(self) -> None:
        players = [
            make_player("a", name="Rodri"),
            make_player("b", name="Alisson"),
            make_player("c", name="Kane"),
        ]
        assert [p.name for p in sort_players(players, "name")] == ["Alisson", "Kane", "Rodri"]

    def test_snake_case_key(self) -> None:
        players = [make_player("a", fantasy_score=1), make_player("b", fantasy_score=2)]
        assert [p.id for p in sort_players(players, "fantasy_score")] == ["b", "a"]

    def test_unknown_key(self) -> None:
        with pytest.raises(ValueError):
            sort_players([], "market_value")

from pathlib import Path

import pytest

from fantasy_soccer.cli import main
from tests.conftest import VALID_TEAM_IDS


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_players(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["players", "--position", "GK"]) == 0
    out = capsys.readouterr().out
    assert "Alisson" in out
    assert "Mohamed Salah" not in out


def test_top(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["top", "--limit", "2"]) == 0
    out = capsys.readouterr().out
    assert "Erling Haaland" in out
    assert "Harry Kane" in out
    assert "Mohamed Salah" not in out


def test_score(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["score", "p1"]) == 0
    out = capsys.readouterr().out
    assert "Fantasy score: 93.0" in out
    assert "Per appearance: 2.91" in out


def test_score_unknown_player(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["score", "p99"]) == 1
    assert "Player not found: p99" in capsys.readouterr().out


def test_validate(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["validate", "--gk", "1", "--def", "4", "--mid", "4", "--fwd", "2"]) == 0
    assert main(["validate", "--def", "4", "--mid", "4", "--fwd", "2"]) == 1
    out = capsys.readouterr().out
    assert "Team must have at least 1 goalkeeper" in out


def test_team_saves_valid_roster(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["team", *VALID_TEAM_IDS, "--name", "Galacticos"]) == 0
    out = capsys.readouterr().out
    assert "676.0 pts" in out
    assert "Saved team Galacticos" in out


def test_team_rejects_incomplete_roster(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["team", "p1", "p1", "p2"]) == 1
    out = capsys.readouterr().out
    assert "Skipped Mohamed Salah" in out
    assert "exactly 11 players" in out


def test_team_unknown_player(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["team", "p1", "nobody"]) == 1
    assert "Player not found: nobody" in capsys.readouterr().out


def test_chart(tmp_path: Path) -> None:
    output = tmp_path / "chart.html"
    assert main(["chart", "--limit", "3", "--output", str(output)]) == 0
    assert "Erling Haaland" in output.read_text(encoding="utf-8")

from fastapi.testclient import TestClient

from fantasy_soccer.clients.players import PlayerSource
from fantasy_soccer.models import TeamComposition
from fantasy_soccer.visualization import charts


def test_fantasy_score_chart(source: PlayerSource) -> None:
    html = charts.fantasy_score_chart(source.get_top_players(5), title="Leaders")
    assert "plotly" in html.lower()
    assert "Erling Haaland" in html
    assert "Leaders" in html


def test_fantasy_score_chart_empty() -> None:
    assert charts.fantasy_score_chart([]) == "<div>No player data available</div>"


def test_composition_chart() -> None:
    html = charts.composition_chart(
        TeamComposition(goalkeepers=1, defenders=4, midfielders=4, forwards=2)
    )
    assert "Goalkeepers" in html
    assert "Forwards" in html


def test_composition_chart_empty() -> None:
    assert charts.composition_chart(TeamComposition()) == "<div>No players selected</div>"


def test_viz_routes(client: TestClient) -> None:
    response = client.get("/viz/top-players", params={"limit": 3})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "Harry Kane" in response.text

    response = client.get(
        "/viz/composition",
        params={"goalkeepers": 1, "defenders": 4, "midfielders": 4, "forwards": 2},
    )
    assert response.status_code == 200
    assert "Midfielders" in response.text

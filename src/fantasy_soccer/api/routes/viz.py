"""
Visualization API Routes

Endpoints for generating interactive Plotly charts.
All endpoints return HTML content for embedding or viewing directly.
"""

from typing import Annotated

from fastapi import APIRouter, Query
from fastapi.responses import HTMLResponse

from fantasy_soccer.api.dependencies import PlayerServiceDep, SettingsDep
from fantasy_soccer.models import TeamComposition
from fantasy_soccer.visualization import charts

router = APIRouter()

CountQuery = Annotated[int, Query(ge=0, le=11)]


@router.get(
    "/top-players",
    response_class=HTMLResponse,
    summary="Top players chart",
    description="Bar chart of the highest fantasy scores, colored by position.",
)
def get_top_players_chart(
    service: PlayerServiceDep,
    settings: SettingsDep,
    limit: Annotated[int, Query(ge=1)] = 10,
    position: str | None = None,
) -> HTMLResponse:
    """Generate a fantasy score bar chart."""
    limit = min(limit, settings.top_players_max_limit)
    players = service.get_top_players(limit, position)

    html = charts.fantasy_score_chart(players, title=f"Top {limit} Fantasy Scores")
    return HTMLResponse(content=html)


@router.get(
    "/composition",
    response_class=HTMLResponse,
    summary="Team composition chart",
    description="Pie chart of players per position.",
)
def get_composition_chart(
    goalkeepers: CountQuery = 0,
    defenders: CountQuery = 0,
    midfielders: CountQuery = 0,
    forwards: CountQuery = 0,
) -> HTMLResponse:
    """Generate a team composition pie chart."""
    composition = TeamComposition(
        goalkeepers=goalkeepers,
        defenders=defenders,
        midfielders=midfielders,
        forwards=forwards,
    )
    return HTMLResponse(content=charts.composition_chart(composition))

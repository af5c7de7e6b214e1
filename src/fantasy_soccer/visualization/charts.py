"""
Plotly Chart Generators

Generates interactive charts for player scores and team compositions.
All charts return HTML strings for embedding or standalone use.
"""

import plotly.graph_objects as go

from fantasy_soccer.models.player import Player, Position
from fantasy_soccer.models.team import TeamComposition


DARK_THEME = {
    "paper_bgcolor": "#1a1a2e",
    "plot_bgcolor": "#16213e",
    "font_color": "#e8e8e8",
    "gridcolor": "#2d3a4f",
}

POSITION_COLORS = {
    Position.GK.value: "#ef4444",
    Position.DEF.value: "#3b82f6",
    Position.MID.value: "#22c55e",
    Position.FWD.value: "#eab308",
}


def _apply_dark_theme(fig: go.Figure) -> go.Figure:
    """Apply dark theme styling to a figure."""
    fig.update_layout(
        paper_bgcolor=DARK_THEME["paper_bgcolor"],
        plot_bgcolor=DARK_THEME["plot_bgcolor"],
        font={"color": DARK_THEME["font_color"], "family": "Inter, sans-serif"},
        margin={"l": 60, "r": 40, "t": 60, "b": 60},
    )
    fig.update_xaxes(gridcolor=DARK_THEME["gridcolor"], linecolor=DARK_THEME["gridcolor"])
    fig.update_yaxes(gridcolor=DARK_THEME["gridcolor"], linecolor=DARK_THEME["gridcolor"])
    return fig


def fantasy_score_chart(players: list[Player], title: str = "Top Fantasy Scores") -> str:
    """
    Create a horizontal bar chart of player fantasy scores.

    Bars are colored by position, best player on top.

    Args:
        players: Players to plot, in ranking order
        title: Chart title

    Returns:
        HTML string containing the chart
    """
    if not players:
        return "<div>No player data available</div>"

    ranked = list(reversed(players))
    scores = [p.fantasy_score or 0 for p in ranked]

    fig = go.Figure(
        go.Bar(
            y=[p.name for p in ranked],
            x=scores,
            orientation="h",
            marker_color=[POSITION_COLORS.get(p.position, "#9ca3af") for p in ranked],
            text=[f"{s:.0f}" for s in scores],
            textposition="inside",
            customdata=[[p.club, p.position_label] for p in ranked],
            hovertemplate="%{y}<br>%{customdata[0]} - %{customdata[1]}<br>%{x:.1f} pts<extra></extra>",
        )
    )

    fig.update_layout(
        title={"text": title, "x": 0.5, "xanchor": "center"},
        xaxis_title="Fantasy Score",
        height=max(400, len(players) * 40),
        showlegend=False,
    )

    _apply_dark_theme(fig)
    return fig.to_html(full_html=False, include_plotlyjs="cdn")


def composition_chart(composition: TeamComposition, title: str = "Team Composition") -> str:
    """
    Create a pie chart of players per position.

    Args:
        composition: Player counts per position
        title: Chart title

    Returns:
        HTML string containing the chart
    """
    if composition.total == 0:
        return "<div>No players selected</div>"

    labels = [position.label + "s" for position in Position]
    values = [
        composition.goalkeepers,
        composition.defenders,
        composition.midfielders,
        composition.forwards,
    ]

    fig = go.Figure(
        go.Pie(
            labels=labels,
            values=values,
            marker={
                "colors": list(POSITION_COLORS.values()),
                "line": {"color": "#ffffff", "width": 2},
            },
            sort=False,
            textinfo="label+value",
        )
    )

    fig.update_layout(
        title={"text": title, "x": 0.5, "xanchor": "center"},
        legend={"orientation": "h", "yanchor": "top", "y": -0.05, "x": 0.5, "xanchor": "center"},
        height=450,
    )

    _apply_dark_theme(fig)
    return fig.to_html(full_html=False, include_plotlyjs="cdn")

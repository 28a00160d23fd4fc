# -*- coding: utf-8 -*-
"""
Win % vs. % of Game Favored - chart builders.

Both figures take the enriched team table (see ``nfl_favored.metrics.enrich``)
and draw each team in its own color with its logo on top.
"""

from typing import Optional

import pandas as pd
import plotly.graph_objects as go

from nfl_favored.metrics.enrich import league_means

LOGO_SCALE = 0.045


def _span(series: pd.Series, pad: float = 0.05) -> tuple:
    lo, hi = float(series.min()), float(series.max())
    width = (hi - lo) or 1.0
    return lo - pad * width, hi + pad * width


def _add_logo(fig: go.Figure, source: Optional[str], x: float, y: float, sizex: float, sizey: float):
    if not source:
        return
    fig.add_layout_image(
        dict(
            source=source,
            xref="x",
            yref="y",
            x=x,
            y=y,
            sizex=sizex,
            sizey=sizey,
            xanchor="center",
            yanchor="middle",
            sizing="contain",
            layer="above",
        )
    )


def scatter_chart(table: pd.DataFrame, title: Optional[str] = None) -> go.Figure:
    """Win % (y) against % of snaps favored (x), logos at each team's point."""
    df = table.assign(
        win_pct_100=table["win_pct"] * 100,
        favored_pct_100=table["favored_pct"] * 100,
    )
    fig = go.Figure()
    if df.empty:
        fig.update_layout(title=title or "Win % vs. % of Game Favored")
        return fig

    fig.add_trace(go.Scatter(
        x=df["favored_pct_100"],
        y=df["win_pct_100"],
        mode="markers",
        marker=dict(size=14, color=df["team_color"], line=dict(width=2, color=df["team_color2"])),
        text=df["team_name"],
        customdata=df[["team", "wins", "losses", "ties", "delta"]],
        hovertemplate=(
            "<b>%{text}</b><br>"
            "Favored: %{x:.1f}% of snaps<br>"
            "Win %: %{y:.1f}%<br>"
            "Record: %{customdata[1]}-%{customdata[2]}-%{customdata[3]}<br>"
            "Delta: %{customdata[4]:+.1f}<extra></extra>"
        ),
        showlegend=False,
    ))

    means = league_means(df)
    fig.add_hline(
        y=means["win_pct"] * 100,
        line_dash="dash",
        line_color="gray",
        annotation_text=f"Avg Win %: {means['win_pct'] * 100:.1f}%",
        annotation_position="right",
    )
    fig.add_vline(
        x=means["favored_pct"] * 100,
        line_dash="dash",
        line_color="gray",
        annotation_text=f"Avg Favored: {means['favored_pct'] * 100:.1f}%",
        annotation_position="top",
    )

    x_range = _span(df["favored_pct_100"])
    y_range = _span(df["win_pct_100"])
    # Diagonal where win % equals % of game favored
    lo = min(x_range[0], y_range[0])
    hi = max(x_range[1], y_range[1])
    fig.add_shape(type="line", x0=lo, y0=lo, x1=hi, y1=hi, line=dict(color="lightgray", width=1))

    sizex = (x_range[1] - x_range[0]) * LOGO_SCALE
    sizey = (y_range[1] - y_range[0]) * LOGO_SCALE
    for row in df.itertuples():
        _add_logo(fig, row.team_logo, row.favored_pct_100, row.win_pct_100, sizex, sizey)

    fig.update_layout(
        title=title or "Win % vs. % of Game Favored",
        xaxis_title="% of Snaps Favored (Win Probability)",
        yaxis_title="Win %",
        xaxis=dict(range=list(x_range)),
        yaxis=dict(range=list(y_range)),
        height=650,
        template="plotly_white",
    )
    return fig


def delta_bar_chart(table: pd.DataFrame, title: Optional[str] = None) -> go.Figure:
    """Teams ranked by delta, best at the top."""
    df = table.sort_values("rank").reset_index(drop=True)
    fig = go.Figure()
    if df.empty:
        fig.update_layout(title=title or "Win % Minus % of Game Favored")
        return fig

    positions = list(range(len(df)))
    fig.add_trace(go.Bar(
        x=df["delta"],
        y=positions,
        orientation="h",
        marker_color=df["team_color"],
        marker_line=dict(color=df["team_color2"], width=1.5),
        text=df["delta"].round(1).map(lambda v: f"{v:+.1f}"),
        textposition="outside",
        customdata=df[["team_name", "win_pct", "favored_pct"]],
        hovertemplate=(
            "<b>%{customdata[0]}</b><br>"
            "Delta: %{x:+.1f}<br>"
            "Win %: %{customdata[1]:.1%}<br>"
            "Favored: %{customdata[2]:.1%}<extra></extra>"
        ),
        showlegend=False,
    ))
    fig.add_vline(x=0, line_color="black", line_width=1)

    x_range = _span(pd.concat([df["delta"], pd.Series([0.0])]), pad=0.15)
    sizex = (x_range[1] - x_range[0]) * LOGO_SCALE
    for pos, row in zip(positions, df.itertuples()):
        # Logo just past the bar end
        offset = sizex if row.delta >= 0 else -sizex
        _add_logo(fig, row.team_logo, row.delta + offset * 1.8, pos, sizex, 0.8)

    fig.update_layout(
        title=title or "Win % Minus % of Game Favored",
        xaxis_title="Win % - % of Snaps Favored (points)",
        xaxis=dict(range=list(x_range)),
        yaxis=dict(
            tickvals=positions,
            ticktext=df["team"].tolist(),
            autorange="reversed",
        ),
        height=max(400, 24 * len(df) + 120),
        bargap=0.25,
        template="plotly_white",
    )
    return fig

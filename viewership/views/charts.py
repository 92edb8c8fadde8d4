"""
Plotly figures for the dashboard.
"""

from __future__ import annotations

import plotly.graph_objects as go

from viewership.api.models import BrandRow

LIFT_COLOR = "#5E81AC"


def plotly_lift_bar(rows: tuple[BrandRow, ...], top_n: int = 15, color: str = LIFT_COLOR) -> go.Figure:
    """Horizontal bar of the strongest brands, in backend rank order."""
    top   = list(rows)[:top_n]
    names = [r.team for r in top]
    lifts = [r.viewership_lift_pct for r in top]

    fig = go.Figure(go.Bar(
        x=lifts,
        y=names,
        orientation="h",
        marker_color=color,
        text=[f"{v:+.1f}%" for v in lifts],
        textposition="outside",
        hovertemplate="%{y}: %{x:.1f}%<extra></extra>",
    ))
    fig.update_layout(
        xaxis=dict(title="Viewership lift vs. neutral baseline (%)"),
        yaxis=dict(autorange="reversed"),
        margin=dict(l=160, r=60, t=10, b=30),
        height=max(300, len(names) * 26),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
        font=dict(size=12),
    )
    return fig

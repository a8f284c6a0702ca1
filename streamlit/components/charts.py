"""
components/charts.py — Plotly chart builders for the results screen.
"""

import plotly.graph_objects as go
import pandas as pd
from typing import List

from blueprint.scoring.engine import AssessmentReport
from blueprint.scoring.score_bands import BAND_COLORS, score_color

YOU_COLOR = "#1e3a5f"
AVG_COLOR = "#94a3b8"


def _truncate(label: str, width: int) -> str:
    return label[:width] + "…" if len(label) > width else label


def comparison_frame(report: AssessmentReport) -> pd.DataFrame:
    """One row per section: label, your %, average advisor %, colour band."""
    return pd.DataFrame([
        {
            "Dimension": c.label,
            "You": c.score,
            "Avg Advisor": c.benchmark,
            "Delta": c.delta,
            "Band": report.section_bands[c.section_id].value,
        }
        for c in report.comparisons
    ])


def score_gauge(report: AssessmentReport) -> go.Figure:
    """Gauge for the overall score, bar coloured by band."""
    pct = report.total_percentage
    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=pct,
        title={"text": report.tier.label},
        number={"suffix": "/100"},
        gauge={
            "axis": {"range": [0, 100]},
            "bar": {"color": score_color(pct)},
            "steps": [
                {"range": [0, 40], "color": "#fee2e2"},
                {"range": [40, 60], "color": "#ffedd5"},
                {"range": [60, 80], "color": "#fef9c3"},
                {"range": [80, 100], "color": "#dcfce7"},
            ],
        },
    ))
    fig.update_layout(height=260, margin=dict(t=50, b=20))
    return fig


def readiness_radar(report: AssessmentReport) -> go.Figure:
    """Radar: your section scores (filled) vs the average advisor (dashed)."""
    cats = [_truncate(c.label, 15) for c in report.comparisons]
    yours = [c.score for c in report.comparisons]
    avg = [c.benchmark for c in report.comparisons]
    # Close the polygon
    cats, yours, avg = cats + cats[:1], yours + yours[:1], avg + avg[:1]

    fig = go.Figure()
    fig.add_trace(go.Scatterpolar(
        r=avg, theta=cats, name="Avg Advisor",
        line=dict(color=AVG_COLOR, width=1.5, dash="dash"),
        fill="none",
    ))
    fig.add_trace(go.Scatterpolar(
        r=yours, theta=cats, name="Your Score",
        line=dict(color=YOU_COLOR, width=2),
        fill="toself", fillcolor=YOU_COLOR, opacity=0.25,
    ))
    fig.update_layout(
        polar=dict(radialaxis=dict(visible=True, range=[0, 100])),
        title="Readiness Profile",
        height=420, margin=dict(t=60, b=40),
        legend=dict(font=dict(size=12)),
    )
    return fig


def comparison_bar(report: AssessmentReport) -> go.Figure:
    """Horizontal grouped bar: you vs average advisor per dimension."""
    df = comparison_frame(report)
    labels = [_truncate(label, 12) for label in df["Dimension"]]

    fig = go.Figure()
    fig.add_trace(go.Bar(
        y=labels, x=df["You"], name="You", orientation="h",
        marker_color=YOU_COLOR,
    ))
    fig.add_trace(go.Bar(
        y=labels, x=df["Avg Advisor"], name="Avg Advisor", orientation="h",
        marker_color=AVG_COLOR,
    ))
    fig.update_layout(
        title="How You Compare",
        barmode="group",
        xaxis=dict(range=[0, 100]),
        yaxis=dict(autorange="reversed"),
        height=max(300, 45 * len(labels)), margin=dict(l=110, r=30, t=50, b=40),
        plot_bgcolor="white",
    )
    return fig


def section_progress_bars(report: AssessmentReport) -> go.Figure:
    """One bar per section on a 0–100 track, coloured by score band."""
    labels: List[str] = [s.label for s in report.sections]
    scores = [s.percentage for s in report.sections]
    colors = [BAND_COLORS[report.section_bands[s.id]] for s in report.sections]

    fig = go.Figure()
    fig.add_trace(go.Bar(
        y=labels, x=[100] * len(labels), orientation="h",
        marker_color="#f1f5f9", hoverinfo="skip", showlegend=False,
    ))
    fig.add_trace(go.Bar(
        y=labels, x=scores, orientation="h",
        marker_color=colors, text=[f"{s}%" for s in scores],
        textposition="outside", showlegend=False,
    ))
    fig.update_layout(
        title="Dimension Breakdown",
        barmode="overlay",
        xaxis=dict(range=[0, 110], visible=False),
        yaxis=dict(autorange="reversed"),
        height=max(300, 40 * len(labels)), margin=dict(l=160, r=30, t=50, b=20),
        plot_bgcolor="white",
    )
    return fig

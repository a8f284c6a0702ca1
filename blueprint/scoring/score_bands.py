"""
scoring/score_bands.py

Colour annotation for percentages in charts and the report.

    ≥ 70  green
    ≥ 45  yellow
    ≥ 25  orange
    else  red

These thresholds are separate from the tier and recommendation thresholds.
"""

from typing import Dict, List, Tuple

from blueprint.models.enumerations import ScoreBand

BANDS: List[Tuple[int, ScoreBand]] = [
    (70, ScoreBand.GREEN),
    (45, ScoreBand.YELLOW),
    (25, ScoreBand.ORANGE),
]

BAND_COLORS: Dict[ScoreBand, str] = {
    ScoreBand.GREEN: "#22c55e",
    ScoreBand.YELLOW: "#eab308",
    ScoreBand.ORANGE: "#f97316",
    ScoreBand.RED: "#ef4444",
}


def score_band(pct: int) -> ScoreBand:
    for lower, band in BANDS:
        if pct >= lower:
            return band
    return ScoreBand.RED


def score_color(pct: int) -> str:
    return BAND_COLORS[score_band(pct)]

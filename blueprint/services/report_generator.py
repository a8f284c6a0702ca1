"""
Assessment Report Generator
blueprint/services/report_generator.py

Renders a scored assessment as a markdown report for download.
"""

import logging
import re
from typing import List, Optional
from datetime import datetime, timezone

from blueprint.models.lead import Lead
from blueprint.scoring.engine import AssessmentReport
from blueprint.scoring.section_scorer import SectionResult

logger = logging.getLogger(__name__)

BAND_LABELS = {
    "green": "Strong",
    "yellow": "Developing",
    "orange": "At Risk",
    "red": "Critical",
}


def _band_label(report: AssessmentReport, section_id: str) -> str:
    band = report.section_bands.get(section_id)
    return BAND_LABELS.get(band.value, "—") if band else "—"


# =====================================================================
# Single Assessment Report
# =====================================================================

def generate_assessment_report(
    report: AssessmentReport,
    lead: Optional[Lead] = None,
) -> str:
    """Generate the markdown results report for one completed assessment."""

    now = datetime.now(timezone.utc).strftime("%Y-%m-%d")

    lines = []
    lines.append(f"# Breakaway Blueprint™ — Readiness Report")
    lines.append(f"")
    if lead:
        firm = f" | {lead.firm}" if lead.firm else ""
        lines.append(f"> **{lead.name}**{firm} | Generated: {now}")
    else:
        lines.append(f"> Generated: {now}")
    lines.append(f"")
    lines.append(f"---")
    lines.append(f"")

    # ── Overall ──
    lines.append(f"## Overall Score: {report.score_label}")
    lines.append(f"")
    lines.append(f"**{report.tier.label}** — {report.tier.description}")
    lines.append(f"")

    # ── Dimension Breakdown ──
    lines.append(f"## Dimension Breakdown")
    lines.append(f"")
    lines.append(f"| Dimension | Earned | Max | Score | Status |")
    lines.append(f"|:---|---:|---:|---:|:---|")
    for s in report.sections:
        lines.append(
            f"| {s.label} | {s.earned} | {s.max_score} | {s.percentage}% | {_band_label(report, s.id)} |"
        )
    lines.append(f"")
    for s in report.sections:
        lines.append(f"- **{s.label}:** {s.recommendation}")
    lines.append(f"")

    # ── How You Compare ──
    lines.append(f"## How You Compare")
    lines.append(f"")
    lines.append(f"| Dimension | You | Avg Advisor | Δ |")
    lines.append(f"|:---|---:|---:|---:|")
    for c in report.comparisons:
        lines.append(f"| {c.label} | {c.score}% | {c.benchmark}% | {c.delta:+d} |")
    lines.append(f"")

    # ── Primary Gap ──
    gap = report.primary_gap
    lines.append(f"## Primary Gap: {gap.label}")
    lines.append(f"")
    lines.append(
        f"Your single biggest vulnerability at **{gap.percentage}%**. {gap.recommendation}"
    )
    lines.append(f"")

    # ── Roadmap ──
    lines.append(f"## 90-Day Priority Roadmap")
    lines.append(f"")
    _append_roadmap(lines, report.weakest)
    lines.append(f"")

    # ── CTA ──
    lines.append(f"---")
    lines.append(f"")
    lines.append(f"### {report.tier.heading}")
    lines.append(f"")
    lines.append(f"[{report.tier.cta}]({report.tier.cta_url})")

    return "\n".join(lines)


def report_filename(lead: Optional[Lead] = None) -> str:
    slug = re.sub(r"[^A-Za-z0-9]+", "-", lead.name).strip("-") if lead else ""
    if slug:
        return f"Breakaway-Blueprint-Results-{slug}.md"
    return "Breakaway-Blueprint-Results.md"


# =====================================================================
# Helpers
# =====================================================================

def _append_roadmap(lines: List[str], weakest: List[SectionResult]):
    for i, s in enumerate(weakest, 1):
        lines.append(f"{i}. **{s.label} — {s.percentage}%**: {s.recommendation}")

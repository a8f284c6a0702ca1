"""
Results API Router
blueprint/routers/results.py

Endpoints:
  GET /api/v1/results/{token}          — Scored report for a completed flow
  GET /api/v1/results/{token}/report   — Markdown report download

Both read only the committed answers; an unfinished flow is redirected to
the start of the assessment.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel
from typing import List
import logging

from blueprint.config import settings
from blueprint.flow.controller import load_lead, load_report
from blueprint.models.enumerations import RecommendationLevel, ReadinessTier, ScoreBand
from blueprint.routers.dependencies import get_scoring_engine
from blueprint.scoring.engine import AssessmentReport, ScoringEngine
from blueprint.scoring.score_bands import score_color
from blueprint.services.report_generator import generate_assessment_report, report_filename
from blueprint.session.context import SessionRegistry, get_session_registry

logger = logging.getLogger(__name__)

router = APIRouter(prefix=f"{settings.API_V1_PREFIX}/results", tags=["Results"])


# =====================================================================
# Response Models
# =====================================================================

class SectionResultResponse(BaseModel):
    id: str
    label: str
    earned: int
    max_score: int
    percentage: int
    level: RecommendationLevel
    recommendation: str
    band: ScoreBand
    color: str


class TierResponse(BaseModel):
    tier: ReadinessTier
    heading: str
    description: str
    cta: str
    cta_url: str


class ComparisonResponse(BaseModel):
    section_id: str
    label: str
    score: int
    benchmark: int
    delta: int


class ResultsResponse(BaseModel):
    flow_token: str
    total_percentage: int
    score: str
    band: ScoreBand
    tier: TierResponse
    sections: List[SectionResultResponse]
    weakest: List[str]
    primary_gap: SectionResultResponse
    comparisons: List[ComparisonResponse]
    lead_captured: bool


# =====================================================================
# Helpers
# =====================================================================

def _section(report: AssessmentReport, s) -> SectionResultResponse:
    band = report.section_bands[s.id]
    return SectionResultResponse(
        id=s.id,
        label=s.label,
        earned=s.earned,
        max_score=s.max_score,
        percentage=s.percentage,
        level=s.level,
        recommendation=s.recommendation,
        band=band,
        color=score_color(s.percentage),
    )


def _to_response(flow_token: str, report: AssessmentReport, lead_captured: bool) -> ResultsResponse:
    return ResultsResponse(
        flow_token=flow_token,
        total_percentage=report.total_percentage,
        score=report.score_label,
        band=report.total_band,
        tier=TierResponse(
            tier=report.tier.tier,
            heading=report.tier.heading,
            description=report.tier.description,
            cta=report.tier.cta,
            cta_url=report.tier.cta_url,
        ),
        sections=[_section(report, s) for s in report.sections],
        weakest=[s.id for s in report.weakest],
        primary_gap=_section(report, report.primary_gap),
        comparisons=[
            ComparisonResponse(
                section_id=c.section_id,
                label=c.label,
                score=c.score,
                benchmark=c.benchmark,
                delta=c.delta,
            )
            for c in report.comparisons
        ],
        lead_captured=lead_captured,
    )


# =====================================================================
# Endpoints
# =====================================================================

@router.get(
    "/{flow_token}",
    response_model=ResultsResponse,
    summary="Get assessment results",
    responses={307: {"description": "Assessment not completed; redirect to /assessment"}},
)
async def get_results(
    flow_token: str,
    registry: SessionRegistry = Depends(get_session_registry),
    engine: ScoringEngine = Depends(get_scoring_engine),
):
    ctx = registry.get(flow_token)
    report = load_report(ctx, engine)
    return _to_response(ctx.flow_token, report, load_lead(ctx) is not None)


@router.get(
    "/{flow_token}/report",
    response_class=PlainTextResponse,
    summary="Download markdown report",
)
async def download_report(
    flow_token: str,
    registry: SessionRegistry = Depends(get_session_registry),
    engine: ScoringEngine = Depends(get_scoring_engine),
):
    ctx = registry.get(flow_token)
    report = load_report(ctx, engine)
    lead = load_lead(ctx)

    content = generate_assessment_report(report, lead)
    filename = report_filename(lead)
    logger.info(f"Report downloaded: token={flow_token} tier={report.tier.label}")
    return PlainTextResponse(
        content,
        media_type="text/markdown",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )

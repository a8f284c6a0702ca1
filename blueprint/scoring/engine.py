# blueprint/scoring/engine.py
"""
Scoring Engine
--------------
Assembles everything the results screen needs from one answer set:

    1. Section results       (section_scorer)
    2. Total percentage      (raw sum over the global maximum)
    3. Readiness tier        (tier_classifier)
    4. Weakest three + primary gap (ranking)
    5. Benchmark comparison and colour bands (display only)

Pure: identical answers always yield an equal report.
"""
import structlog
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from blueprint.models.enumerations import ScoreBand
from blueprint.models.question import QuestionBank
from blueprint.scoring.ranking import primary_gap, rank_sections
from blueprint.scoring.score_bands import score_band
from blueprint.scoring.section_scorer import (
    SectionResult,
    compute_section_results,
    compute_total_percentage,
    section_percentages,
)
from blueprint.scoring.tier_classifier import TierInfo, classify_tier

logger = structlog.get_logger(__name__)

ROADMAP_SIZE = 3


@dataclass(frozen=True)
class BenchmarkComparison:
    """One row of the 'How You Compare' chart."""
    section_id: str
    label: str
    score: int
    benchmark: int

    @property
    def delta(self) -> int:
        return self.score - self.benchmark


@dataclass(frozen=True)
class AssessmentReport:
    """Output of ScoringEngine.score()."""
    total_percentage: int
    tier: TierInfo
    sections: List[SectionResult]
    weakest: List[SectionResult]
    primary_gap: SectionResult
    comparisons: List[BenchmarkComparison]
    total_band: ScoreBand
    section_bands: Dict[str, ScoreBand] = field(default_factory=dict)

    @property
    def score_label(self) -> str:
        return f"{self.total_percentage}/100"


class ScoringEngine:
    """Score a finalized answer set against a question bank."""

    def __init__(self, bank: QuestionBank, cta_url: Optional[str] = None):
        self.bank = bank
        self.cta_url = cta_url

    def score(self, answers: Mapping[str, int]) -> AssessmentReport:
        """
        Args:
            answers: question id → earned score for a completed flow.

        Returns:
            AssessmentReport with section results, total, tier and annotations.
        """
        sections = compute_section_results(answers, self.bank.sections)
        total = compute_total_percentage(answers, self.bank.total_max_score)
        tier = classify_tier(total, self.cta_url)
        weakest = rank_sections(sections, ROADMAP_SIZE)
        gap = primary_gap(sections)

        comparisons = [
            BenchmarkComparison(
                section_id=r.id,
                label=r.label,
                score=r.percentage,
                benchmark=self.bank.benchmark(r.id),
            )
            for r in sections
        ]

        logger.info(
            "report_scored",
            answered=len(answers),
            total_percentage=total,
            tier=tier.label,
            primary_gap=gap.id,
            section_percentages=section_percentages(sections),
        )

        return AssessmentReport(
            total_percentage=total,
            tier=tier,
            sections=sections,
            weakest=weakest,
            primary_gap=gap,
            comparisons=comparisons,
            total_band=score_band(total),
            section_bands={r.id: score_band(r.percentage) for r in sections},
        )

# blueprint/scoring/section_scorer.py
"""
Section Scorer
--------------
Turns an answer set into per-section results and a total percentage.

Formulas:
    earned_s   = Σ answers[q] for q in section s   (missing answers count 0)
    pct_s      = round_half_up(earned_s / max_s × 100)
    total_pct  = round_half_up(Σ answers / total_max × 100)

The total is the raw weighted sum over the global maximum, not the mean of
section percentages; the two diverge whenever section maxima differ.

Recommendation level by pct_s:
    ≥ 70  high
    ≥ 40  mid
    else  low
"""
from dataclasses import dataclass
from typing import Dict, List, Mapping, Sequence

from blueprint.models.enumerations import RecommendationLevel
from blueprint.models.question import Section
from blueprint.scoring.utils import percentage

HIGH_THRESHOLD = 70
MID_THRESHOLD = 40


@dataclass(frozen=True)
class SectionResult:
    """Derived result for one section. Recomputed from the answer set, never stored."""
    id: str
    label: str
    earned: int
    max_score: int
    percentage: int
    recommendation: str
    level: RecommendationLevel


def recommendation_level(pct: int) -> RecommendationLevel:
    if pct >= HIGH_THRESHOLD:
        return RecommendationLevel.HIGH
    if pct >= MID_THRESHOLD:
        return RecommendationLevel.MID
    return RecommendationLevel.LOW


def compute_section_results(
    answers: Mapping[str, int],
    sections: Sequence[Section],
) -> List[SectionResult]:
    """
    Score every section in declaration order.

    Args:
        answers: question id → earned score.
        sections: validated sections; max_score > 0 is guaranteed by Section.

    Returns:
        One SectionResult per section, same order as `sections`.
    """
    results = []
    for s in sections:
        earned = sum(answers.get(qid, 0) for qid in s.question_ids)
        pct = percentage(earned, s.max_score)
        level = recommendation_level(pct)
        results.append(SectionResult(
            id=s.id,
            label=s.label,
            earned=earned,
            max_score=s.max_score,
            percentage=pct,
            recommendation=getattr(s.recommendations, level.value),
            level=level,
        ))
    return results


def compute_total_percentage(answers: Mapping[str, int], total_max_score: int) -> int:
    """Sum every answer value and express it against the global maximum."""
    return percentage(sum(answers.values()), total_max_score)


def section_percentages(results: Sequence[SectionResult]) -> Dict[str, int]:
    return {r.id: r.percentage for r in results}

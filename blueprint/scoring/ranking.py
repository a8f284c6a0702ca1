"""
scoring/ranking.py

Weakest-section ranking for the primary gap and the 90-day roadmap.
"""

from typing import List, Sequence

from blueprint.scoring.section_scorer import SectionResult


def rank_sections(results: Sequence[SectionResult], n: int = 3) -> List[SectionResult]:
    """
    Return the n lowest-percentage sections, ascending.

    sorted() is stable, so ties keep declaration order. The input is not
    mutated.
    """
    return sorted(results, key=lambda r: r.percentage)[:n]


def primary_gap(results: Sequence[SectionResult]) -> SectionResult:
    """Single weakest section. results must be non-empty."""
    if not results:
        raise ValueError("primary_gap needs at least one section result")
    return rank_sections(results, 1)[0]

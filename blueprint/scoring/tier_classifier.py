"""
scoring/tier_classifier.py

Classifies a total percentage into one of four readiness tiers.

Bands (inclusive lower bound, highest matched first):
    [80, 100]  High Readiness
    [60, 80)   Moderate Readiness
    [40, 60)   Early Stage
    [0, 40)    Not Yet Ready
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from blueprint.config import settings
from blueprint.models.enumerations import ReadinessTier


@dataclass(frozen=True)
class TierInfo:
    """Display copy and call-to-action for one tier."""
    tier: ReadinessTier
    heading: str
    description: str
    cta: str
    cta_url: str

    @property
    def label(self) -> str:
        return self.tier.value


# (lower bound, tier, heading, description, cta)
TIER_BANDS: List[Tuple[int, ReadinessTier, str, str, str]] = [
    (
        80,
        ReadinessTier.HIGH,
        "You are a strong candidate for the Breakaway Blueprint™.",
        "Your structural, financial, psychological, and operational indicators align with "
        "advisors who successfully transition to independence. The data supports moving "
        "forward with a structured engagement.",
        "Schedule Your Readiness Audit",
    ),
    (
        60,
        ReadinessTier.MODERATE,
        "Strong fundamentals — with specific gaps to close.",
        "Your profile shows meaningful alignment with independence, but targeted areas need "
        "strengthening before a transition would be structurally sound.",
        "Explore Preparation Pathways",
    ),
    (
        40,
        ReadinessTier.EARLY,
        "Independence is plausible — but not imminent.",
        "Several foundational areas require development. This isn't a disqualification — "
        "it's a diagnosis. With focused preparation, many advisors in this range reach full "
        "readiness within 12–18 months.",
        "Request a Diagnostic Call",
    ),
    (
        0,
        ReadinessTier.NOT_YET,
        "Independence is not the right move right now.",
        "Your current profile suggests significant structural and personal risk. This "
        "assessment is designed to protect you. The action items below will get you moving "
        "in the right direction.",
        "Get the Preparation Playbook",
    ),
]

TIER_RANK = {
    ReadinessTier.NOT_YET: 0,
    ReadinessTier.EARLY: 1,
    ReadinessTier.MODERATE: 2,
    ReadinessTier.HIGH: 3,
}


def classify_tier(pct: int, cta_url: Optional[str] = None) -> TierInfo:
    """
    Map a total percentage in [0, 100] to its tier.

    Raises:
        ValueError: pct outside [0, 100] (caller contract violation).
    """
    if not 0 <= pct <= 100:
        raise ValueError(f"percentage must be in [0, 100], got {pct}")

    url = cta_url or settings.CTA_URL
    for lower, tier, heading, description, cta in TIER_BANDS:
        if pct >= lower:
            return TierInfo(tier=tier, heading=heading, description=description, cta=cta, cta_url=url)
    raise AssertionError("unreachable: lowest band starts at 0")

"""
Question Bank - Breakaway Blueprint
blueprint/data/questions.py

Static questionnaire: 15 questions across 9 readiness dimensions, with the
average-advisor benchmark used for comparison charts. Section max scores
are the sums of their questions' maxima; QuestionBank re-checks this when
the bank is first built.
"""

from functools import lru_cache
from typing import Any, Dict, List

from blueprint.models.question import QuestionBank

# Shared 4-point option ladder scores
_S = (10, 7, 4, 0)


def _options(*labels: str) -> List[Dict[str, Any]]:
    return [{"label": label, "score": score} for label, score in zip(labels, _S)]


SECTIONS: List[Dict[str, Any]] = [
    {
        "id": "client_portability",
        "label": "Client Portability",
        "question_ids": ["aum_follow", "protocol_status"],
        "max_score": 20,
        "recommendations": {
            "high": "Your book is highly portable. Document the client transition sequence now so momentum is not lost on day one.",
            "mid": "Portability is plausible but uneven. Segment clients by relationship depth and build a personal outreach plan for the top tier.",
            "low": "Too much of your book is tied to the firm rather than to you. Deepen direct relationships and review your agreements before any move.",
        },
    },
    {
        "id": "revenue_quality",
        "label": "Revenue Quality",
        "question_ids": ["recurring_share", "fee_model"],
        "max_score": 20,
        "recommendations": {
            "high": "Recurring, fee-based revenue gives you a bankable cash flow profile. Protect it through the transition.",
            "mid": "Shift a larger share of transactional revenue to advisory relationships over the next two quarters.",
            "low": "Revenue depends on transactions. Build a fee-based foundation before independence puts it under pressure.",
        },
    },
    {
        "id": "concentration",
        "label": "Client Concentration",
        "question_ids": ["top_ten_share"],
        "max_score": 10,
        "recommendations": {
            "high": "Revenue is well diversified across households.",
            "mid": "A handful of households drive a large share of revenue. Plan dedicated retention conversations for each of them.",
            "low": "Concentration risk is severe. Losing one or two relationships would threaten the new firm's viability.",
        },
    },
    {
        "id": "financial_runway",
        "label": "Financial Runway",
        "question_ids": ["personal_reserves", "transition_capital"],
        "max_score": 20,
        "recommendations": {
            "high": "You can absorb a slow first year without compromising decisions.",
            "mid": "Extend personal reserves to at least twelve months and line up transition capital before resigning.",
            "low": "A revenue dip during transition would create personal financial stress. Build reserves first.",
        },
    },
    {
        "id": "expense_discipline",
        "label": "Expense Discipline",
        "question_ids": ["expense_plan"],
        "max_score": 10,
        "recommendations": {
            "high": "Your projected cost structure leaves healthy margins.",
            "mid": "Benchmark each projected expense line against independent firms of your size.",
            "low": "Projected expenses are undefined or too high. Build a line-item budget before committing to space and staff.",
        },
    },
    {
        "id": "operations",
        "label": "Operational Readiness",
        "question_ids": ["custody_tech", "staff_plan"],
        "max_score": 20,
        "recommendations": {
            "high": "Custody, technology and staffing decisions are well advanced.",
            "mid": "Shortlist custodians and core technology, and confirm which team members would join you.",
            "low": "Operational groundwork has not started. Expect a longer runway to stand up custody, technology and staff.",
        },
    },
    {
        "id": "continuity",
        "label": "Business Continuity",
        "question_ids": ["succession_plan"],
        "max_score": 10,
        "recommendations": {
            "high": "A documented continuity plan protects clients and valuation.",
            "mid": "Formalise your informal continuity arrangement in writing.",
            "low": "Without a continuity plan, clients and any future buyer carry key-person risk.",
        },
    },
    {
        "id": "mindset",
        "label": "Entrepreneurial Mindset",
        "question_ids": ["risk_comfort", "business_experience"],
        "max_score": 20,
        "recommendations": {
            "high": "You are ready to run a business, not just a practice.",
            "mid": "Spend time with advisors who have already gone independent to test your expectations.",
            "low": "Independence means owning every business decision. Build that muscle before you leave.",
        },
    },
    {
        "id": "commitment",
        "label": "Personal Commitment",
        "question_ids": ["household_support", "timeline"],
        "max_score": 25,
        "recommendations": {
            "high": "Your motivation and household support are aligned with a near-term move.",
            "mid": "Clarify your timeline and discuss the transition's demands openly at home.",
            "low": "Motivation or support is not yet in place. Revisit the decision in six to twelve months.",
        },
    },
]


QUESTIONS: List[Dict[str, Any]] = [
    {
        "id": "aum_follow",
        "section": "client_portability",
        "type": "single",
        "text": "What share of your assets under management would realistically follow you?",
        "options": _options("More than 80%", "60–80%", "40–60%", "Less than 40%"),
    },
    {
        "id": "protocol_status",
        "section": "client_portability",
        "type": "single",
        "text": "What restrictions apply to contacting clients after you leave?",
        "subtitle": "Broker Protocol membership, non-solicits and similar agreements.",
        "options": _options(
            "My firm is in the Protocol and I have no non-solicit",
            "Protocol applies but some clients are restricted",
            "I have a non-solicit I expect to be enforced",
            "I don't know",
        ),
    },
    {
        "id": "recurring_share",
        "section": "revenue_quality",
        "type": "single",
        "text": "What share of your revenue is recurring?",
        "options": _options("More than 80%", "60–80%", "30–60%", "Less than 30%"),
    },
    {
        "id": "fee_model",
        "section": "revenue_quality",
        "type": "single",
        "text": "How is most of your revenue generated?",
        "options": _options(
            "Advisory fees on assets",
            "Mostly fees with some commissions",
            "Roughly even split",
            "Mostly commissions",
        ),
    },
    {
        "id": "top_ten_share",
        "section": "concentration",
        "type": "single",
        "text": "What share of revenue comes from your ten largest households?",
        "options": _options("Less than 20%", "20–35%", "35–50%", "More than 50%"),
    },
    {
        "id": "personal_reserves",
        "section": "financial_runway",
        "type": "single",
        "text": "How many months of personal expenses do you hold in liquid reserves?",
        "options": _options("More than 12 months", "6–12 months", "3–6 months", "Less than 3 months"),
    },
    {
        "id": "transition_capital",
        "section": "financial_runway",
        "type": "single",
        "text": "How would you fund start-up costs?",
        "options": _options(
            "Committed transition package or capital partner",
            "Personal savings cover it",
            "I would need to borrow",
            "I haven't considered it",
        ),
    },
    {
        "id": "expense_plan",
        "section": "expense_discipline",
        "type": "single",
        "text": "What do you expect operating expenses to be as a share of revenue?",
        "options": _options("Under 35%, with a line-item budget", "35–45%", "Above 45%", "I don't know yet"),
    },
    {
        "id": "custody_tech",
        "section": "operations",
        "type": "single",
        "text": "Where are you on custodian and technology selection?",
        "options": _options(
            "Custodian chosen and core technology mapped",
            "Shortlisted custodians",
            "Started researching",
            "Not started",
        ),
    },
    {
        "id": "staff_plan",
        "section": "operations",
        "type": "single",
        "text": "Would your current support staff join you?",
        "options": _options(
            "Yes, confirmed",
            "Likely, not yet discussed in detail",
            "Unsure",
            "No, or I have no support staff",
        ),
    },
    {
        "id": "succession_plan",
        "section": "continuity",
        "type": "single",
        "text": "Do you have a documented continuity or succession plan?",
        "options": _options(
            "Yes, written and funded",
            "Written but not funded",
            "Informal understanding only",
            "No plan",
        ),
    },
    {
        "id": "risk_comfort",
        "section": "mindset",
        "type": "slider",
        "text": "How comfortable are you with variable income during the first year?",
        "subtitle": "1 = very uncomfortable, 10 = completely comfortable",
        "min": 1,
        "max": 10,
        "multiplier": 1,
    },
    {
        "id": "business_experience",
        "section": "mindset",
        "type": "single",
        "text": "Have you run a business or a P&L before?",
        "options": _options(
            "Yes, my own business",
            "Yes, a team or branch P&L",
            "Some budget responsibility",
            "No",
        ),
    },
    {
        "id": "household_support",
        "section": "commitment",
        "type": "slider",
        "text": "How supportive is your household of the move?",
        "subtitle": "1 = opposed, 10 = fully supportive",
        "min": 1,
        "max": 10,
        "multiplier": 1.5,
    },
    {
        "id": "timeline",
        "section": "commitment",
        "type": "single",
        "text": "When would you like to be independent?",
        "options": _options(
            "Within 6 months",
            "6–12 months",
            "12–24 months",
            "Not sure",
        ),
    },
]


# Average advisor percentage per section, display only
BENCHMARKS: Dict[str, int] = {
    "client_portability": 62,
    "revenue_quality": 58,
    "concentration": 55,
    "financial_runway": 48,
    "expense_discipline": 45,
    "operations": 40,
    "continuity": 35,
    "mindset": 57,
    "commitment": 60,
}


@lru_cache
def get_question_bank() -> QuestionBank:
    """Build and validate the bank once per process."""
    return QuestionBank.model_validate(
        {"sections": SECTIONS, "questions": QUESTIONS, "benchmarks": BENCHMARKS}
    )

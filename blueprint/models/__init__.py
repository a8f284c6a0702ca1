from blueprint.models.enumerations import (
    FlowStep,
    ReadinessTier,
    RecommendationLevel,
    ScoreBand,
)
from blueprint.models.lead import Lead, LeadNotification, validate_lead
from blueprint.models.question import (
    ChoiceOption,
    ChoiceQuestion,
    Question,
    QuestionBank,
    Recommendations,
    ScaleQuestion,
    Section,
)

__all__ = [
    "ChoiceOption",
    "ChoiceQuestion",
    "FlowStep",
    "Lead",
    "LeadNotification",
    "Question",
    "QuestionBank",
    "ReadinessTier",
    "RecommendationLevel",
    "Recommendations",
    "ScaleQuestion",
    "ScoreBand",
    "Section",
    "validate_lead",
]

from blueprint.flow.controller import (
    AssessmentFlow,
    capture_lead,
    load_answers,
    load_lead,
    load_report,
    pass_gate,
)

__all__ = [
    "AssessmentFlow",
    "capture_lead",
    "load_answers",
    "load_lead",
    "load_report",
    "pass_gate",
]

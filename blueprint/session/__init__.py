from blueprint.session.context import AssessmentContext, SessionRegistry, get_session_registry
from blueprint.session.store import (
    ANSWERS_KEY,
    LEAD_KEY,
    SELECTIONS_KEY,
    SLIDERS_KEY,
    SessionStore,
)

__all__ = [
    "ANSWERS_KEY",
    "AssessmentContext",
    "LEAD_KEY",
    "SELECTIONS_KEY",
    "SLIDERS_KEY",
    "SessionRegistry",
    "SessionStore",
    "get_session_registry",
]

# tests/conftest.py

"""
Pytest Fixtures - Shared question banks, answer sets and API clients

SMALL BANK REFERENCE (max scores):
- alpha: a1 (single 10/5/0) + a2 (single 10/0)   = 20
- beta:  b1 (slider 1..10 × 3)                   = 30
- gamma: g1 (single 10/5/0)                      = 10
Total max = 60. Benchmarks: alpha 60, beta 40, gamma missing (→ 50).
"""

import pytest
import httpx
from fastapi.testclient import TestClient

from blueprint.main import app
from blueprint.models.question import QuestionBank
from blueprint.routers.dependencies import get_notification_dispatcher
from blueprint.scoring.engine import ScoringEngine
from blueprint.services.notification import NotificationDispatcher
from blueprint.session.context import AssessmentContext

CTA_URL = "https://example.com/contact"


# =============================================================================
# FASTAPI TEST CLIENT FIXTURE
# =============================================================================

@pytest.fixture(scope="module")
def client():
    """Create a TestClient for FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sent_notifications():
    """Requests captured by the mock notification endpoint."""
    return []


@pytest.fixture
def mock_dispatcher(sent_notifications):
    """Dispatcher that posts to an in-memory endpoint instead of the network."""

    def handler(request: httpx.Request) -> httpx.Response:
        sent_notifications.append(request)
        return httpx.Response(200, json={"success": True})

    dispatcher = NotificationDispatcher(
        url="http://notify.test/lead",
        timeout=5,
        transport=httpx.MockTransport(handler),
    )
    app.dependency_overrides[get_notification_dispatcher] = lambda: dispatcher
    yield dispatcher
    app.dependency_overrides.pop(get_notification_dispatcher, None)


# =============================================================================
# QUESTION BANK FIXTURES
# =============================================================================

def _choice(qid, section, scores):
    return {
        "id": qid,
        "section": section,
        "type": "single",
        "text": f"Question {qid}?",
        "options": [{"label": f"{qid}-opt{i}", "score": s} for i, s in enumerate(scores)],
    }


def _recs(label):
    return {"high": f"{label} high", "mid": f"{label} mid", "low": f"{label} low"}


@pytest.fixture
def small_bank_data():
    """Raw definitions for a three-section bank with max scores 20 / 30 / 10."""
    return {
        "sections": [
            {"id": "alpha", "label": "Alpha", "question_ids": ["a1", "a2"], "max_score": 20, "recommendations": _recs("Alpha")},
            {"id": "beta", "label": "Beta", "question_ids": ["b1"], "max_score": 30, "recommendations": _recs("Beta")},
            {"id": "gamma", "label": "Gamma", "question_ids": ["g1"], "max_score": 10, "recommendations": _recs("Gamma")},
        ],
        "questions": [
            _choice("a1", "alpha", [10, 5, 0]),
            _choice("a2", "alpha", [10, 0]),
            {
                "id": "b1",
                "section": "beta",
                "type": "slider",
                "text": "Question b1?",
                "min": 1,
                "max": 10,
                "multiplier": 3,
            },
            _choice("g1", "gamma", [10, 5, 0]),
        ],
        "benchmarks": {"alpha": 60, "beta": 40},
    }


@pytest.fixture
def small_bank(small_bank_data):
    return QuestionBank.model_validate(small_bank_data)


@pytest.fixture
def engine(small_bank):
    return ScoringEngine(small_bank, cta_url=CTA_URL)


@pytest.fixture
def context():
    return AssessmentContext()


# =============================================================================
# ANSWER SET FIXTURES
# =============================================================================

@pytest.fixture
def moderate_answers():
    """alpha 10/20, beta 30/30, gamma 5/10 → 50 / 100 / 50, total 45/60 = 75."""
    return {"a1": 10, "a2": 0, "b1": 30, "g1": 5}


@pytest.fixture
def valid_lead_data():
    return {
        "name": "  Jordan Avery ",
        "email": "jordan.avery@example.com",
        "phone": "555-0100",
        "firm": "Summit Wealth",
    }

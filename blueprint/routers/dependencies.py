"""
Shared FastAPI dependencies
blueprint/routers/dependencies.py
"""
from functools import lru_cache
from typing import Optional

import httpx

from blueprint.config import settings
from blueprint.data import get_question_bank
from blueprint.scoring.engine import ScoringEngine
from blueprint.services.notification import NotificationDispatcher


@lru_cache()
def get_scoring_engine() -> ScoringEngine:
    """Get cached ScoringEngine over the static question bank."""
    return ScoringEngine(get_question_bank(), cta_url=settings.CTA_URL)


@lru_cache()
def get_notification_dispatcher() -> NotificationDispatcher:
    return NotificationDispatcher()


def get_mail_transport() -> Optional[httpx.AsyncBaseTransport]:
    """Transport for the Resend client; None means the default network transport."""
    return None

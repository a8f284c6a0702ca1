"""
Health Check Router - Breakaway Blueprint
blueprint/routers/health.py

The assessment has no external dependencies at request time; the health
check reports whether the question bank builds and which optional
integrations are configured.
"""
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from typing import Dict
from datetime import datetime, timezone
import logging

from blueprint.config import settings
from blueprint.core.exceptions import ConfigurationError
from blueprint.data import get_question_bank

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


#  Schemas


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    dependencies: Dict[str, str]


#  Dependency Checks


def check_question_bank() -> str:
    try:
        bank = get_question_bank()
        return f"healthy ({bank.total_questions} questions)"
    except ConfigurationError as e:
        logger.error(f"Question bank invalid: {e}")
        return f"unhealthy: {e}"


def check_notification() -> str:
    return "configured" if settings.NOTIFICATION_URL else "not configured"


def check_mail_renderer() -> str:
    if settings.RESEND_API_KEY and settings.NOTIFICATION_EMAIL:
        return "configured"
    return "not configured"


#  Endpoints


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health",
    responses={503: {"model": HealthResponse}},
)
async def health_check():
    dependencies = {
        "question_bank": check_question_bank(),
        "notification": check_notification(),
        "mail_renderer": check_mail_renderer(),
    }
    healthy = dependencies["question_bank"].startswith("healthy")

    response = HealthResponse(
        status="healthy" if healthy else "unhealthy",
        timestamp=datetime.now(timezone.utc),
        version=settings.APP_VERSION,
        dependencies=dependencies,
    )
    if not healthy:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=response.model_dump(mode="json"),
        )
    return response

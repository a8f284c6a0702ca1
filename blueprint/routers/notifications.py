"""
Lead Notification Router
blueprint/routers/notifications.py

Endpoints:
  POST /api/v1/notifications/lead   — Render the lead email and send it via Resend

This is the receiving end of the NotificationDispatcher. Configuration
problems and provider failures are reported as 500 with an "error" body.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from typing import Optional
import logging

import httpx

from blueprint.config import Settings, get_settings
from blueprint.models.lead import LeadNotification
from blueprint.routers.dependencies import get_mail_transport
from blueprint.services.mail_renderer import render_lead_email, render_subject

logger = logging.getLogger(__name__)

router = APIRouter(prefix=f"{get_settings().API_V1_PREFIX}/notifications", tags=["Notifications"])


def _error(message: str, details=None) -> JSONResponse:
    content = {"error": message}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


@router.post(
    "/lead",
    summary="Send lead notification email",
    responses={500: {"description": "Mail provider not configured or rejected the message"}},
)
async def send_lead_notification(
    payload: LeadNotification,
    settings: Settings = Depends(get_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_mail_transport),
):
    if not settings.NOTIFICATION_EMAIL:
        logger.error("NOTIFICATION_EMAIL not configured")
        return _error("Email not configured")
    if settings.RESEND_API_KEY is None:
        logger.error("RESEND_API_KEY not configured")
        return _error("Email service not configured")

    message = {
        "from": settings.NOTIFICATION_FROM,
        "to": [settings.NOTIFICATION_EMAIL],
        "subject": render_subject(payload),
        "html": render_lead_email(payload),
    }
    headers = {"Authorization": f"Bearer {settings.RESEND_API_KEY.get_secret_value()}"}

    try:
        async with httpx.AsyncClient(timeout=settings.NOTIFICATION_TIMEOUT_SECONDS, transport=transport) as client:
            response = await client.post(settings.RESEND_API_URL, json=message, headers=headers)
    except httpx.HTTPError as e:
        logger.error(f"Resend request failed: {e}")
        return _error("Internal server error")

    if not response.is_success:
        try:
            details = response.json()
        except ValueError:
            details = response.text[:500]
        logger.error(f"Resend error {response.status_code}: {details}")
        return _error("Failed to send email", details)

    logger.info(f"Lead email sent: tier={payload.tier} score={payload.score}")
    return {"success": True}

"""
Lead Notification Dispatcher
blueprint/services/notification.py

Builds the lead summary sent to the mail renderer and delivers it
best-effort. Delivery is never awaited for correctness: any failure is
logged and dropped, and the results screen is shown regardless.

Transcript line order is part of the contract with the mail renderer:
    one line per question (declaration order)
    blank line
    SCORE: <total>/100 (<tier>)
    <section label>: <pct>%   (declaration order)
"""

import asyncio
import threading
from typing import Mapping, Optional

import httpx
import structlog

from blueprint.config import settings
from blueprint.core.exceptions import NotificationDispatchError
from blueprint.models.lead import PLACEHOLDER, Lead, LeadNotification
from blueprint.models.question import ChoiceQuestion, QuestionBank, ScaleQuestion
from blueprint.scoring.engine import AssessmentReport

logger = structlog.get_logger(__name__)

MISSING = "N/A"


def _answer_line(question, selections: Mapping[str, int], sliders: Mapping[str, int]) -> str:
    if isinstance(question, ScaleQuestion):
        raw = sliders.get(question.id)
        value = MISSING if raw is None else raw
        return f"{question.text}: {value}/{question.max}"
    if isinstance(question, ChoiceQuestion):
        idx = selections.get(question.id)
        if idx is None or not 0 <= idx < len(question.options):
            return f"{question.text}: {MISSING}"
        return f"{question.text}: {question.options[idx].label}"
    raise TypeError(f"Unsupported question type: {type(question).__name__}")


def build_transcript(
    bank: QuestionBank,
    selections: Mapping[str, int],
    sliders: Mapping[str, int],
    report: AssessmentReport,
) -> str:
    """Plain-text transcript of every answer plus the score breakdown."""
    lines = [_answer_line(q, selections, sliders) for q in bank.questions]
    lines.append("")
    lines.append(f"SCORE: {report.score_label} ({report.tier.label})")
    for s in report.sections:
        lines.append(f"{s.label}: {s.percentage}%")
    return "\n".join(lines)


def build_payload(lead: Lead, report: AssessmentReport, transcript: str) -> LeadNotification:
    return LeadNotification(
        name=lead.name,
        email=str(lead.email),
        phone=lead.phone or PLACEHOLDER,
        firm=lead.firm or PLACEHOLDER,
        score=report.score_label,
        tier=report.tier.label,
        answers=transcript,
    )


class NotificationDispatcher:
    """One-shot, fire-and-forget POST of a LeadNotification."""

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url if url is not None else settings.NOTIFICATION_URL
        self.timeout = timeout or settings.NOTIFICATION_TIMEOUT_SECONDS
        self.transport = transport

    async def dispatch(self, payload: LeadNotification) -> bool:
        """
        Send the payload once.

        Returns:
            True on a 2xx response, False otherwise. Never raises.
        """
        if not self.url:
            logger.warning("lead_notification_skipped", reason="NOTIFICATION_URL not configured")
            return False

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(self.url, json=payload.model_dump())
            if not response.is_success:
                raise NotificationDispatchError(
                    f"Notification endpoint returned {response.status_code}: {response.text[:200]}",
                    status_code=response.status_code,
                )
        except (httpx.HTTPError, NotificationDispatchError) as e:
            # Dead letter: the log line is the only record of the lost notification
            logger.error(
                "lead_notification_failed",
                email=payload.email,
                tier=payload.tier,
                score=payload.score,
                error=str(e),
            )
            return False
        except Exception:
            logger.exception("lead_notification_failed", email=payload.email, tier=payload.tier)
            return False

        logger.info("lead_notification_sent", email=payload.email, tier=payload.tier)
        return True

    def dispatch_in_background(self, payload: LeadNotification) -> threading.Thread:
        """Launch dispatch on a daemon thread with its own event loop."""
        thread = threading.Thread(
            target=asyncio.run,
            args=(self.dispatch(payload),),
            name="lead-notification",
            daemon=True,
        )
        thread.start()
        return thread

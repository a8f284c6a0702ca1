"""Services: lead notification delivery and report rendering."""

from blueprint.services.notification import (
    NotificationDispatcher,
    build_payload,
    build_transcript,
)
from blueprint.services.report_generator import generate_assessment_report, report_filename

__all__ = [
    "NotificationDispatcher",
    "build_payload",
    "build_transcript",
    "generate_assessment_report",
    "report_filename",
]

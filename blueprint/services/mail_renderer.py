"""
Lead Mail Renderer
blueprint/services/mail_renderer.py

Formats a LeadNotification as the HTML email sent to the advisory team.
Every interpolated value is HTML-escaped.
"""

from html import escape

from blueprint.models.lead import PLACEHOLDER, LeadNotification

_CELL = "padding:8px;border:1px solid #ddd;"


def _row(label: str, value: str) -> str:
    return (
        f'<tr><td style="{_CELL}font-weight:bold;">{label}</td>'
        f'<td style="{_CELL}">{escape(value or PLACEHOLDER)}</td></tr>'
    )


def render_subject(payload: LeadNotification) -> str:
    return f"BB Assessment: {payload.name} — {payload.tier} ({payload.score})"


def render_lead_email(payload: LeadNotification) -> str:
    rows = "\n".join([
        _row("Name", payload.name),
        _row("Email", payload.email),
        _row("Phone", payload.phone),
        _row("Firm", payload.firm),
        _row("Score", payload.score),
        _row("Tier", payload.tier),
    ])
    return (
        "<h2>New Breakaway Blueprint™ Assessment Submission</h2>\n"
        '<table style="border-collapse:collapse;width:100%;max-width:600px;">\n'
        f"{rows}\n"
        "</table>\n"
        '<h3 style="margin-top:20px;">Full Answers</h3>\n'
        '<pre style="background:#f5f5f5;padding:16px;border-radius:8px;'
        f'font-size:12px;white-space:pre-wrap;">{escape(payload.answers)}</pre>\n'
    )

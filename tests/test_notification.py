# tests/test_notification.py

"""
Notification Tests - transcript, payload, dispatcher and mail rendering
"""

import asyncio
import json

import httpx
import pytest

from blueprint.models.lead import Lead, LeadNotification
from blueprint.services.mail_renderer import render_lead_email, render_subject
from blueprint.services.notification import (
    NotificationDispatcher,
    build_payload,
    build_transcript,
)


@pytest.fixture
def report(engine, moderate_answers):
    return engine.score(moderate_answers)


@pytest.fixture
def payload():
    return LeadNotification(
        name="Sam <b>Lee</b>",
        email="sam@example.com",
        score="75/100",
        tier="Moderate Readiness",
        answers="Question a1?: <script>\n\nSCORE: 75/100 (Moderate Readiness)",
    )


def _run(coro):
    return asyncio.run(coro)


# =============================================================================
# TRANSCRIPT / PAYLOAD
# =============================================================================

class TestTranscript:

    def test_full_transcript(self, small_bank, report):
        text = build_transcript(
            small_bank,
            selections={"a1": 0, "a2": 1, "g1": 1},
            sliders={"b1": 10},
            report=report,
        )
        assert text.split("\n") == [
            "Question a1?: a1-opt0",
            "Question a2?: a2-opt1",
            "Question b1?: 10/10",
            "Question g1?: g1-opt1",
            "",
            "SCORE: 75/100 (Moderate Readiness)",
            "Alpha: 50%",
            "Beta: 100%",
            "Gamma: 50%",
        ]

    def test_missing_answers_are_na(self, small_bank, report):
        lines = build_transcript(small_bank, {}, {}, report).split("\n")
        assert lines[0] == "Question a1?: N/A"
        assert lines[2] == "Question b1?: N/A/10"

    def test_payload_placeholders(self, report):
        lead = Lead(name="Sam", email="sam@example.com")
        payload = build_payload(lead, report, "transcript")
        assert payload.model_dump() == {
            "name": "Sam",
            "email": "sam@example.com",
            "phone": "—",
            "firm": "—",
            "score": "75/100",
            "tier": "Moderate Readiness",
            "answers": "transcript",
        }


# =============================================================================
# DISPATCHER
# =============================================================================

class TestNotificationDispatcher:

    def test_success(self, payload):
        captured = []

        def handler(request):
            captured.append(json.loads(request.content))
            return httpx.Response(200, json={"success": True})

        dispatcher = NotificationDispatcher(
            url="http://notify.test/lead", timeout=5, transport=httpx.MockTransport(handler),
        )
        assert _run(dispatcher.dispatch(payload)) is True
        assert captured[0]["score"] == "75/100"
        assert captured[0]["phone"] == "—"

    def test_non_2xx_is_swallowed(self, payload):
        dispatcher = NotificationDispatcher(
            url="http://notify.test/lead",
            timeout=5,
            transport=httpx.MockTransport(lambda r: httpx.Response(500, json={"error": "boom"})),
        )
        assert _run(dispatcher.dispatch(payload)) is False

    def test_transport_error_is_swallowed(self, payload):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        dispatcher = NotificationDispatcher(
            url="http://notify.test/lead", timeout=5, transport=httpx.MockTransport(handler),
        )
        assert _run(dispatcher.dispatch(payload)) is False

    def test_timeout_is_swallowed(self, payload):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        dispatcher = NotificationDispatcher(
            url="http://notify.test/lead", timeout=5, transport=httpx.MockTransport(handler),
        )
        assert _run(dispatcher.dispatch(payload)) is False

    def test_not_configured_skips(self, payload):
        dispatcher = NotificationDispatcher(url="", timeout=5)
        assert _run(dispatcher.dispatch(payload)) is False

    def test_single_attempt(self, payload):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(503)

        dispatcher = NotificationDispatcher(
            url="http://notify.test/lead", timeout=5, transport=httpx.MockTransport(handler),
        )
        _run(dispatcher.dispatch(payload))
        assert len(calls) == 1

    def test_dispatch_in_background(self, payload):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200)

        dispatcher = NotificationDispatcher(
            url="http://notify.test/lead", timeout=5, transport=httpx.MockTransport(handler),
        )
        thread = dispatcher.dispatch_in_background(payload)
        thread.join(timeout=5)
        assert not thread.is_alive()
        assert len(calls) == 1


# =============================================================================
# MAIL RENDERER
# =============================================================================

class TestMailRenderer:

    def test_subject(self, payload):
        assert render_subject(payload) == "BB Assessment: Sam <b>Lee</b> — Moderate Readiness (75/100)"

    def test_values_escaped(self, payload):
        html = render_lead_email(payload)
        assert "Sam &lt;b&gt;Lee&lt;/b&gt;" in html
        assert "&lt;script&gt;" in html
        assert "<script>" not in html

    def test_table_and_transcript(self, payload):
        html = render_lead_email(payload)
        assert "New Breakaway Blueprint™ Assessment Submission" in html
        for label in ("Name", "Email", "Phone", "Firm", "Score", "Tier"):
            assert f">{label}</td>" in html
        assert "<pre" in html
        assert "—" in html

# streamlit/app.py
# Breakaway Blueprint™ — Readiness Assessment UI

from __future__ import annotations
import logging

import streamlit as st
from dotenv import load_dotenv

load_dotenv()

from blueprint.config import settings
from blueprint.core.exceptions import FlowNotStartedError, LeadValidationError
from blueprint.core.logging_config import configure_logging
from blueprint.data import get_question_bank
from blueprint.flow.controller import (
    AssessmentFlow,
    capture_lead,
    load_answers,
    load_lead,
    load_report,
    pass_gate,
)
from blueprint.models.enumerations import FlowStep
from blueprint.models.question import ChoiceQuestion, ScaleQuestion
from blueprint.scoring.engine import ScoringEngine
from blueprint.scoring.score_bands import score_color
from blueprint.services.notification import NotificationDispatcher
from blueprint.services.report_generator import generate_assessment_report, report_filename
from blueprint.session.context import AssessmentContext

from components.charts import (
    comparison_bar,
    comparison_frame,
    readiness_radar,
    score_gauge,
    section_progress_bars,
)

# =====================================================================
# Page config (must be first Streamlit call)
# =====================================================================

st.set_page_config(
    page_title="Breakaway Blueprint™",
    layout="centered",
    page_icon="🧭",
)

logger = logging.getLogger(__name__)


@st.cache_resource
def _init_logging() -> bool:
    configure_logging()
    return True


@st.cache_resource
def get_engine() -> ScoringEngine:
    return ScoringEngine(get_question_bank(), cta_url=settings.CTA_URL)


@st.cache_resource
def get_dispatcher() -> NotificationDispatcher:
    return NotificationDispatcher()


_init_logging()

# =====================================================================
# Session state
# =====================================================================

if "bb_context" not in st.session_state:
    st.session_state["bb_context"] = AssessmentContext()
if "bb_step" not in st.session_state:
    st.session_state["bb_step"] = FlowStep.LANDING
if "bb_errors" not in st.session_state:
    st.session_state["bb_errors"] = {}


def ctx() -> AssessmentContext:
    return st.session_state["bb_context"]


def go(step: FlowStep) -> None:
    st.session_state["bb_step"] = step
    st.rerun()


def current_flow() -> AssessmentFlow:
    context = ctx()
    if context.flow is None:
        context.flow = AssessmentFlow(get_question_bank(), context)
    return context.flow


def restart() -> None:
    ctx().restart()
    st.session_state["bb_errors"] = {}
    go(FlowStep.ASSESSMENT)


def header() -> None:
    st.caption("BREAKAWAY BLUEPRINT™")


# =====================================================================
# Screens
# =====================================================================

def render_landing() -> None:
    header()
    st.title("Is independence the right move — or the right move *right now*?")
    st.markdown(
        "The Breakaway Blueprint™ is a diagnostic built on the valuation KPIs used in "
        "institutional-grade practice valuations. In a few minutes you will receive:"
    )
    st.markdown(
        "- **A readiness score across 9 dimensions**\n"
        "- **Per-section action items**\n"
        "- **Your primary gap**\n"
        "- **A 90-day priority roadmap**"
    )
    if st.button("Begin Assessment →", type="primary"):
        current_flow()
        go(FlowStep.ASSESSMENT)


def render_assessment() -> None:
    flow = current_flow()
    if flow.frozen:
        go(FlowStep.GATE)

    bank = flow.bank
    q = flow.current_question
    header()
    st.progress(int(flow.progress), text=f"Question {flow.index + 1} of {bank.total_questions}")
    st.caption(bank.section_label(q.section).upper())
    st.subheader(q.text)
    if q.subtitle:
        st.caption(q.subtitle)

    if isinstance(q, ChoiceQuestion):
        selected = flow.selections.get(q.id)
        for i, option in enumerate(q.options):
            label = f"{'● ' if selected == i else ''}{option.label}"
            if st.button(label, key=f"{flow.flow_token}-{q.id}-{i}", use_container_width=True):
                step = flow.select_option(i)
                go(step)
    elif isinstance(q, ScaleQuestion):
        value = st.slider(
            q.text,
            min_value=q.min,
            max_value=q.max,
            value=flow.slider_value(q),
            key=f"{flow.flow_token}-{q.id}",
            label_visibility="collapsed",
        )
        st.markdown(f"### {value}")
        if st.button("Continue →", type="primary"):
            flow.set_slider(value)
            go(flow.next())

    if st.button("← Back"):
        go(flow.back())


def render_gate() -> None:
    header()
    st.title("Unlock Your Results")
    st.markdown("Your answers are saved. Continue to receive your full readiness report.")
    if st.button("Continue →", type="primary"):
        go(pass_gate(ctx()))


def render_capture() -> None:
    load_answers(ctx())
    header()
    st.title("Where should we send your report?")
    errors = st.session_state["bb_errors"]

    with st.form("lead_form"):
        name = st.text_input("Full name *")
        if "name" in errors:
            st.error(errors["name"])
        email = st.text_input("Email *")
        if "email" in errors:
            st.error(errors["email"])
        phone = st.text_input("Phone")
        firm = st.text_input("Current firm")
        submitted = st.form_submit_button("View My Results →", type="primary")

    if submitted:
        try:
            capture_lead(
                ctx(),
                {"name": name, "email": email, "phone": phone, "firm": firm},
                get_engine(),
                dispatcher=get_dispatcher(),
            )
        except LeadValidationError as e:
            st.session_state["bb_errors"] = e.errors
            st.rerun()
        st.session_state["bb_errors"] = {}
        go(FlowStep.RESULTS)


def render_results() -> None:
    report = load_report(ctx(), get_engine())
    lead = load_lead(ctx())
    header()

    # ── Score ──
    st.markdown("## Your Readiness Score")
    c1, c2 = st.columns([1, 1])
    with c1:
        st.plotly_chart(score_gauge(report), use_container_width=True, key="score_gauge")
    with c2:
        st.markdown(
            f"<h3 style='color:{score_color(report.total_percentage)}'>{report.tier.label}</h3>",
            unsafe_allow_html=True,
        )
        st.markdown(f"**{report.tier.heading}**")
        st.markdown(report.tier.description)

    st.divider()

    # ── Profile ──
    st.plotly_chart(readiness_radar(report), use_container_width=True, key="radar")
    st.plotly_chart(section_progress_bars(report), use_container_width=True, key="sections")

    st.markdown("### Section Detail")
    for s in report.sections:
        with st.expander(f"{s.label} — {s.percentage}%"):
            st.markdown(s.recommendation)

    # ── Comparison ──
    st.plotly_chart(comparison_bar(report), use_container_width=True, key="comparison")
    with st.expander("Comparison table"):
        st.dataframe(comparison_frame(report), use_container_width=True, hide_index=True)

    # ── Primary gap + roadmap ──
    gap = report.primary_gap
    st.warning(f"**Primary Gap: {gap.label} ({gap.percentage}%)** — {gap.recommendation}")

    st.markdown("### 90-Day Priority Roadmap")
    for i, s in enumerate(report.weakest, 1):
        st.markdown(f"{i}. **{s.label} — {s.percentage}%**: {s.recommendation}")

    st.divider()
    st.markdown(f"### {report.tier.heading}")
    st.link_button(report.tier.cta, report.tier.cta_url, type="primary")

    c1, c2 = st.columns(2)
    c1.download_button(
        "Download Report",
        data=generate_assessment_report(report, lead),
        file_name=report_filename(lead),
        mime="text/markdown",
    )
    if c2.button("Retake Assessment"):
        restart()


SCREENS = {
    FlowStep.LANDING: render_landing,
    FlowStep.ASSESSMENT: render_assessment,
    FlowStep.GATE: render_gate,
    FlowStep.CAPTURE: render_capture,
    FlowStep.RESULTS: render_results,
}

# =====================================================================
# Main
# =====================================================================

try:
    SCREENS[st.session_state["bb_step"]]()
except FlowNotStartedError as e:
    # Later screens without committed answers go back to the questionnaire
    logger.info(f"Redirecting to assessment: {e}")
    go(FlowStep.ASSESSMENT)

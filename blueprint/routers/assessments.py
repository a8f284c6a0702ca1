"""
Assessment Flow API Router
blueprint/routers/assessments.py

Endpoints:
  POST /api/v1/assessments                    — Start a flow, returns flow_token
  GET  /api/v1/assessments/{token}            — Current step, question and progress
  POST /api/v1/assessments/{token}/select     — Pick an option on a choice question
  POST /api/v1/assessments/{token}/slider     — Set the value of a slider question
  POST /api/v1/assessments/{token}/next       — Continue
  POST /api/v1/assessments/{token}/back       — Go back one question
  POST /api/v1/assessments/{token}/restart    — Discard everything, issue a new token
  POST /api/v1/assessments/{token}/gate       — Payment screen (bypassed)
  POST /api/v1/assessments/{token}/lead       — Capture contact details, notify in background
"""

from fastapi import APIRouter, BackgroundTasks, Depends, status
from pydantic import BaseModel, Field
from typing import Optional
import logging

from blueprint.config import settings
from blueprint.data import get_question_bank
from blueprint.flow.controller import AssessmentFlow, capture_lead, pass_gate
from blueprint.models.enumerations import FlowStep
from blueprint.models.question import Question, QuestionBank, ScaleQuestion
from blueprint.routers.dependencies import get_notification_dispatcher, get_scoring_engine
from blueprint.scoring.engine import ScoringEngine
from blueprint.services.notification import NotificationDispatcher
from blueprint.session.context import AssessmentContext, SessionRegistry, get_session_registry

logger = logging.getLogger(__name__)

router = APIRouter(prefix=f"{settings.API_V1_PREFIX}/assessments", tags=["Assessments"])


# =====================================================================
# Request / Response Models
# =====================================================================

class SelectRequest(BaseModel):
    option_index: int = Field(..., ge=0)


class SliderRequest(BaseModel):
    value: int


class LeadRequest(BaseModel):
    """Raw form fields; validated by the capture step."""
    name: str = ""
    email: str = ""
    phone: Optional[str] = None
    firm: Optional[str] = None


class FlowStateResponse(BaseModel):
    flow_token: str
    step: FlowStep
    index: int
    total_questions: int
    progress: float
    answered: int
    frozen: bool
    question: Optional[Question] = None
    # Option index (choice) or raw value (slider) to pre-select
    current_answer: Optional[int] = None


class LeadCaptureResponse(BaseModel):
    flow_token: str
    step: FlowStep
    name: str
    email: str
    score: str
    tier: str
    notification_scheduled: bool


# =====================================================================
# Helpers
# =====================================================================

def _get_flow(ctx: AssessmentContext, bank: QuestionBank) -> AssessmentFlow:
    if ctx.flow is None:
        ctx.flow = AssessmentFlow(bank, ctx)
    return ctx.flow


def _state(ctx: AssessmentContext, flow: AssessmentFlow) -> FlowStateResponse:
    question = None
    current = None
    if flow.step == FlowStep.ASSESSMENT:
        question = flow.current_question
        if isinstance(question, ScaleQuestion):
            current = flow.slider_value(question)
        else:
            current = flow.selections.get(question.id)

    return FlowStateResponse(
        flow_token=ctx.flow_token,
        step=flow.step,
        index=flow.index,
        total_questions=flow.bank.total_questions,
        progress=round(flow.progress, 1),
        answered=len(flow.answers),
        frozen=flow.frozen,
        question=question,
        current_answer=current,
    )


# =====================================================================
# Endpoints
# =====================================================================

@router.post(
    "",
    response_model=FlowStateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Start an assessment",
)
async def start_assessment(
    registry: SessionRegistry = Depends(get_session_registry),
    bank: QuestionBank = Depends(get_question_bank),
):
    ctx = registry.create()
    flow = _get_flow(ctx, bank)
    logger.info(f"Assessment started: token={ctx.flow_token}")
    return _state(ctx, flow)


@router.get(
    "/{flow_token}",
    response_model=FlowStateResponse,
    summary="Current flow state",
)
async def get_assessment(
    flow_token: str,
    registry: SessionRegistry = Depends(get_session_registry),
    bank: QuestionBank = Depends(get_question_bank),
):
    ctx = registry.get(flow_token)
    return _state(ctx, _get_flow(ctx, bank))


@router.post("/{flow_token}/select", response_model=FlowStateResponse, summary="Choose an option")
async def select_option(
    flow_token: str,
    body: SelectRequest,
    registry: SessionRegistry = Depends(get_session_registry),
    bank: QuestionBank = Depends(get_question_bank),
):
    ctx = registry.get(flow_token)
    flow = _get_flow(ctx, bank)
    flow.select_option(body.option_index)
    return _state(ctx, flow)


@router.post("/{flow_token}/slider", response_model=FlowStateResponse, summary="Set slider value")
async def set_slider(
    flow_token: str,
    body: SliderRequest,
    registry: SessionRegistry = Depends(get_session_registry),
    bank: QuestionBank = Depends(get_question_bank),
):
    ctx = registry.get(flow_token)
    flow = _get_flow(ctx, bank)
    flow.set_slider(body.value)
    return _state(ctx, flow)


@router.post("/{flow_token}/next", response_model=FlowStateResponse, summary="Continue")
async def next_question(
    flow_token: str,
    registry: SessionRegistry = Depends(get_session_registry),
    bank: QuestionBank = Depends(get_question_bank),
):
    ctx = registry.get(flow_token)
    flow = _get_flow(ctx, bank)
    flow.next()
    return _state(ctx, flow)


@router.post("/{flow_token}/back", response_model=FlowStateResponse, summary="Go back")
async def previous_question(
    flow_token: str,
    registry: SessionRegistry = Depends(get_session_registry),
    bank: QuestionBank = Depends(get_question_bank),
):
    ctx = registry.get(flow_token)
    flow = _get_flow(ctx, bank)
    flow.back()
    return _state(ctx, flow)


@router.post("/{flow_token}/restart", response_model=FlowStateResponse, summary="Start over")
async def restart_assessment(
    flow_token: str,
    registry: SessionRegistry = Depends(get_session_registry),
    bank: QuestionBank = Depends(get_question_bank),
):
    ctx = registry.restart(flow_token)
    flow = _get_flow(ctx, bank)
    return _state(ctx, flow)


@router.post("/{flow_token}/gate", response_model=FlowStateResponse, summary="Pass the payment screen")
async def pass_payment_gate(
    flow_token: str,
    registry: SessionRegistry = Depends(get_session_registry),
    bank: QuestionBank = Depends(get_question_bank),
):
    ctx = registry.get(flow_token)
    flow = _get_flow(ctx, bank)
    flow.step = pass_gate(ctx)
    return _state(ctx, flow)


@router.post(
    "/{flow_token}/lead",
    response_model=LeadCaptureResponse,
    summary="Capture lead details",
    description="""
    Validates contact details and stores them with the assessment. The lead
    notification is sent after the response; its outcome never affects the
    result of this call.
    """,
)
async def submit_lead(
    flow_token: str,
    body: LeadRequest,
    background_tasks: BackgroundTasks,
    registry: SessionRegistry = Depends(get_session_registry),
    bank: QuestionBank = Depends(get_question_bank),
    engine: ScoringEngine = Depends(get_scoring_engine),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
):
    ctx = registry.get(flow_token)
    flow = _get_flow(ctx, bank)

    lead, payload = capture_lead(
        ctx,
        body.model_dump(),
        engine,
        schedule=lambda p: background_tasks.add_task(dispatcher.dispatch, p),
    )
    flow.step = FlowStep.RESULTS
    logger.info(f"Lead captured: token={ctx.flow_token} tier={payload.tier}")

    return LeadCaptureResponse(
        flow_token=ctx.flow_token,
        step=flow.step,
        name=lead.name,
        email=str(lead.email),
        score=payload.score,
        tier=payload.tier,
        notification_scheduled=True,
    )

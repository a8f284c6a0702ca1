"""
Flow Controller - Breakaway Blueprint
blueprint/flow/controller.py

Sequential screens: landing → assessment → gate → capture → results.

AssessmentFlow walks the questionnaire one question at a time. Answers are
overwritten freely while it is active; complete() commits scores, option
indices and slider values to the session store in one write and freezes
the flow. The later screens only read the store, and every one of them
redirects to the first step when the answers are missing.
"""

import logging
from typing import Any, Callable, Dict, Optional, Tuple

from blueprint.core.exceptions import FlowFrozenError, InvalidStepError
from blueprint.models.enumerations import FlowStep
from blueprint.models.lead import Lead, LeadNotification, validate_lead
from blueprint.models.question import ChoiceQuestion, QuestionBank, ScaleQuestion
from blueprint.scoring.engine import AssessmentReport, ScoringEngine
from blueprint.services.notification import (
    NotificationDispatcher,
    build_payload,
    build_transcript,
)
from blueprint.session.context import AssessmentContext
from blueprint.session.store import ANSWERS_KEY, LEAD_KEY, SELECTIONS_KEY, SLIDERS_KEY

logger = logging.getLogger(__name__)


class AssessmentFlow:
    """Questionnaire state for one run."""

    def __init__(self, bank: QuestionBank, context: AssessmentContext):
        self.bank = bank
        self.context = context
        self.flow_token = context.flow_token
        self.index = 0
        self.answers: Dict[str, int] = {}
        self.selections: Dict[str, int] = {}
        self.sliders: Dict[str, int] = {}
        self.step = FlowStep.ASSESSMENT
        self.frozen = False

    # ------------------------------------------------------------------
    # Read-only view
    # ------------------------------------------------------------------

    @property
    def current_question(self):
        return self.bank.questions[self.index]

    @property
    def progress(self) -> float:
        return (self.index + 1) / self.bank.total_questions * 100

    @property
    def is_last(self) -> bool:
        return self.index == self.bank.total_questions - 1

    @property
    def is_complete(self) -> bool:
        return all(q.id in self.answers for q in self.bank.questions)

    def slider_value(self, question: ScaleQuestion) -> int:
        """Position to render: the stored raw value or the slider default."""
        return self.sliders.get(question.id, question.default)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def select_option(self, option_index: int) -> FlowStep:
        """Record a choice answer and move on."""
        self._ensure_active()
        q = self.current_question
        if not isinstance(q, ChoiceQuestion):
            raise InvalidStepError(f"Question '{q.id}' is not a choice question")
        if not 0 <= option_index < len(q.options):
            raise InvalidStepError(
                f"Option {option_index} out of range for '{q.id}' ({len(q.options)} options)"
            )
        self.selections[q.id] = option_index
        self.answers[q.id] = q.options[option_index].score
        return self.next()

    def set_slider(self, value: int) -> int:
        """Record a slider position; returns the stored score. Does not advance."""
        self._ensure_active()
        q = self.current_question
        if not isinstance(q, ScaleQuestion):
            raise InvalidStepError(f"Question '{q.id}' is not a slider question")
        if not q.min <= value <= q.max:
            raise InvalidStepError(f"Slider value {value} outside [{q.min}, {q.max}] for '{q.id}'")
        self.sliders[q.id] = value
        self.answers[q.id] = q.score_for(value)
        return self.answers[q.id]

    def next(self) -> FlowStep:
        self._ensure_active()
        q = self.current_question
        if q.id not in self.answers:
            if isinstance(q, ScaleQuestion):
                self.set_slider(q.default)
            else:
                raise InvalidStepError(f"Question '{q.id}' has no answer yet")

        if not self.is_last:
            self.index += 1
            self.step = FlowStep.ASSESSMENT
            return self.step
        self.complete()
        return self.step

    def back(self) -> FlowStep:
        """Retreat one question; answers are kept for re-display."""
        self._ensure_active()
        if self.index == 0:
            self.step = FlowStep.LANDING
        else:
            self.index -= 1
            self.step = FlowStep.ASSESSMENT
        return self.step

    def complete(self) -> None:
        """Commit the three answer groups together and freeze the flow."""
        self._ensure_active()
        missing = [q.id for q in self.bank.questions if q.id not in self.answers]
        if missing:
            raise InvalidStepError(f"Unanswered questions: {missing}")

        self.context.store.commit({
            ANSWERS_KEY: self.answers,
            SELECTIONS_KEY: self.selections,
            SLIDERS_KEY: self.sliders,
        })
        self.frozen = True
        self.step = FlowStep.GATE
        logger.info(f"Assessment completed: token={self.flow_token} answered={len(self.answers)}")

    def _ensure_active(self) -> None:
        self.context.check(self.flow_token)
        if self.frozen:
            raise FlowFrozenError()


# ----------------------------------------------------------------------
# Later screens: read only from the session store
# ----------------------------------------------------------------------

def load_answers(context: AssessmentContext) -> Tuple[Dict[str, int], Dict[str, int], Dict[str, int]]:
    """
    Committed answers, option indices and slider values.

    Raises:
        FlowNotStartedError: the questionnaire was never completed.
    """
    answers = context.store.require(ANSWERS_KEY)
    selections = context.store.get(SELECTIONS_KEY, {})
    sliders = context.store.get(SLIDERS_KEY, {})
    return answers, selections, sliders


def pass_gate(context: AssessmentContext) -> FlowStep:
    """Payment screen. Payment is not collected; completed flows go straight to capture."""
    context.store.require(ANSWERS_KEY)
    return FlowStep.CAPTURE


def load_report(context: AssessmentContext, engine: ScoringEngine) -> AssessmentReport:
    answers, _, _ = load_answers(context)
    return engine.score(answers)


def capture_lead(
    context: AssessmentContext,
    form: Dict[str, Any],
    engine: ScoringEngine,
    dispatcher: Optional[NotificationDispatcher] = None,
    schedule: Optional[Callable[[LeadNotification], Any]] = None,
) -> Tuple[Lead, LeadNotification]:
    """
    Validate contact details, store them and launch the notification.

    The notification is handed to `schedule` (default: the dispatcher's
    background thread) and never awaited. Validation errors propagate as
    LeadValidationError and the flow stays on the capture screen.
    """
    answers, selections, sliders = load_answers(context)
    lead = validate_lead(form)
    context.store.set(LEAD_KEY, lead.model_dump(mode="json"))

    report = engine.score(answers)
    transcript = build_transcript(engine.bank, selections, sliders, report)
    payload = build_payload(lead, report, transcript)

    if schedule is None:
        dispatcher = dispatcher or NotificationDispatcher()
        schedule = dispatcher.dispatch_in_background
    schedule(payload)

    return lead, payload


def load_lead(context: AssessmentContext) -> Optional[Lead]:
    if not context.store.contains(LEAD_KEY):
        return None
    return Lead.model_validate(context.store.get(LEAD_KEY))

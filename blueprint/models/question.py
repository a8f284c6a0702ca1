from pydantic import BaseModel, Field, model_validator
from typing import Annotated, Dict, List, Literal, Optional, Union

from blueprint.core.exceptions import ConfigurationError
from blueprint.scoring.utils import round_half_up


class ChoiceOption(BaseModel):
    """One answer option with its score."""

    label: str = Field(..., min_length=1)
    score: int = Field(..., ge=0)


class QuestionBase(BaseModel):
    """
    Base Pydantic model for a question.
    """

    id: str = Field(..., min_length=1, description="Stable question key")
    section: str = Field(..., min_length=1, description="Owning section id")
    text: str = Field(..., min_length=1)
    subtitle: Optional[str] = None


class ChoiceQuestion(QuestionBase):
    """Question answered by picking one of the options."""

    type: Literal["single"] = "single"
    options: List[ChoiceOption] = Field(..., min_length=1)

    @property
    def max_score(self) -> int:
        return max(o.score for o in self.options)


class ScaleQuestion(QuestionBase):
    """
    Question answered on a numeric slider.

    Stored score = round_half_up(raw value × multiplier).
    """

    type: Literal["slider"] = "slider"
    min: int = 1
    max: int = 10
    multiplier: float = Field(..., gt=0)
    default: int = 5

    @model_validator(mode="after")
    def validate_range(self):
        if not self.min <= self.default <= self.max:
            raise ValueError(
                f"slider {self.id}: default {self.default} outside [{self.min}, {self.max}]"
            )
        return self

    @property
    def max_score(self) -> int:
        return self.score_for(self.max)

    def score_for(self, raw: int) -> int:
        return round_half_up(raw * self.multiplier)


Question = Annotated[Union[ChoiceQuestion, ScaleQuestion], Field(discriminator="type")]


class Recommendations(BaseModel):
    high: str
    mid: str
    low: str


class Section(BaseModel):
    """A named group of questions sharing a sub-score and recommendation text."""

    id: str = Field(..., min_length=1)
    label: str = Field(..., min_length=1)
    question_ids: List[str] = Field(..., min_length=1)
    max_score: int = Field(..., gt=0)
    recommendations: Recommendations


class QuestionBank(BaseModel):
    """
    Ordered sections and questions plus display benchmarks.

    Construction checks the configuration invariants and raises
    ConfigurationError on any violation.
    """

    sections: List[Section]
    questions: List[Question]
    benchmarks: Dict[str, int] = Field(default_factory=dict)

    @model_validator(mode="after")
    def validate_partition(self):
        _check_bank(self)
        return self

    @property
    def total_max_score(self) -> int:
        return sum(s.max_score for s in self.sections)

    @property
    def total_questions(self) -> int:
        return len(self.questions)

    def question(self, question_id: str):
        for q in self.questions:
            if q.id == question_id:
                return q
        raise KeyError(question_id)

    def section_label(self, section_id: str) -> str:
        for s in self.sections:
            if s.id == section_id:
                return s.label
        raise KeyError(section_id)

    def benchmark(self, section_id: str) -> int:
        return self.benchmarks.get(section_id, 50)


def _check_bank(bank: QuestionBank) -> None:
    questions = {}
    for q in bank.questions:
        if q.id in questions:
            raise ConfigurationError(f"Duplicate question id '{q.id}'")
        questions[q.id] = q

    section_ids = [s.id for s in bank.sections]
    if len(set(section_ids)) != len(section_ids):
        raise ConfigurationError("Duplicate section id")

    owner: Dict[str, str] = {}
    for s in bank.sections:
        for qid in s.question_ids:
            if qid not in questions:
                raise ConfigurationError(f"Section '{s.id}' lists unknown question '{qid}'")
            if qid in owner:
                raise ConfigurationError(
                    f"Question '{qid}' is in both '{owner[qid]}' and '{s.id}'"
                )
            if questions[qid].section != s.id:
                raise ConfigurationError(
                    f"Question '{qid}' declares section '{questions[qid].section}' "
                    f"but is listed under '{s.id}'"
                )
            owner[qid] = s.id

        expected = sum(questions[qid].max_score for qid in s.question_ids)
        if s.max_score != expected:
            raise ConfigurationError(
                f"Section '{s.id}' max_score {s.max_score} != sum of question maxima {expected}"
            )

    orphans = [qid for qid in questions if qid not in owner]
    if orphans:
        raise ConfigurationError(f"Questions without a section: {orphans}")

    for sid, value in bank.benchmarks.items():
        if sid not in section_ids:
            raise ConfigurationError(f"Benchmark for unknown section '{sid}'")
        if not 0 <= value <= 100:
            raise ConfigurationError(f"Benchmark for '{sid}' outside [0, 100]: {value}")

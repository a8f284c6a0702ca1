"""
Question Bank Router
blueprint/routers/questions.py

Endpoints:
  GET /api/v1/questions   — Sections, questions, benchmarks and totals
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from typing import Dict, List

from blueprint.config import settings
from blueprint.data import get_question_bank
from blueprint.models.question import Question, QuestionBank, Section

router = APIRouter(prefix=settings.API_V1_PREFIX, tags=["Questions"])


class QuestionBankResponse(BaseModel):
    sections: List[Section]
    questions: List[Question]
    benchmarks: Dict[str, int]
    total_questions: int
    total_max_score: int


@router.get(
    "/questions",
    response_model=QuestionBankResponse,
    summary="Get the question bank",
)
async def get_questions(bank: QuestionBank = Depends(get_question_bank)):
    return QuestionBankResponse(
        sections=bank.sections,
        questions=bank.questions,
        benchmarks=bank.benchmarks,
        total_questions=bank.total_questions,
        total_max_score=bank.total_max_score,
    )

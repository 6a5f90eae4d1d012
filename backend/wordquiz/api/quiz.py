"""Quiz session, attempt history and progress endpoints."""
from __future__ import annotations
from typing import List

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from wordquiz.api.auth import get_current_learner
from wordquiz.api.errors import raise_for_result
from wordquiz.application.quiz_app_service import QuizAppService, QuizResult
from wordquiz.container import get_quiz_app_service

router = APIRouter(tags=["quiz"])


class AnswerBody(BaseModel):
    answer: str


class HintBody(BaseModel):
    revealed: List[int] = []


def _serialize_result(r: QuizResult) -> dict:
    return {
        "word_id": r.word_id,
        "correct": r.outcome.result == 1,
        "weight": r.weight,
        "answer": r.answer,
    }


@router.get("/quiz/next")
def next_word(
    svc: QuizAppService = Depends(get_quiz_app_service),
    learner_id: str = Depends(get_current_learner),
):
    result = svc.next_word(learner_id)
    raise_for_result(result)
    prompt = result.value
    # The word itself stays hidden until answered
    return {
        "word_id": prompt.word.id,
        "speech": prompt.word.speech,
        "meaning": prompt.word.meaning,
        "level": prompt.word.level,
        "sentence": prompt.sentence,
        "length": prompt.length,
        "weight": prompt.weight,
    }


@router.post("/quiz/{word_id}/answer")
def answer(
    word_id: int,
    body: AnswerBody,
    svc: QuizAppService = Depends(get_quiz_app_service),
    learner_id: str = Depends(get_current_learner),
):
    result = svc.submit_answer(learner_id, word_id, body.answer)
    raise_for_result(result)
    return _serialize_result(result.value)


@router.post("/quiz/{word_id}/skip")
def skip(
    word_id: int,
    svc: QuizAppService = Depends(get_quiz_app_service),
    learner_id: str = Depends(get_current_learner),
):
    result = svc.skip(learner_id, word_id)
    raise_for_result(result)
    return _serialize_result(result.value)


@router.post("/quiz/{word_id}/hint")
def hint(
    word_id: int,
    body: HintBody,
    svc: QuizAppService = Depends(get_quiz_app_service),
    learner_id: str = Depends(get_current_learner),
):
    result = svc.hint(learner_id, word_id, body.revealed)
    raise_for_result(result)
    return {"letters": [{"index": i, "letter": c} for i, c in result.value.items()]}


@router.get("/quiz/{word_id}/history")
def history(
    word_id: int,
    svc: QuizAppService = Depends(get_quiz_app_service),
    learner_id: str = Depends(get_current_learner),
):
    result = svc.history(learner_id, word_id)
    raise_for_result(result)
    return [
        {"id": a.id, "word_id": a.word_id, "result": a.result, "created_at": a.created_at}
        for a in result.value
    ]


@router.get("/progress/daily")
def daily_progress(
    days: int = Query(30, ge=1, le=366),
    svc: QuizAppService = Depends(get_quiz_app_service),
    learner_id: str = Depends(get_current_learner),
):
    report = svc.progress(learner_id, days=days)
    return {
        "accuracy": report.accuracy,
        "total_attempts": report.total_attempts,
        "days": [
            {"date": d.day.isoformat(), "attempts": d.attempts, "correct": d.correct}
            for d in report.days
        ],
    }

"""Per-learner word score endpoints."""
from __future__ import annotations
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from wordquiz.api.auth import get_current_learner
from wordquiz.api.errors import raise_for_result
from wordquiz.application.quiz_app_service import QuizAppService
from wordquiz.container import get_quiz_app_service

router = APIRouter(prefix="/scores", tags=["scores"])


class ScoreBody(BaseModel):
    word_id: int
    result: Optional[int] = None
    score: Optional[float] = None


@router.get("/")
def get_scores(
    word_id: Optional[int] = None,
    word_ids: Optional[str] = Query(None, description="Comma-separated word ids"),
    svc: QuizAppService = Depends(get_quiz_app_service),
    learner_id: str = Depends(get_current_learner),
):
    if word_id is not None:
        result = svc.get_scores(learner_id, [word_id])
        raise_for_result(result)
        return {"score": result.value[word_id]}

    if word_ids:
        try:
            ids = [int(part) for part in word_ids.split(",") if part.strip()]
        except ValueError:
            raise HTTPException(status_code=400, detail="word_ids must be comma-separated integers")
        result = svc.get_scores(learner_id, ids)
    else:
        result = svc.get_scores(learner_id)
    raise_for_result(result)
    return {"scores": {str(k): v for k, v in result.value.items()}}


@router.post("/")
def set_score(
    body: ScoreBody,
    svc: QuizAppService = Depends(get_quiz_app_service),
    learner_id: str = Depends(get_current_learner),
):
    result = svc.set_score(learner_id, body.word_id, result=body.result, score=body.score)
    raise_for_result(result)
    return {"success": True, "score": result.value}

"""Word catalogue API endpoints."""
from __future__ import annotations
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from wordquiz.api.auth import get_current_learner
from wordquiz.api.errors import raise_for_result
from wordquiz.application.word_app_service import WordAppService
from wordquiz.container import get_word_app_service
from wordquiz.domain.word.models import VocabularyItem

router = APIRouter(tags=["words"])


# ------------------------------------------------------------------
# Pydantic schemas
# ------------------------------------------------------------------
class WordBody(BaseModel):
    name: str
    speech: str = ""
    meaning: str
    example_sentences: List[str] = []
    level: str


class GenerateBody(BaseModel):
    word: str


# ------------------------------------------------------------------
# Serializers
# ------------------------------------------------------------------
def serialize_word(w: VocabularyItem) -> dict:
    return {
        "id": w.id,
        "name": w.name,
        "speech": w.speech,
        "meaning": w.meaning,
        "example_sentences": w.example_sentences,
        "level": w.level,
        "source": w.source,
        "owner_id": w.owner_id,
        "created_at": w.created_at,
    }


# ------------------------------------------------------------------
# Health check
# ------------------------------------------------------------------
@router.get("/health")
def health():
    return {"status": "ok"}


# ------------------------------------------------------------------
# Word endpoints
# ------------------------------------------------------------------
@router.get("/words/")
def list_words(
    svc: WordAppService = Depends(get_word_app_service),
    learner_id: str = Depends(get_current_learner),
):
    return [serialize_word(w) for w in svc.list_words(learner_id)]


@router.post("/words/", status_code=status.HTTP_201_CREATED)
def add_word(
    body: WordBody,
    svc: WordAppService = Depends(get_word_app_service),
    learner_id: str = Depends(get_current_learner),
):
    result = svc.add_word(owner_id=learner_id, data=body.model_dump())
    raise_for_result(result)
    return serialize_word(result.value)


@router.post("/words/generate")
def generate_word(
    body: GenerateBody,
    svc: WordAppService = Depends(get_word_app_service),
    learner_id: str = Depends(get_current_learner),
):
    """AI-filled draft for a new word. Nothing is saved until POST /words/."""
    result = svc.generate_draft(body.word)
    raise_for_result(result)
    return result.value


@router.get("/words/{word_id}")
def get_word(
    word_id: int,
    svc: WordAppService = Depends(get_word_app_service),
    learner_id: str = Depends(get_current_learner),
):
    word: Optional[VocabularyItem] = svc.get_word(learner_id, word_id)
    if not word:
        raise HTTPException(status_code=404, detail=f"Word '{word_id}' not found")
    return serialize_word(word)

"""Dependency injection container: wires implementations to interfaces."""
from __future__ import annotations
from functools import lru_cache

from wordquiz.application.quiz_app_service import QuizAppService
from wordquiz.application.word_app_service import WordAppService
from wordquiz.integrations.ai_word_generator import AIWordGenerator
from wordquiz.persistence.repositories.sqlite.sqlite_attempt_repository import SqliteAttemptRepository
from wordquiz.persistence.repositories.sqlite.sqlite_score_repository import SqliteScoreRepository
from wordquiz.persistence.repositories.sqlite.sqlite_word_repository import SqliteWordRepository


@lru_cache(maxsize=1)
def get_word_repo() -> SqliteWordRepository:
    return SqliteWordRepository()


@lru_cache(maxsize=1)
def get_score_repo() -> SqliteScoreRepository:
    return SqliteScoreRepository()


@lru_cache(maxsize=1)
def get_attempt_repo() -> SqliteAttemptRepository:
    return SqliteAttemptRepository()


@lru_cache(maxsize=1)
def get_word_app_service() -> WordAppService:
    return WordAppService(repo=get_word_repo(), generator=AIWordGenerator())


@lru_cache(maxsize=1)
def get_quiz_app_service() -> QuizAppService:
    return QuizAppService(
        words=get_word_repo(),
        scores=get_score_repo(),
        attempts=get_attempt_repo(),
    )

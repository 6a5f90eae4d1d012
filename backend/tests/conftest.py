import random
from datetime import datetime, timezone

import pytest

from wordquiz.application.quiz_app_service import QuizAppService
from wordquiz.domain.quiz.scoring import ScorePolicy
from wordquiz.domain.word.models import SOURCE_CUSTOM, SOURCE_OXFORD, VocabularyItem
from wordquiz.persistence.db import init_db
from wordquiz.persistence.repositories.sqlite.sqlite_attempt_repository import SqliteAttemptRepository
from wordquiz.persistence.repositories.sqlite.sqlite_score_repository import SqliteScoreRepository
from wordquiz.persistence.repositories.sqlite.sqlite_word_repository import SqliteWordRepository


def make_word(name, source=SOURCE_OXFORD, owner_id=None, sentences=None):
    return VocabularyItem(
        id=None,
        name=name,
        speech="noun",
        meaning=f"meaning of {name}",
        example_sentences=sentences or [f"I saw a {name} today.", f"The {name} was big."],
        level="B1",
        source=source,
        owner_id=owner_id,
        created_at=datetime.now(timezone.utc).isoformat(),
    )


@pytest.fixture
def db_path(tmp_path):
    path = str(tmp_path / "wordquiz.db")
    init_db(path)
    return path


@pytest.fixture
def word_repo(db_path):
    return SqliteWordRepository(db_path)


@pytest.fixture
def score_repo(db_path):
    return SqliteScoreRepository(db_path)


@pytest.fixture
def attempt_repo(db_path):
    return SqliteAttemptRepository(db_path)


@pytest.fixture
def quiz_service(word_repo, score_repo, attempt_repo):
    return QuizAppService(
        words=word_repo,
        scores=score_repo,
        attempts=attempt_repo,
        policy=ScorePolicy(),
        default_weight=1,
        rng=random.Random(1234),
    )


@pytest.fixture
def catalogue(word_repo):
    """Two shared words plus one custom word owned by 'alice'."""
    return [
        word_repo.add(make_word("apple")),
        word_repo.add(make_word("river")),
        word_repo.add(make_word("lantern", source=SOURCE_CUSTOM, owner_id="alice")),
    ]

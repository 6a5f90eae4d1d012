"""API tests using FastAPI TestClient."""
import random

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from conftest import make_word
from wordquiz import container
from wordquiz.application.quiz_app_service import QuizAppService
from wordquiz.application.word_app_service import WordAppService
from wordquiz.core import config
from wordquiz.integrations.ai_word_generator import WordGenerationError
from wordquiz.main import app


class FakeGenerator:
    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def generate(self, word):
        self.calls.append(word)
        if self.error:
            raise self.error
        return self.reply


def _token(sub):
    return jwt.encode({"sub": sub}, config.AUTH_JWT_SECRET, algorithm=config.AUTH_JWT_ALGORITHM)


def _headers(sub="alice"):
    return {"Authorization": f"Bearer {_token(sub)}"}


@pytest.fixture
def generator():
    return FakeGenerator(reply={
        "speech": "noun",
        "meaning": "A portable light.",
        "example_sentence": "She lit the ____. The ____ swayed.",
        "level": "b2",
    })


@pytest.fixture
def client(word_repo, score_repo, attempt_repo, generator):
    words = WordAppService(repo=word_repo, generator=generator)
    quiz = QuizAppService(
        words=word_repo, scores=score_repo, attempts=attempt_repo,
        default_weight=1, rng=random.Random(42),
    )
    app.dependency_overrides[container.get_word_app_service] = lambda: words
    app.dependency_overrides[container.get_quiz_app_service] = lambda: quiz
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def apple(word_repo):
    return word_repo.add(make_word("apple"))


# ------------------------------------------------------------------
# Health / auth
# ------------------------------------------------------------------
def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_requires_token(client):
    assert client.get("/words/").status_code == 401


def test_rejects_forged_token(client):
    forged = jwt.encode({"sub": "alice"}, "not-the-secret", algorithm="HS256")
    resp = client.get("/words/", headers={"Authorization": f"Bearer {forged}"})
    assert resp.status_code == 401


# ------------------------------------------------------------------
# Words
# ------------------------------------------------------------------
def test_add_and_list_words(client, apple):
    resp = client.post(
        "/words/",
        json={
            "name": "Lantern",
            "speech": "noun",
            "meaning": "A portable light.",
            "example_sentences": ["She lit the ____."],
            "level": "b2",
        },
        headers=_headers("alice"),
    )
    assert resp.status_code == 201
    data = resp.json()
    assert data["name"] == "lantern"
    assert data["level"] == "B2"
    assert data["source"] == "custom"
    assert data["owner_id"] == "alice"

    names_alice = [w["name"] for w in client.get("/words/", headers=_headers("alice")).json()]
    names_bob = [w["name"] for w in client.get("/words/", headers=_headers("bob")).json()]
    assert names_alice == ["apple", "lantern"]
    assert names_bob == ["apple"]

    assert client.get(f"/words/{data['id']}", headers=_headers("bob")).status_code == 404
    assert client.get(f"/words/{data['id']}", headers=_headers("alice")).status_code == 200


def test_add_duplicate_and_invalid(client, apple):
    dup = client.post(
        "/words/",
        json={"name": "Apple", "meaning": "fruit", "example_sentences": ["An ____."], "level": "A1"},
        headers=_headers(),
    )
    assert dup.status_code == 409
    bad = client.post(
        "/words/",
        json={"name": "pear", "meaning": "fruit", "example_sentences": ["A ____."], "level": "Z9"},
        headers=_headers(),
    )
    assert bad.status_code == 400


def test_generate_draft(client, generator):
    resp = client.post("/words/generate", json={"word": " Lan tern "}, headers=_headers())
    assert resp.status_code == 200
    assert resp.json() == {
        "name": "lantern",
        "speech": "noun",
        "meaning": "A portable light.",
        "example_sentences": ["She lit the ____.", "The ____ swayed."],
        "level": "B2",
    }
    assert generator.calls == ["lantern"]


def test_generate_draft_conflict_skips_ai(client, generator, apple):
    resp = client.post("/words/generate", json={"word": "apple"}, headers=_headers())
    assert resp.status_code == 409
    assert generator.calls == []


@pytest.mark.parametrize("kind,status", [
    (WordGenerationError.CONFIGURATION, 500),
    (WordGenerationError.FORMAT, 502),
    (WordGenerationError.UPSTREAM, 503),
])
def test_generate_draft_errors(client, generator, kind, status):
    generator.error = WordGenerationError("boom", kind)
    resp = client.post("/words/generate", json={"word": "lantern"}, headers=_headers())
    assert resp.status_code == status
    assert resp.json()["detail"] == "boom"


# ------------------------------------------------------------------
# Quiz
# ------------------------------------------------------------------
def test_next_word_with_no_words(client):
    resp = client.get("/quiz/next", headers=_headers())
    assert resp.status_code == 404


def test_quiz_round_trip(client, apple):
    prompt = client.get("/quiz/next", headers=_headers()).json()
    assert prompt["word_id"] == apple.id
    assert prompt["length"] == 5
    assert "name" not in prompt
    assert "apple" not in prompt["sentence"]
    assert prompt["weight"] == 1

    for expected in (2, 3, 4):
        resp = client.post(f"/quiz/{apple.id}/answer", json={"answer": "pear"}, headers=_headers())
        assert resp.status_code == 200
        assert resp.json() == {"word_id": apple.id, "correct": False, "weight": expected, "answer": None}

    resp = client.post(f"/quiz/{apple.id}/answer", json={"answer": "APPLE"}, headers=_headers())
    assert resp.json() == {"word_id": apple.id, "correct": True, "weight": 3, "answer": "apple"}

    history = client.get(f"/quiz/{apple.id}/history", headers=_headers()).json()
    assert [h["result"] for h in history] == [0, 0, 0, 1]


def test_skip_and_hint(client, apple):
    resp = client.post(f"/quiz/{apple.id}/skip", headers=_headers())
    assert resp.json()["answer"] == "apple"
    assert resp.json()["weight"] == 2

    hint = client.post(f"/quiz/{apple.id}/hint", json={"revealed": [0]}, headers=_headers()).json()
    assert len(hint["letters"]) == 2
    for item in hint["letters"]:
        assert item["index"] != 0
        assert "apple"[item["index"]] == item["letter"]


def test_unknown_word(client):
    assert client.post("/quiz/999/answer", json={"answer": "x"}, headers=_headers()).status_code == 404


# ------------------------------------------------------------------
# Scores / progress
# ------------------------------------------------------------------
def test_scores_endpoints(client, apple, word_repo):
    river = word_repo.add(make_word("river"))
    assert client.get(f"/scores/?word_id={apple.id}", headers=_headers()).json() == {"score": 1}

    resp = client.post("/scores/", json={"word_id": apple.id, "result": 0}, headers=_headers())
    assert resp.json() == {"success": True, "score": 2}

    resp = client.get(f"/scores/?word_ids={apple.id},{river.id}", headers=_headers())
    assert resp.json() == {"scores": {str(apple.id): 2, str(river.id): 1}}

    assert client.get("/scores/", headers=_headers()).json() == {"scores": {str(apple.id): 2}}
    assert client.get("/scores/?word_ids=a,b", headers=_headers()).status_code == 400
    assert client.post("/scores/", json={"word_id": apple.id, "score": 0}, headers=_headers()).status_code == 400


def test_daily_progress(client, apple):
    client.post(f"/quiz/{apple.id}/answer", json={"answer": "apple"}, headers=_headers())
    resp = client.get("/progress/daily?days=5", headers=_headers())
    assert resp.status_code == 200
    data = resp.json()
    assert len(data["days"]) == 5
    assert data["days"][-1]["attempts"] == 1
    assert data["accuracy"] == 1.0
    assert client.get("/progress/daily?days=0", headers=_headers()).status_code == 422


def test_infinite_score_is_rejected_and_quiz_keeps_working(client, apple):
    resp = client.post(
        "/scores/",
        content=f'{{"word_id": {apple.id}, "score": 1e999}}',
        headers={**_headers(), "Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert "finite" in resp.json()["detail"]
    assert client.get(f"/scores/?word_id={apple.id}", headers=_headers()).json() == {"score": 1}

    assert client.get("/quiz/next", headers=_headers()).status_code == 200
    resp = client.post(f"/quiz/{apple.id}/answer", json={"answer": "pear"}, headers=_headers())
    assert resp.status_code == 200
    assert resp.json()["weight"] == 2


def test_score_lookup_for_unknown_or_hidden_word(client, apple, word_repo):
    lantern = word_repo.add(make_word("lantern", source="custom", owner_id="alice"))
    assert client.get("/scores/?word_id=999", headers=_headers()).status_code == 404
    assert client.get(f"/scores/?word_id={lantern.id}", headers=_headers("bob")).status_code == 404
    assert client.get(f"/scores/?word_ids={apple.id},{lantern.id}", headers=_headers("bob")).status_code == 404
    assert client.get(f"/scores/?word_id={lantern.id}", headers=_headers("alice")).json() == {"score": 1}


def test_generate_draft_with_invalid_level(client, generator, word_repo):
    generator.reply = {**generator.reply, "level": "D1"}
    resp = client.post("/words/generate", json={"word": "lantern"}, headers=_headers())
    assert resp.status_code == 502
    assert "D1" in resp.json()["detail"]
    assert not word_repo.exists_by_name("lantern")
